"""The Archive resource: restores snapshots into an archive location."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from .job_object import HistoryLimits, JobObject
from .meta import ObjectMeta
from .restore import RestoreSpec
from .status import Status
from .types import JobType


@dataclass
class ArchiveSpec(RestoreSpec):
    """The desired state of an Archive; it carries all restore settings."""

    def create_object(self, name: str, namespace: str) -> "Archive":
        """Create an Archive with the given name and namespace carrying this spec."""
        return Archive(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=dataclasses.replace(self),
        )


@dataclass
class Archive(HistoryLimits, JobObject):
    """An archive job resource."""

    JOB_TYPE = JobType.ARCHIVE

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ArchiveSpec = field(default_factory=ArchiveSpec)
    status: Status = field(default_factory=Status)


@dataclass
class ArchiveList:
    """A list of Archive resources."""

    items: list[Archive] = field(default_factory=list)

    def job_objects(self) -> list[Archive]:
        """Return the items as job objects, in list order."""
        return list(self.items)