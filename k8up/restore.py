"""The Restore resource: restores a snapshot to S3 or into a volume claim."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from .job_object import HistoryLimits, JobObject, RunnableSpec
from .meta import ObjectMeta
from .status import Status
from .types import JobType


@dataclass
class FolderRestore:
    """Restore into an existing persistent volume claim."""

    claim_name: str = ""
    read_only: bool = False


@dataclass
class RestoreMethod:
    """Where the restore goes; the settings are mutually exclusive."""

    s3: Optional[Any] = None
    folder: Optional[FolderRestore] = None


@dataclass
class RestoreSpec(RunnableSpec):
    """What to restore and where to put it.

    ``keep_jobs`` is deprecated in favour of the two specific history limits.
    """

    restore_method: Optional[RestoreMethod] = None
    restore_filter: str = ""
    snapshot: str = ""
    keep_jobs: Optional[int] = None
    failed_jobs_history_limit: Optional[int] = None
    successful_jobs_history_limit: Optional[int] = None
    tags: list[str] = field(default_factory=list)

    def create_object(self, name: str, namespace: str) -> "Restore":
        """Create a Restore with the given name and namespace carrying this spec."""
        return Restore(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=dataclasses.replace(self),
        )


@dataclass
class Restore(HistoryLimits, JobObject):
    """A restore job resource."""

    JOB_TYPE = JobType.RESTORE

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: RestoreSpec = field(default_factory=RestoreSpec)
    status: Status = field(default_factory=Status)


@dataclass
class RestoreList:
    """A list of Restore resources."""

    items: list[Restore] = field(default_factory=list)

    def job_objects(self) -> list[Restore]:
        """Return the items as job objects, in list order."""
        return list(self.items)