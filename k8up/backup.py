"""The Backup resource: a single backup run against a repository."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional

from .job_object import HistoryLimits, JobObject, RunnableSpec
from .meta import ObjectMeta
from .status import Status
from .types import JobType


@dataclass
class BackupSpec(RunnableSpec):
    """Everything needed to run one backup, including how to reach the repository.

    ``keep_jobs`` is deprecated in favour of the two specific history limits.
    """

    keep_jobs: Optional[int] = None
    failed_jobs_history_limit: Optional[int] = None
    successful_jobs_history_limit: Optional[int] = None
    prom_url: str = ""
    stats_url: str = ""
    tags: list[str] = field(default_factory=list)

    def create_object(self, name: str, namespace: str) -> "Backup":
        """Create a Backup with the given name and namespace carrying this spec."""
        return Backup(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=dataclasses.replace(self),
        )


@dataclass
class Env:
    """A single environment variable."""

    key: str = ""
    value: str = ""


@dataclass
class BackupTemplate:
    """Template values applied to backups."""

    tags: Optional[list[str]] = None
    backend: Optional[Any] = None
    env: Env = field(default_factory=Env)


@dataclass
class Backup(HistoryLimits, JobObject):
    """A backup job resource."""

    JOB_TYPE = JobType.BACKUP

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: BackupSpec = field(default_factory=BackupSpec)
    status: Status = field(default_factory=Status)


@dataclass
class BackupList:
    """A list of Backup resources."""

    items: list[Backup] = field(default_factory=list)

    def job_objects(self) -> list[Backup]:
        """Return the items as job objects, in list order."""
        return list(self.items)