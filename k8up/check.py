"""The Check resource: verifies the integrity of a repository."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from .job_object import HistoryLimits, JobObject, RunnableSpec
from .meta import ObjectMeta
from .status import Status
from .types import JobType


@dataclass
class CheckSpec(RunnableSpec):
    """Repository information and settings for a check run.

    ``keep_jobs`` is deprecated in favour of the two specific history limits.
    """

    prom_url: str = ""
    keep_jobs: Optional[int] = None
    failed_jobs_history_limit: Optional[int] = None
    successful_jobs_history_limit: Optional[int] = None

    def create_object(self, name: str, namespace: str) -> "Check":
        """Create a Check with the given name and namespace carrying this spec."""
        return Check(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=dataclasses.replace(self),
        )


@dataclass
class Check(HistoryLimits, JobObject):
    """A check job resource."""

    JOB_TYPE = JobType.CHECK

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: CheckSpec = field(default_factory=CheckSpec)
    status: Status = field(default_factory=Status)


@dataclass
class CheckList:
    """A list of Check resources."""

    items: list[Check] = field(default_factory=list)

    def job_objects(self) -> list[Check]:
        """Return the items as job objects, in list order."""
        return list(self.items)