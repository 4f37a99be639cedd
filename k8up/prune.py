"""The Prune resource: forgets and prunes snapshots by retention policy."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Optional

from .job_object import HistoryLimits, JobObject, RunnableSpec
from .meta import ObjectMeta
from .status import Status
from .types import JobType


@dataclass
class RetentionPolicy:
    """How many snapshots to keep after a forget and prune.

    ``tags`` and ``hostnames`` filter which snapshots the policy applies to;
    ``keep_tags`` keeps snapshots carrying those tags.
    """

    keep_last: int = 0
    keep_hourly: int = 0
    keep_daily: int = 0
    keep_weekly: int = 0
    keep_monthly: int = 0
    keep_yearly: int = 0
    keep_tags: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    hostnames: list[str] = field(default_factory=list)


@dataclass
class PruneSpec(RunnableSpec):
    """Repository information and retention policy for a prune run.

    ``keep_jobs`` is deprecated in favour of the two specific history limits.
    """

    retention: RetentionPolicy = field(default_factory=RetentionPolicy)
    keep_jobs: Optional[int] = None
    failed_jobs_history_limit: Optional[int] = None
    successful_jobs_history_limit: Optional[int] = None

    def create_object(self, name: str, namespace: str) -> "Prune":
        """Create a Prune with the given name and namespace carrying this spec."""
        return Prune(
            metadata=ObjectMeta(name=name, namespace=namespace),
            spec=dataclasses.replace(self),
        )


@dataclass
class Prune(HistoryLimits, JobObject):
    """A prune job resource."""

    JOB_TYPE = JobType.PRUNE

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: PruneSpec = field(default_factory=PruneSpec)
    status: Status = field(default_factory=Status)


@dataclass
class PruneList:
    """A list of Prune resources."""

    items: list[Prune] = field(default_factory=list)

    def job_objects(self) -> list[Prune]:
        """Return the items as job objects, in list order."""
        return list(self.items)