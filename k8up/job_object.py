"""Common behaviour of resources that are executed as jobs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, ClassVar, Iterable, Optional

from .meta import ObjectMeta
from .status import Status
from .types import JobType


@dataclass
class RunnableSpec:
    """Fields shared by all specs that are eventually run as jobs."""

    backend: Optional[Any] = None
    resources: dict[str, Any] = field(default_factory=dict)
    pod_security_context: Optional[dict[str, Any]] = None


class HistoryLimits:
    """Mixin resolving job history limits from ``self.spec``.

    The specific limit wins; the deprecated ``keep_jobs`` is the fallback.
    """

    spec: Any

    @property
    def failed_jobs_history_limit(self) -> Optional[int]:
        limit = self.spec.failed_jobs_history_limit
        return limit if limit is not None else self.spec.keep_jobs

    @property
    def successful_jobs_history_limit(self) -> Optional[int]:
        limit = self.spec.successful_jobs_history_limit
        return limit if limit is not None else self.spec.keep_jobs


class JobObject:
    """Base for resources that are carried out by a batch job.

    Subclasses set ``JOB_TYPE`` and provide ``metadata``, ``spec`` and ``status``.
    """

    JOB_TYPE: ClassVar[JobType]
    metadata: ObjectMeta
    spec: Any
    status: Any

    @property
    def job_type(self) -> JobType:
        return type(self).JOB_TYPE

    @property
    def job_name(self) -> str:
        """Name of the underlying batch job."""
        return f"{self.job_type.value}-{self.metadata.name}"

    @property
    def job_status(self) -> Status:
        return self.status

    def update_job_status(self, status: Status) -> None:
        self.status = status

    @property
    def resources(self) -> dict[str, Any]:
        return self.spec.resources

    @property
    def pod_security_context(self) -> Optional[dict[str, Any]]:
        return self.spec.pod_security_context


_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _normalized(timestamp: Optional[datetime]) -> datetime:
    if timestamp is None:
        return _EARLIEST
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def job_object_sort_key(obj: JobObject) -> tuple[datetime, str]:
    """Order by creation time, then by name for equal times."""
    return (_normalized(obj.metadata.creation_timestamp), obj.metadata.name)


def sort_job_objects(objects: Iterable[JobObject]) -> list[JobObject]:
    """Return the objects oldest first."""
    return sorted(objects, key=job_object_sort_key)