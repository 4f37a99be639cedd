from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import ClassVar, Optional

from k8up.job_object import (
    HistoryLimits,
    JobObject,
    RunnableSpec,
    job_object_sort_key,
    sort_job_objects,
)
from k8up.meta import ObjectMeta
from k8up.status import Status
from k8up.types import JobType


@dataclass
class _Spec(RunnableSpec):
    keep_jobs: Optional[int] = None
    failed_jobs_history_limit: Optional[int] = None
    successful_jobs_history_limit: Optional[int] = None


@dataclass
class _Job(HistoryLimits, JobObject):
    JOB_TYPE: ClassVar[JobType] = JobType.BACKUP
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: _Spec = field(default_factory=_Spec)
    status: Status = field(default_factory=Status)


def _job(name, created=None):
    return _Job(metadata=ObjectMeta(name=name, creation_timestamp=created))


def test_job_name():
    assert _job("job-name").job_name == "backup-job-name"
    assert _job("x").job_type is JobType.BACKUP


def test_history_limits_specific_values():
    job = _Job(
        metadata=ObjectMeta(name="limited"),
        spec=_Spec(keep_jobs=3, failed_jobs_history_limit=1, successful_jobs_history_limit=2),
    )
    assert job.failed_jobs_history_limit == 1
    assert job.successful_jobs_history_limit == 2


def test_history_limits_fall_back_to_keep_jobs():
    job = _Job(metadata=ObjectMeta(name="fallback"), spec=_Spec(keep_jobs=3))
    assert job.failed_jobs_history_limit == 3
    assert job.successful_jobs_history_limit == 3


def test_history_limits_without_any_value():
    job = _Job(metadata=ObjectMeta(name="unlimited"), status=Status())
    assert job.failed_jobs_history_limit is None
    assert job.successful_jobs_history_limit is None


def test_status_and_resources_accessors():
    job = _Job(spec=_Spec(resources={"limits": {"cpu": "1"}}, pod_security_context={"runAsUser": 1}))
    new_status = Status(started=True)
    job.update_job_status(new_status)
    assert job.job_status is new_status
    assert job.resources == {"limits": {"cpu": "1"}}
    assert job.pod_security_context == {"runAsUser": 1}


def test_sort_by_creation_time_then_name():
    base = datetime(2022, 5, 1, tzinfo=timezone.utc)
    late = _job("a", base + timedelta(hours=1))
    early_b = _job("b", base)
    early_a = _job("c", base)
    early_a.metadata.name = "aa"
    result = sort_job_objects([late, early_b, early_a])
    assert [j.metadata.name for j in result] == ["aa", "b", "a"]


def test_sort_handles_missing_and_naive_timestamps():
    naive = _job("naive", datetime(2022, 5, 1))
    aware = _job("aware", datetime(2022, 5, 2, tzinfo=timezone.utc))
    missing = _job("missing")
    result = sort_job_objects([aware, naive, missing])
    assert result == [missing, naive, aware]
    assert job_object_sort_key(missing) < job_object_sort_key(naive)