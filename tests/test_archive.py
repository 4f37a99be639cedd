from k8up.archive import Archive, ArchiveList, ArchiveSpec
from k8up.meta import ObjectMeta
from k8up.types import JobType


def _archive(successful, failed, keep):
    return Archive(
        spec=ArchiveSpec(
            successful_jobs_history_limit=successful,
            failed_jobs_history_limit=failed,
            keep_jobs=keep,
        )
    )


def test_history_limits_specific_values():
    archive = _archive(2, 1, 3)
    assert archive.failed_jobs_history_limit == 1
    assert archive.successful_jobs_history_limit == 2


def test_history_limits_fall_back_to_keep_jobs():
    archive = _archive(None, None, 3)
    assert archive.failed_jobs_history_limit == 3
    assert archive.successful_jobs_history_limit == 3


def test_history_limits_no_fallback():
    archive = _archive(None, None, None)
    assert archive.failed_jobs_history_limit is None
    assert archive.successful_jobs_history_limit is None


def test_job_name():
    archive = Archive(metadata=ObjectMeta(name="job-name"))
    assert archive.job_name == "archive-job-name"
    assert archive.job_type == JobType.ARCHIVE


def test_job_objects_keep_order():
    archive_list = ArchiveList(
        items=[Archive(metadata=ObjectMeta(name="obj1")), Archive(metadata=ObjectMeta(name="obj2"))]
    )
    objects = archive_list.job_objects()
    assert [o.metadata.name for o in objects] == ["obj1", "obj2"]


def test_create_object_returns_archive():
    spec = ArchiveSpec(snapshot="abc", tags=["t"])
    archive = spec.create_object("a1", "ns")
    assert isinstance(archive, Archive)
    assert archive.metadata.name == "a1"
    assert archive.metadata.namespace == "ns"
    assert archive.spec == spec
    assert archive.job_name == "archive-a1"