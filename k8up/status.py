"""The observed state of a generic k8up job."""

from __future__ import annotations

from dataclasses import dataclass, field

from .meta import Condition, ConditionStatus, find_status_condition, set_status_condition
from .types import ConditionReason, ConditionType


def _matches_any_reason(condition: Condition, *reasons: ConditionReason) -> bool:
    return any(str(condition.reason) == reason.value for reason in reasons)


def _is_pre_backup_failed(condition: Condition) -> bool:
    return not _matches_any_reason(
        condition,
        ConditionReason.SUCCEEDED,
        ConditionReason.WAITING,
        ConditionReason.NO_PRE_BACKUP_PODS_FOUND,
        ConditionReason.READY,
    )


@dataclass
class Status:
    """Flags and conditions the operator uses to decide what to do with a job."""

    started: bool = False
    finished: bool = False
    exclusive: bool = False
    conditions: list[Condition] = field(default_factory=list)

    def has_failed(self) -> bool:
        """True if pre-backup failed, or Completed is true with a reason other than Succeeded."""
        if self.has_failed_pre_backup():
            return True
        completed = find_status_condition(self.conditions, ConditionType.COMPLETED)
        if completed is not None and not _matches_any_reason(completed, ConditionReason.SUCCEEDED):
            return completed.status == ConditionStatus.TRUE
        return False

    def has_succeeded(self) -> bool:
        """True if Completed is true with Succeeded and pre-backup did not fail."""
        if self.has_failed_pre_backup():
            return False
        completed = find_status_condition(self.conditions, ConditionType.COMPLETED)
        if completed is not None and _matches_any_reason(completed, ConditionReason.SUCCEEDED):
            return completed.status == ConditionStatus.TRUE
        return False

    def has_finished(self) -> bool:
        """True if the job has either failed or succeeded."""
        return self.has_failed() or self.has_succeeded()

    def has_failed_pre_backup(self) -> bool:
        """True if PreBackupPodReady is false with one of the failure reasons."""
        condition = find_status_condition(self.conditions, ConditionType.PRE_BACKUP_POD_READY)
        if condition is not None and _is_pre_backup_failed(condition):
            return condition.status == ConditionStatus.FALSE
        return False

    def has_started(self) -> bool:
        """True if Progressing is true with reason Started."""
        condition = find_status_condition(self.conditions, ConditionType.PROGRESSING)
        if condition is not None and _matches_any_reason(condition, ConditionReason.STARTED):
            return condition.status == ConditionStatus.TRUE
        return False

    def is_waiting_for_pre_backup(self) -> bool:
        """True if PreBackupPodReady is unknown with reason Waiting."""
        condition = find_status_condition(self.conditions, ConditionType.PRE_BACKUP_POD_READY)
        if condition is not None and _matches_any_reason(condition, ConditionReason.WAITING):
            return condition.status == ConditionStatus.UNKNOWN
        return False

    def set_started(self, message: str) -> None:
        """Mark the job as ready and progressing."""
        self.started = True
        set_status_condition(
            self.conditions,
            Condition(
                type=ConditionType.READY.value,
                status=ConditionStatus.TRUE,
                reason=ConditionReason.READY.value,
                message=message,
            ),
        )
        set_status_condition(
            self.conditions,
            Condition(
                type=ConditionType.PROGRESSING.value,
                status=ConditionStatus.TRUE,
                reason=ConditionReason.STARTED.value,
                message="The job is progressing",
            ),
        )

    def set_finished(self, message: str) -> None:
        """Mark the job as no longer progressing."""
        self.finished = True
        set_status_condition(
            self.conditions,
            Condition(
                type=ConditionType.PROGRESSING.value,
                status=ConditionStatus.FALSE,
                reason=ConditionReason.FINISHED.value,
                message=message,
            ),
        )