"""Enumerations and value types of the k8up API."""

from __future__ import annotations

from enum import Enum


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class JobType(_StrEnum):
    """The kinds of jobs k8up deals with."""

    BACKUP = "backup"
    CHECK = "check"
    ARCHIVE = "archive"
    RESTORE = "restore"
    PRUNE = "prune"
    SCHEDULE = "schedule"


class ConditionType(_StrEnum):
    """The condition types set on job resources."""

    COMPLETED = "Completed"
    READY = "Ready"
    SCRUBBED = "Scrubbed"
    PROGRESSING = "Progressing"
    PRE_BACKUP_POD_READY = "PreBackupPodReady"


class ConditionReason(_StrEnum):
    """Programmatic causes of a status condition."""

    READY = "Ready"
    STARTED = "Started"
    FINISHED = "Finished"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CREATION_FAILED = "CreationFailed"
    UPDATE_FAILED = "UpdateFailed"
    DELETION_FAILED = "DeletionFailed"
    RETRIEVAL_FAILED = "RetrievalFailed"
    NO_PRE_BACKUP_PODS_FOUND = "NoPreBackupPodsFound"
    WAITING = "Waiting"


LABEL_K8UP_TYPE = "k8up.io/type"
LEGACY_LABEL_K8UP_TYPE = "k8up.syn.tools/type"
LABEL_MANAGED_BY = "app.kubernetes.io/managed-by"


class ScheduleDefinition(str):
    """A cron-type expression or a special '@' definition."""

    __slots__ = ()

    def is_non_standard(self) -> bool:
        """True if the definition begins with '@', e.g. '@daily'."""
        return self.startswith("@")

    def is_random(self) -> bool:
        """True for special definitions ending in '-random', e.g. '@daily-random'."""
        return self.is_non_standard() and self.endswith("-random")