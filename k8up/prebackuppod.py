"""The PreBackupPod resource: pods launched for the duration of a backup."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .meta import ObjectMeta


@dataclass
class PreBackupPodSpec:
    """A pod to start before a backup and remove again afterwards.

    ``backup_command`` is placed in the backup command annotation of the pod;
    ``pod`` is the pod template.
    """

    backup_command: str = ""
    file_extension: str = ""
    pod: Optional[dict[str, Any]] = None


@dataclass
class PreBackupPod:
    """A pre-backup pod definition."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: PreBackupPodSpec = field(default_factory=PreBackupPodSpec)


@dataclass
class PreBackupPodList:
    """A list of PreBackupPod resources."""

    items: list[PreBackupPod] = field(default_factory=list)