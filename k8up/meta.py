"""Object metadata and status condition primitives shared by all resources."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, MutableSequence, Optional


class ConditionStatus(str, Enum):
    """The tri-state value of a status condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class Condition:
    """A single observation of one aspect of a resource's state."""

    type: str
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    observed_generation: int = 0
    last_transition_time: Optional[datetime] = None


@dataclass
class ObjectMeta:
    """Identifying metadata of a stored resource."""

    name: str = ""
    namespace: str = ""
    creation_timestamp: Optional[datetime] = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class NamespacedName:
    """A resource name qualified by its namespace."""

    namespace: str = ""
    name: str = ""

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with its version."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"


GROUP_VERSION = GroupVersion(group="k8up.io", version="v1")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def find_status_condition(
    conditions: Iterable[Condition], condition_type: Any
) -> Optional[Condition]:
    """Return the condition of the given type, or None if there is none."""
    wanted = str(condition_type)
    return next((c for c in conditions if str(c.type) == wanted), None)


def set_status_condition(
    conditions: MutableSequence[Condition], new_condition: Condition
) -> None:
    """Add or update the condition of the same type in place.

    The transition time only changes when the status itself changes.
    """
    existing = find_status_condition(conditions, new_condition.type)
    if existing is None:
        added = dataclasses.replace(new_condition)
        if added.last_transition_time is None:
            added.last_transition_time = _now()
        conditions.append(added)
        return

    if existing.status != new_condition.status:
        existing.status = new_condition.status
        existing.last_transition_time = new_condition.last_transition_time or _now()
    existing.reason = new_condition.reason
    existing.message = new_condition.message
    existing.observed_generation = new_condition.observed_generation


def map_to_namespaced_name(obj: Any) -> NamespacedName:
    """Build a NamespacedName from object metadata or an object carrying it."""
    meta = getattr(obj, "metadata", obj)
    return NamespacedName(namespace=meta.namespace, name=meta.name)