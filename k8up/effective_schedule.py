"""Persisted schedules generated from randomized schedule definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .meta import ObjectMeta
from .types import JobType, ScheduleDefinition


@dataclass(frozen=True)
class ScheduleRef:
    """A reference to a Schedule resource."""

    name: str = ""
    namespace: str = ""


@dataclass
class EffectiveScheduleSpec:
    """A generated schedule, its origin and the schedules it applies to."""

    generated_schedule: ScheduleDefinition = ScheduleDefinition("")
    original_schedule: ScheduleDefinition = ScheduleDefinition("")
    job_type: Optional[JobType] = None
    schedule_refs: list[ScheduleRef] = field(default_factory=list)

    def add_schedule_ref(self, new_ref: ScheduleRef) -> None:
        """Append the reference unless one with the same name and namespace exists."""
        if any(
            ref.name == new_ref.name and ref.namespace == new_ref.namespace
            for ref in self.schedule_refs
        ):
            return
        self.schedule_refs.append(new_ref)


@dataclass
class EffectiveSchedule:
    """A persisted effective schedule."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EffectiveScheduleSpec = field(default_factory=EffectiveScheduleSpec)


@dataclass
class EffectiveScheduleList:
    """A list of EffectiveSchedule resources."""

    items: list[EffectiveSchedule] = field(default_factory=list)