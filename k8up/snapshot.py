"""The Snapshot resource: describes a restic snapshot so it can be restored."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .meta import ObjectMeta


@dataclass
class SnapshotSpec:
    """Identifier, date and paths of a restic snapshot."""

    id: Optional[str] = None
    date: Optional[datetime] = None
    paths: Optional[list[str]] = None


@dataclass
class Snapshot:
    """A restic snapshot known to the cluster."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: SnapshotSpec = field(default_factory=SnapshotSpec)


@dataclass
class SnapshotList:
    """A list of Snapshot resources."""

    items: list[Snapshot] = field(default_factory=list)