from datetime import datetime, timezone

from k8up.meta import ObjectMeta, map_to_namespaced_name
from k8up.snapshot import Snapshot, SnapshotList, SnapshotSpec


def test_spec_defaults_are_unset():
    spec = SnapshotSpec()
    assert (spec.id, spec.date, spec.paths) == (None, None, None)


def test_snapshot_holds_given_values():
    when = datetime(2022, 5, 1, 12, 0, tzinfo=timezone.utc)
    snapshot = Snapshot(
        metadata=ObjectMeta(name="snap", namespace="ns"),
        spec=SnapshotSpec(id="abc", date=when, paths=["/data/pvc1"]),
    )
    assert snapshot.spec.id == "abc"
    assert snapshot.spec.date == when
    assert snapshot.spec.paths == ["/data/pvc1"]
    assert map_to_namespaced_name(snapshot).name == "snap"
    assert map_to_namespaced_name(snapshot).namespace == "ns"


def test_list_keeps_order_and_default_lists_are_independent():
    first = SnapshotList()
    second = SnapshotList()
    first.items.append(Snapshot(metadata=ObjectMeta(name="a")))
    first.items.append(Snapshot(metadata=ObjectMeta(name="b")))
    assert [s.metadata.name for s in first.items] == ["a", "b"]
    assert second.items == []