from datetime import datetime, timezone

from k8up.meta import (
    GROUP_VERSION,
    Condition,
    ConditionStatus,
    GroupVersion,
    NamespacedName,
    ObjectMeta,
    find_status_condition,
    map_to_namespaced_name,
    set_status_condition,
)


def test_group_version_string():
    built = GroupVersion(group="k8up.io", version="v1")
    assert str(built) == "k8up.io/v1"
    assert str(GROUP_VERSION) == str(built)


def test_find_status_condition_returns_match_or_none():
    ready = Condition(type="Ready", status=ConditionStatus.TRUE, reason="Ready")
    done = Condition(type="Completed", status=ConditionStatus.FALSE)
    conditions = [ready, done]
    assert find_status_condition(conditions, "Completed") is done
    assert find_status_condition(conditions, "Missing") is None


def test_set_status_condition_appends_with_transition_time():
    conditions = []
    new = Condition(type="Ready", status=ConditionStatus.TRUE, reason="Ready")
    set_status_condition(conditions, new)
    assert len(conditions) == 1
    assert conditions[0].type == "Ready"
    assert conditions[0].last_transition_time is not None
    assert new.last_transition_time is None


def test_set_status_condition_same_status_keeps_transition_time():
    stamp = datetime(2021, 1, 1, tzinfo=timezone.utc)
    conditions = [
        Condition(
            type="Ready",
            status=ConditionStatus.TRUE,
            reason="Ready",
            last_transition_time=stamp,
        )
    ]
    set_status_condition(
        conditions,
        Condition(type="Ready", status=ConditionStatus.TRUE, reason="Started", message="m"),
    )
    assert len(conditions) == 1
    assert conditions[0].last_transition_time == stamp
    assert conditions[0].reason == "Started"
    assert conditions[0].message == "m"


def test_set_status_condition_changed_status_updates_transition_time():
    stamp = datetime(2021, 1, 1, tzinfo=timezone.utc)
    conditions = [
        Condition(type="Ready", status=ConditionStatus.TRUE, last_transition_time=stamp)
    ]
    set_status_condition(conditions, Condition(type="Ready", status=ConditionStatus.FALSE))
    assert conditions[0].status == ConditionStatus.FALSE
    assert conditions[0].last_transition_time > stamp


def test_map_to_namespaced_name_from_meta_and_owner():
    meta = ObjectMeta(name="job", namespace="ns")

    class Owner:
        metadata = meta

    assert map_to_namespaced_name(meta) == NamespacedName(namespace="ns", name="job")
    assert map_to_namespaced_name(Owner()) == map_to_namespaced_name(meta)
    assert str(map_to_namespaced_name(meta)) == "ns/job"


def test_condition_status_string_values():
    assert str(ConditionStatus.UNKNOWN) == "Unknown"
    assert ConditionStatus("True") is ConditionStatus.TRUE