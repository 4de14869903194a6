"""Tests for TickResult buffering and merging."""

from robotarena import BumpSensorRobot, TickResult


def test_empty_result():
    assert TickResult().is_empty()


def test_destroy_is_idempotent_by_identity():
    result = TickResult()
    robot = BumpSensorRobot(0.0, 0.0, 1.0, speed=1.0)
    twin = BumpSensorRobot(0.0, 0.0, 1.0, speed=1.0)

    result.destroy(robot)
    result.destroy(robot)
    result.destroy(twin)

    assert result.destroys == [robot, twin]
    assert not result.is_empty()


def test_record_builds_typed_event():
    result = TickResult()
    result.record("absorbed", entity="WhiskerRobot#1.0", by="BlackHole#0.0")
    assert result.events == [
        {"type": "absorbed", "entity": "WhiskerRobot#1.0", "by": "BlackHole#0.0"}
    ]


def test_merge_preserves_order_and_dedupes_destroys():
    robot = BumpSensorRobot(0.0, 0.0, 1.0, speed=1.0)
    first = TickResult()
    first.destroy(robot)
    first.record("a")
    second = TickResult()
    second.destroy(robot)
    second.record("b")

    first.merge(second)

    assert first.destroys == [robot]
    assert [e["type"] for e in first.events] == ["a", "b"]
