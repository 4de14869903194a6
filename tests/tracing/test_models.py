"""Tests for tracing data models.

Why these tests exist:
- TickRecord is the core data structure for history storage
- Serialization round-trip must preserve all data correctly
- Optional fields must be handled properly
"""

import pytest

from robotarena import TickRecord


@pytest.mark.parametrize(
    ("kwargs", "has_timings", "has_metadata"),
    [
        (
            {"tick": 42, "timestamp": 1704067200.0, "snapshot": {"tick": 42, "entities": []}},
            False,
            False,
        ),
        (
            {
                "tick": 100,
                "timestamp": 1704067300.0,
                "snapshot": {"tick": 100, "entities": []},
                "events": [{"type": "absorbed", "phase": "absorb", "entity": "WhiskerRobot#1.0"}],
                "phase_timings": {"integrate": 0.5, "collide": 1.2},
                "metadata": {"description": "test run"},
            },
            True,
            True,
        ),
    ],
    ids=["minimal", "full"],
)
def test_to_dict_optional_fields(kwargs, has_timings, has_metadata) -> None:
    """to_dict only includes optional fields that are set."""
    data = TickRecord(**kwargs).to_dict()
    assert ("phase_timings" in data) == has_timings
    assert ("metadata" in data) == has_metadata
    assert data["tick"] == kwargs["tick"]


def test_tick_record_round_trip() -> None:
    """TickRecord survives serialization round-trip."""
    original = TickRecord(
        tick=42,
        timestamp=1704067200.123,
        snapshot={
            "tick": 42,
            "entities": [{"kind": "Obstacle", "x": 1.0, "y": 2.0, "radius": 3.0}],
        },
        events=[{"type": "collided", "phase": "collide"}],
        phase_timings={"integrate": 15.5},
        metadata={"run_id": "abc123"},
    )

    restored = TickRecord.from_dict(original.to_dict())

    assert restored == original


def test_from_dict_minimal() -> None:
    record = TickRecord.from_dict({"tick": 10, "timestamp": 500.0, "snapshot": {}})
    assert record.events == []
    assert record.phase_timings is None
    assert record.metadata is None
    assert record.entity_count == 0


def test_events_of_and_entity_count() -> None:
    record = TickRecord(
        tick=1,
        timestamp=0.0,
        snapshot={"tick": 1, "entities": [{"kind": "Obstacle"}, {"kind": "BlackHole"}]},
        events=[{"type": "collided"}, {"type": "absorbed"}, {"type": "collided"}],
    )
    assert len(record.events_of("collided")) == 2
    assert record.events_of("teleported") == []
    assert record.entity_count == 2
