"""Tick record: what the arena hands to a HistoryStore after each advance().

Snapshots are plain JSON-serialisable dicts so a history can be dumped to
disk or shipped to a viewer without touching entity classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_OPTIONAL_KEYS = ("phase_timings", "metadata")


@dataclass(slots=True)
class TickRecord:
    """State and events of one arena tick.

    Attributes:
        tick: Tick number (1 for the first advance()).
        timestamp: Unix time at which the tick finished.
        snapshot: {"tick": n, "entities": [{"kind", "x", "y", "radius"}, ...]}.
        events: Phase events in the order they fired. Each carries a "type"
            ("absorbed", "teleported", "collided") and the "phase" name.
        phase_timings: Phase name -> milliseconds, None when timing is off.
        metadata: Free-form annotations.

    Example:
        TickRecord(
            tick=42,
            timestamp=1704067200.0,
            snapshot={"tick": 42, "entities": [...]},
            events=[{"type": "absorbed", "phase": "absorb", "entity": "WhiskerRobot#3.0"}],
            phase_timings={"integrate": 0.05, "collide": 0.12},
        )
    """

    tick: int
    timestamp: float
    snapshot: dict[str, Any]
    events: list[dict[str, Any]] = field(default_factory=list)
    phase_timings: dict[str, float] | None = None
    metadata: dict[str, Any] | None = None

    def events_of(self, event_type: str) -> list[dict[str, Any]]:
        return [event for event in self.events if event.get("type") == event_type]

    @property
    def entity_count(self) -> int:
        """Entities alive once the tick finished."""
        return len(self.snapshot.get("entities", ()))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready dict; unset optional fields are left out."""
        data = {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "snapshot": self.snapshot,
            "events": self.events,
        }
        for key in _OPTIONAL_KEYS:
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TickRecord:
        """Inverse of to_dict(). Missing events default to an empty list."""
        optional = {key: data.get(key) for key in _OPTIONAL_KEYS}
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            snapshot=data["snapshot"],
            events=list(data.get("events", ())),
            **optional,
        )
