"""Phase results: what one phase asks the arena to apply, plus its events.

Phases never remove entities themselves. They mark them in a TickResult and
the arena applies the removals once the phase has finished scanning, so a
removal can never change which pairs the same phase tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from robotarena.core.entity import Entity


@dataclass
class TickResult:
    """Accumulated changes and events from phase execution."""

    destroys: list[Entity] = field(default_factory=list)
    events: list[dict[str, Any]] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if this result contains no removals and no events."""
        return not self.destroys and not self.events

    def destroy(self, entity: Entity) -> None:
        """Mark an entity for removal at the end of the phase (idempotent)."""
        if not any(marked is entity for marked in self.destroys):
            self.destroys.append(entity)

    def record(self, event_type: str, **payload: Any) -> None:
        """Append an event: {"type": event_type, **payload}."""
        self.events.append({"type": event_type, **payload})

    def merge(self, other: TickResult) -> None:
        """Merge other result into this one, mutating self in place.

        Args:
            other: TickResult to merge into this one.
        """
        for entity in other.destroys:
            self.destroy(entity)
        self.events.extend(other.events)
