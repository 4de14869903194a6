"""Protocol for tick history storage backends."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from robotarena.tracing.models import TickRecord


@runtime_checkable
class HistoryStore(Protocol):
    """Where an arena sends one TickRecord per advance().

    Backends decide how much to keep. Lookups for ticks that were never
    recorded, or were evicted, return None rather than raising.

    Usage:
        store = InMemoryHistoryStore(max_ticks=500)
        arena = Arena(history=store)
        for _ in range(600):
            arena.advance()

        store.get_tick_range()                 # (101, 600)
        store.get_snapshot(600)["entities"]    # [{"kind": ..., "x": ...}, ...]
        store.get_events(590, 600)             # absorbed/teleported/collided
    """

    def record_tick(self, record: TickRecord) -> None:
        """Store a finished tick, evicting old ones if the backend is bounded."""
        ...

    def get_tick(self, tick: int) -> TickRecord | None: ...

    def get_snapshot(self, tick: int) -> dict[str, Any] | None:
        """Entity positions after `tick`, without events or timings."""
        ...

    def get_events(self, start_tick: int, end_tick: int) -> list[dict[str, Any]]:
        """Events of every stored tick in [start_tick, end_tick], oldest first."""
        ...

    def get_tick_range(self) -> tuple[int, int] | None:
        """(oldest, newest) stored tick numbers, None while empty."""
        ...

    def latest(self) -> TickRecord | None: ...

    def clear(self) -> None: ...

    @property
    def tick_count(self) -> int:
        """How many ticks are held right now."""
        ...
