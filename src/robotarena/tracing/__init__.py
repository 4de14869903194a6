"""Tracing infrastructure for recording and replaying arena ticks.

Usage:
    from robotarena.tracing import InMemoryHistoryStore

    store = InMemoryHistoryStore(max_ticks=500)
    arena = Arena(history=store)
    arena.advance()
    store.latest().events_of("absorbed")
"""

from robotarena.tracing.memory import InMemoryHistoryStore
from robotarena.tracing.models import TickRecord
from robotarena.tracing.protocol import HistoryStore

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "TickRecord",
]
