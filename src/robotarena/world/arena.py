"""Arena: owner of the entity collection and entry point of the tick.

Usage:
    arena = Arena(settings=ArenaSettings(seed=3))

    # Populate
    robot = arena.spawn(EntityKind.WHISKER_ROBOT)
    arena.add_entity(Obstacle(120.0, 80.0, 20.0))

    # Drive once per frame
    arena.advance()
    for entity in arena.list_entities():
        entity.render(surface)
"""

from __future__ import annotations

import logging
import random
import time
from typing import TYPE_CHECKING, Any

from robotarena.config import ArenaSettings
from robotarena.core.entity import Entity, EntityFactory, EntityKind, Surface
from robotarena.core.identity import EntityId
from robotarena.core.types import Copy
from robotarena.storage.local import LocalEntityStore
from robotarena.storage.protocol import EntityStore
from robotarena.tracing.memory import InMemoryHistoryStore
from robotarena.tracing.models import TickRecord
from robotarena.tracing.protocol import HistoryStore
from robotarena.world.result import TickResult
from robotarena.world.view import LiveArenaView

if TYPE_CHECKING:
    from robotarena.scheduling import PhaseScheduler, TickSummary

logger = logging.getLogger(__name__)


class Arena:
    """Bounded plane holding robots and specials, advanced one tick at a time.

    Owns the storage backend, the random generator and the phase scheduler.
    Entities only ever see the arena through a LiveArenaView.

    Args:
        settings: Arena configuration (bounds, margins, seed, history size).
        storage: Entity storage (ordered in-memory list by default).
        scheduler: Phase scheduler (integrate/absorb/teleport/collide by default).
        history: Tick history store. If None and settings.history_size > 0, a
            bounded in-memory store is created.
        rng: Random generator for spawns and teleports. Seeded from
            settings.seed if None.
    """

    def __init__(
        self,
        settings: ArenaSettings | None = None,
        storage: EntityStore | None = None,
        scheduler: PhaseScheduler | None = None,
        history: HistoryStore | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings or ArenaSettings()
        self._storage: EntityStore = storage if storage is not None else LocalEntityStore()
        # Import here to avoid circular dependency at module level
        if scheduler is None:
            from robotarena.scheduling import default_scheduler

            scheduler = default_scheduler()
        self._scheduler = scheduler
        if history is None and self._settings.history_size > 0:
            history = InMemoryHistoryStore(max_ticks=self._settings.history_size)
        self._history = history
        self._rng = rng or random.Random(self._settings.seed)
        self._bounds = self._settings.bounds
        self._factory = EntityFactory(
            rng=self._rng, bounds=self._bounds, margin=self._settings.spawn_margin
        )
        self._view = LiveArenaView(self._storage, self._bounds)
        self._tick = 0
        self._last_summary: TickSummary | None = None

    @classmethod
    def with_defaults(cls, settings: ArenaSettings | None = None, **kwargs: Any) -> Arena:
        """Arena pre-populated with two bump robots and two obstacles."""
        arena = cls(settings=settings, **kwargs)
        for kind in (
            EntityKind.BUMP_SENSOR_ROBOT,
            EntityKind.BUMP_SENSOR_ROBOT,
            EntityKind.OBSTACLE,
            EntityKind.OBSTACLE,
        ):
            arena.spawn(kind)
        return arena

    @property
    def settings(self) -> ArenaSettings:
        return self._settings

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def history(self) -> HistoryStore | None:
        return self._history

    @property
    def tick_count(self) -> int:
        """Number of completed advance() calls."""
        return self._tick

    @property
    def last_summary(self) -> TickSummary | None:
        """Summary of the most recent tick, None before the first advance()."""
        return self._last_summary

    def view(self) -> LiveArenaView:
        """Read-only live view of this arena."""
        return self._view

    # Membership

    def add_entity(self, entity: Entity) -> EntityId:
        """Add an entity between ticks and return its handle."""
        entity_id = self._storage.add(entity)
        logger.debug(f"Added {entity!r} as {entity_id}")
        return entity_id

    def spawn(self, kind: EntityKind) -> EntityId:
        """Create a randomly placed entity of `kind` and add it."""
        return self.add_entity(self._factory.create(kind))

    def remove(self, entity_id: EntityId) -> bool:
        """Remove an entity by handle. Returns False for stale handles."""
        return self._storage.remove(entity_id)

    def remove_entity(self, entity: Entity) -> bool:
        """Remove an entity by identity. Returns False if not present."""
        return self._storage.remove_entity(entity)

    def remove_all(self) -> None:
        """Empty the arena. All outstanding handles become stale."""
        self._storage.clear()

    def replace_all(self, entities: list[Entity]) -> list[EntityId]:
        """Empty the arena and add `entities` in order."""
        self.remove_all()
        return [self.add_entity(entity) for entity in entities]

    def get(self, entity_id: EntityId) -> Entity | None:
        return self._storage.get(entity_id)

    def id_of(self, entity: Entity) -> EntityId | None:
        return self._storage.id_of(entity)

    def list_entities(self) -> list[Entity]:
        """The live entity list, not a copy.

        Callers must not mutate it while iterating; use the arena's add and
        remove methods between ticks instead.
        """
        return self._storage.entities()

    def count_by_kind(self, kind: EntityKind) -> int:
        """Number of entities of exactly this kind."""
        return sum(1 for e in self._storage.entities() if e.kind is kind)

    def count_mobile(self) -> int:
        """Number of mobile entities (all robot kinds)."""
        return sum(1 for e in self._storage.entities() if e.capabilities.mobile)

    def records(self) -> Copy[list[dict[str, Any]]]:
        """Detached (kind, x, y, radius) snapshot of every entity, in order."""
        return [
            {"kind": e.kind.tag, "x": e.x, "y": e.y, "radius": e.radius}
            for e in self._storage.entities()
        ]

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, item: object) -> bool:
        return item in self._storage

    # Tick

    def apply_result(self, result: TickResult) -> None:
        """Apply a phase result: remove every entity it marked."""
        if result.destroys:
            removed = self._storage.remove_many(result.destroys)
            logger.debug(f"Removed {removed} entities after phase")

    def advance(self) -> None:
        """Run one tick: integrate, absorb, teleport, collide.

        Runs to completion without raising for entities that respect their
        invariants (positive radius, finite coordinates).
        """
        summary = self._scheduler.tick(self)
        self._tick += 1
        self._last_summary = summary
        if self._history is not None:
            self._history.record_tick(
                TickRecord(
                    tick=self._tick,
                    timestamp=time.time(),
                    snapshot={"tick": self._tick, "entities": self.records()},
                    events=summary.result.events,
                    phase_timings=summary.phase_timings or None,
                )
            )

    def render(self, surface: Surface) -> None:
        """Render every entity in insertion order."""
        for entity in self._storage.entities():
            entity.render(surface)
