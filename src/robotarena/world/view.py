"""Read-only arena view handed to entities and phases.

Usage:
    view = arena.view()
    for entity in view:
        ...
    obstacles = view.of_capability("sensed")
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from robotarena.core.entity import Capabilities, Entity, EntityKind
from robotarena.core.geometry import Bounds
from robotarena.core.identity import EntityId

if TYPE_CHECKING:
    from robotarena.storage.protocol import EntityStore

_CAPABILITY_NAMES = frozenset(Capabilities.__dataclass_fields__)


class LiveArenaView:
    """Window on the live entity list of one arena.

    Not a snapshot: iterating sees the list as it is at that moment, so an
    entity updating mid-pass sees neighbours that already moved. The view
    offers no mutation methods.

    Args:
        store: Entity storage backing the arena.
        bounds: Arena bounds.
    """

    def __init__(self, store: EntityStore, bounds: Bounds) -> None:
        self._store = store
        self._bounds = bounds

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._store.entities())

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, entity: object) -> bool:
        return entity in self._store

    def of_capability(self, name: str) -> list[Entity]:
        """Entities whose capabilities have flag `name` set, in insertion order.

        Raises:
            ValueError: If `name` is not a Capabilities field.
        """
        if name not in _CAPABILITY_NAMES:
            raise ValueError(
                f"Unknown capability {name!r}; expected one of {sorted(_CAPABILITY_NAMES)}"
            )
        return [e for e in self._store.entities() if getattr(e.capabilities, name)]

    def of_kind(self, kind: EntityKind) -> list[Entity]:
        """Entities of one kind, in insertion order."""
        return [e for e in self._store.entities() if e.kind is kind]

    def id_of(self, entity: Entity) -> EntityId | None:
        """Handle of an entity in this arena, None if not present."""
        return self._store.id_of(entity)

    def label(self, entity: Entity) -> str:
        """Short "Kind#index.generation" label for logs and events."""
        entity_id = self._store.id_of(entity)
        return f"{entity.kind.tag}{entity_id if entity_id is not None else '#?'}"
