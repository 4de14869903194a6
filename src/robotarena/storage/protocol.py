"""Storage protocol for swappable entity collections.

Usage:
    storage = LocalEntityStore()
    arena = Arena(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol

from robotarena.core.entity import Entity
from robotarena.core.identity import EntityId


class EntityStore(Protocol):
    """Ordered entity collection. Insertion order is the only order."""

    def add(self, entity: Entity) -> EntityId:
        """Append entity and return its handle."""
        ...

    def remove(self, entity_id: EntityId) -> bool:
        """Remove by handle. Returns True if it existed."""
        ...

    def remove_entity(self, entity: Entity) -> bool:
        """Remove by object identity. Returns True if it existed."""
        ...

    def remove_many(self, entities: Iterable[Entity]) -> int:
        """Remove several entities in one sweep. Returns how many were present."""
        ...

    def clear(self) -> None:
        """Remove every entity."""
        ...

    def get(self, entity_id: EntityId) -> Entity | None:
        """Resolve a handle, None if stale."""
        ...

    def id_of(self, entity: Entity) -> EntityId | None:
        """Handle of a stored entity, None if not stored."""
        ...

    def entities(self) -> list[Entity]:
        """Live ordered list (not a copy)."""
        ...

    def items(self) -> Iterator[tuple[EntityId, Entity]]:
        """Iterate (handle, entity) pairs in insertion order."""
        ...

    def __len__(self) -> int: ...

    def __contains__(self, entity: object) -> bool: ...
