"""Local in-memory entity storage.

Plain list plus two dicts; suitable for single-process use and testing.
Lookups by identity are O(1), removals are O(n) in the list.

Usage:
    storage = LocalEntityStore()
    arena = Arena(storage=storage)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from robotarena.core.entity import Entity
from robotarena.core.identity import EntityId
from robotarena.storage.allocator import EntityAllocator


class LocalEntityStore:
    """Simple in-memory storage keeping entities in insertion order.

    Structure:
        _entities: live ordered list handed out by entities()
        _by_id[entity_id] = entity
        _ids[id(entity)] = entity_id
    """

    def __init__(self) -> None:
        self._allocator = EntityAllocator()
        self._entities: list[Entity] = []
        self._by_id: dict[EntityId, Entity] = {}
        self._ids: dict[int, EntityId] = {}

    def add(self, entity: Entity) -> EntityId:
        """Append an entity and allocate its handle.

        Args:
            entity: Entity to store.

        Returns:
            Newly allocated EntityId.

        Raises:
            ValueError: If this exact object is already stored.
        """
        if id(entity) in self._ids:
            raise ValueError(f"{entity!r} is already in the arena as {self._ids[id(entity)]}")
        entity_id = self._allocator.allocate()
        self._entities.append(entity)
        self._by_id[entity_id] = entity
        self._ids[id(entity)] = entity_id
        return entity_id

    def remove(self, entity_id: EntityId) -> bool:
        """Remove an entity by handle.

        Args:
            entity_id: Handle returned by add().

        Returns:
            True if removed, False if the handle was stale.
        """
        entity = self._by_id.get(entity_id)
        if entity is None:
            return False
        self._forget(entity_id, entity)
        self._entities.remove(entity)
        return True

    def remove_entity(self, entity: Entity) -> bool:
        """Remove an entity by object identity."""
        entity_id = self._ids.get(id(entity))
        if entity_id is None:
            return False
        return self.remove(entity_id)

    def remove_many(self, entities: Iterable[Entity]) -> int:
        """Remove several entities, rebuilding the list once.

        The live list object is kept; only its contents change.
        """
        doomed: set[int] = set()
        for entity in entities:
            entity_id = self._ids.get(id(entity))
            if entity_id is not None and id(entity) not in doomed:
                self._forget(entity_id, entity)
                doomed.add(id(entity))
        if doomed:
            self._entities[:] = [e for e in self._entities if id(e) not in doomed]
        return len(doomed)

    def clear(self) -> None:
        self._entities.clear()
        self._by_id.clear()
        self._ids.clear()
        self._allocator.reset()

    def get(self, entity_id: EntityId) -> Entity | None:
        return self._by_id.get(entity_id)

    def id_of(self, entity: Entity) -> EntityId | None:
        return self._ids.get(id(entity))

    def entities(self) -> list[Entity]:
        """Live ordered list. Callers must not mutate it while iterating."""
        return self._entities

    def items(self) -> Iterator[tuple[EntityId, Entity]]:
        for entity in self._entities:
            yield self._ids[id(entity)], entity

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        if isinstance(entity, EntityId):
            return entity in self._by_id
        return id(entity) in self._ids

    def _forget(self, entity_id: EntityId, entity: Entity) -> None:
        del self._by_id[entity_id]
        del self._ids[id(entity)]
        self._allocator.deallocate(entity_id)
