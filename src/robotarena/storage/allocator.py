"""Handle allocation for entities held by an arena."""

from __future__ import annotations

from robotarena.core.identity import EntityId


class EntityAllocator:
    """Hands out EntityId handles and recycles their indices.

    A released index goes on a free list with its generation bumped, so a
    handle taken before the release (a UI selection, say) stays dead even
    after the slot is reused.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}
        self._alive: set[int] = set()

    def allocate(self) -> EntityId:
        """Next handle, preferring the most recently released slot."""
        if self._free:
            index, generation = self._free.pop()
        else:
            index, generation = self._next_index, 0
            self._next_index += 1
        self._generations[index] = generation
        self._alive.add(index)
        return EntityId(index=index, generation=generation)

    def deallocate(self, entity: EntityId) -> None:
        """Release a live handle.

        Raises:
            ValueError: If the handle was already released or never issued.
        """
        if not self.is_alive(entity):
            raise ValueError(f"Cannot deallocate {entity}: not alive")
        self._release(entity.index)

    def is_alive(self, entity: EntityId) -> bool:
        """True while `entity` is the current holder of its index."""
        if entity.index not in self._alive:
            return False
        return self._generations[entity.index] == entity.generation

    def reset(self) -> None:
        """Release every live handle at once. Old handles stay dead."""
        for index in sorted(self._alive, reverse=True):
            self._release(index)

    def _release(self, index: int) -> None:
        generation = self._generations[index] + 1
        self._generations[index] = generation
        self._alive.discard(index)
        self._free.append((index, generation))
