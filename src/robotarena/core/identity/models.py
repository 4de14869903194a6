"""Entity identity models.

Usage:
    entity = EntityId(index=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityId:
    """Lightweight handle for an entity held by an arena.

    Generation increments every time an index is recycled, so a handle kept
    by the caller (a selection, say) never resolves to a newer entity that
    happens to reuse the same slot.
    """

    index: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.index, self.generation))

    def __str__(self) -> str:
        return f"#{self.index}.{self.generation}"
