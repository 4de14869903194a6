"""Storage backends."""

from robotarena.storage.allocator import EntityAllocator
from robotarena.storage.local import LocalEntityStore
from robotarena.storage.protocol import EntityStore

__all__ = [
    "EntityAllocator",
    "EntityStore",
    "LocalEntityStore",
]
