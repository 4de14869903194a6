"""Entity identity primitives."""

from robotarena.core.identity.models import EntityId

__all__ = [
    "EntityId",
]
