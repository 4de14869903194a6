"""Entity kind registry and decorator.

Usage:
    @entity_kind(EntityKind.OBSTACLE)
    class Obstacle(Entity):
        capabilities = Capabilities(collides_physically=True, sensed=True)

    get_registry().get_type(EntityKind.OBSTACLE)  # -> Obstacle
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TypeVar

from robotarena.core.entity.base import Entity
from robotarena.core.entity.models import EntityKind

E = TypeVar("E", bound=type[Entity])


@dataclass(slots=True, frozen=True)
class KindMeta:
    """Metadata for a registered entity class."""

    kind: EntityKind
    type_name: str


class EntityRegistry:
    """Process-local registry mapping entity kinds to concrete classes.

    Maintains the bidirectional mapping the loader and the factory rely on:
    kind -> class to build entities from records, class -> kind to tag them
    on save.
    """

    def __init__(self) -> None:
        """Initialize empty entity registry."""
        self._by_type: dict[type[Entity], KindMeta] = {}
        self._by_kind: dict[EntityKind, type[Entity]] = {}

    def register(self, cls: type[Entity], kind: EntityKind) -> KindMeta:
        """Register an entity class under a kind and return its metadata.

        Args:
            cls: Entity subclass to register.
            kind: Kind the class implements.

        Returns:
            Kind metadata for the class.

        Raises:
            RuntimeError: If the kind is already bound to another class.
        """
        if cls in self._by_type:
            return self._by_type[cls]

        if kind in self._by_kind:
            existing = self._by_kind[kind]
            raise RuntimeError(f"Kind collision: {cls} and {existing} both claim {kind.tag}")

        meta = KindMeta(kind=kind, type_name=f"{cls.__module__}.{cls.__qualname__}")
        self._by_type[cls] = meta
        self._by_kind[kind] = cls
        return meta

    def get_meta(self, cls: type[Entity]) -> KindMeta | None:
        """Get metadata for a registered class, None if unregistered."""
        return self._by_type.get(cls)

    def get_type(self, kind: EntityKind) -> type[Entity] | None:
        """Get the class registered for a kind, None if nothing claims it."""
        return self._by_kind.get(kind)

    def is_registered(self, cls: type) -> bool:
        """Check if a class is registered as an entity kind."""
        return cls in self._by_type

    def kinds(self) -> Iterator[EntityKind]:
        """Iterate registered kinds in registration order."""
        return iter(self._by_kind)


# Module-level registry instance
_registry = EntityRegistry()


def get_registry() -> EntityRegistry:
    """Access the global entity registry.

    Returns:
        The process-local EntityRegistry instance.
    """
    return _registry


def entity_kind(kind: EntityKind) -> Callable[[E], E]:
    """Register an Entity subclass as the implementation of `kind`.

    Args:
        kind: Kind the decorated class implements.

    Returns:
        Decorator that registers the class and stamps `kind` on it.

    Raises:
        TypeError: If the decorated class is not an Entity subclass.
    """

    def decorator(cls: E) -> E:
        if not (isinstance(cls, type) and issubclass(cls, Entity)):
            raise TypeError(
                f"{getattr(cls, '__name__', cls)!r} must subclass Entity to be an entity kind"
            )
        _registry.register(cls, kind)
        cls.kind = kind
        return cls

    return decorator
