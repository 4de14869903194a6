"""Tests for the entity kind registry and @entity_kind decorator.

Critical Invariants:
- Every EntityKind has exactly one registered class
- A kind cannot be claimed twice
- Only Entity subclasses can be registered
"""

import pytest

from robotarena import EntityKind, Obstacle, TeleportPad, entity_kind
from robotarena.core.entity import EntityRegistry, get_registry


def test_every_kind_is_registered():
    registry = get_registry()
    for kind in EntityKind:
        cls = registry.get_type(kind)
        assert cls is not None, f"{kind.tag} has no class"
        assert cls.kind is kind
        assert registry.get_meta(cls).kind is kind


def test_registered_class_lookup():
    registry = get_registry()
    assert registry.get_type(EntityKind.OBSTACLE) is Obstacle
    assert registry.is_registered(TeleportPad)
    assert not registry.is_registered(int)
    assert set(registry.kinds()) == set(EntityKind)


def test_kind_collision_raises():
    """CRITICAL: two classes claiming one kind is a programming error."""
    registry = EntityRegistry()

    class First(Obstacle):
        pass

    class Second(Obstacle):
        pass

    registry.register(First, EntityKind.OBSTACLE)
    with pytest.raises(RuntimeError, match="Kind collision"):
        registry.register(Second, EntityKind.OBSTACLE)


def test_reregistering_same_class_is_idempotent():
    registry = EntityRegistry()

    class Rock(Obstacle):
        pass

    first = registry.register(Rock, EntityKind.OBSTACLE)
    assert registry.register(Rock, EntityKind.OBSTACLE) is first
    assert first.type_name.endswith("Rock")


def test_decorator_rejects_non_entities():
    with pytest.raises(TypeError, match="must subclass Entity"):

        @entity_kind(EntityKind.OBSTACLE)
        class NotAnEntity:
            pass


def test_decorator_rejects_claimed_kind():
    with pytest.raises(RuntimeError):

        @entity_kind(EntityKind.OBSTACLE)
        class Imposter(Obstacle):
            pass

    assert get_registry().get_type(EntityKind.OBSTACLE) is Obstacle
