"""Tests for random and explicit entity construction."""

import random

import pytest

from robotarena import ControlBot, EntityFactory, EntityKind, MobileAgent, Obstacle, from_record
from robotarena.core.entity import TEMPLATES, EntityRegistry
from robotarena.core.geometry import Bounds


@pytest.fixture
def factory():
    return EntityFactory(rng=random.Random(42))


@pytest.mark.parametrize("kind", list(EntityKind))
def test_create_uses_kind_template(factory, kind):
    entity = factory.create(kind)

    assert entity.kind is kind
    assert entity.radius == TEMPLATES[kind].radius
    if isinstance(entity, MobileAgent):
        assert entity.speed == TEMPLATES[kind].speed


@pytest.mark.parametrize(
    "kind", [k for k in EntityKind if k is not EntityKind.CONTROL_BOT]
)
def test_random_placement_is_whole_and_inside_margin(factory, kind):
    for _ in range(50):
        entity = factory.create(kind)
        for value in (entity.x, entity.y):
            assert value.is_integer()
            assert 10.0 <= value < 490.0
        if isinstance(entity, MobileAgent):
            assert entity.heading.is_integer()
            assert 0.0 <= entity.heading < 360.0


def test_control_bot_starts_at_centre():
    factory = EntityFactory(rng=random.Random(1), bounds=Bounds(width=800.0, height=600.0))
    bot = factory.create(EntityKind.CONTROL_BOT)
    assert isinstance(bot, ControlBot)
    assert (bot.x, bot.y, bot.heading, bot.speed) == (400.0, 300.0, 0.0, 2.0)


def test_same_seed_same_entities():
    a = EntityFactory(rng=random.Random(5)).create(EntityKind.WHISKER_ROBOT)
    b = EntityFactory(rng=random.Random(5)).create(EntityKind.WHISKER_ROBOT)
    assert (a.x, a.y, a.heading) == (b.x, b.y, b.heading)


def test_from_record_mobile_and_static():
    robot = from_record(EntityKind.BEAM_SENSOR_ROBOT, 1.0, 2.0, 10.0, speed=5.0, heading=45.0)
    assert isinstance(robot, MobileAgent)
    assert (robot.x, robot.y, robot.radius, robot.speed, robot.heading) == (
        1.0,
        2.0,
        10.0,
        5.0,
        45.0,
    )

    rock = from_record(EntityKind.OBSTACLE, 3.0, 4.0, 20.0, speed=9.0, heading=90.0)
    assert isinstance(rock, Obstacle)
    assert not hasattr(rock, "speed")


def test_from_record_unregistered_kind(monkeypatch):
    monkeypatch.setattr("robotarena.core.entity.factory.get_registry", EntityRegistry)
    with pytest.raises(LookupError, match="BlackHole"):
        from_record(EntityKind.BLACK_HOLE, 0.0, 0.0, 20.0)
