"""Entity construction: explicit placement from records and random placement.

Usage:
    factory = EntityFactory(rng=random.Random(7))
    robot = factory.create(EntityKind.WHISKER_ROBOT)
    pad = from_record(EntityKind.TELEPORT_PAD, x=100.0, y=40.0, radius=15.0)
"""

from __future__ import annotations

import random
from dataclasses import dataclass

# Imported for registration side effects
from robotarena.core.entity import agents, specials  # noqa: F401
from robotarena.core.entity.base import Entity, MobileAgent
from robotarena.core.entity.core import get_registry
from robotarena.core.entity.models import EntityKind
from robotarena.core.geometry import Bounds


@dataclass(frozen=True, slots=True)
class KindTemplate:
    """Fixed size and speed given to randomly created entities of a kind."""

    radius: float
    speed: float = 0.0


TEMPLATES: dict[EntityKind, KindTemplate] = {
    EntityKind.BUMP_SENSOR_ROBOT: KindTemplate(radius=15.0, speed=3.0),
    EntityKind.WHISKER_ROBOT: KindTemplate(radius=15.0, speed=4.0),
    EntityKind.BEAM_SENSOR_ROBOT: KindTemplate(radius=10.0, speed=5.0),
    EntityKind.CONTROL_BOT: KindTemplate(radius=15.0, speed=2.0),
    EntityKind.OBSTACLE: KindTemplate(radius=20.0),
    EntityKind.TELEPORT_PAD: KindTemplate(radius=15.0),
    EntityKind.BLACK_HOLE: KindTemplate(radius=20.0),
}


def from_record(
    kind: EntityKind,
    x: float,
    y: float,
    radius: float,
    speed: float = 0.0,
    heading: float = 0.0,
) -> Entity:
    """Build an entity of any registered kind at an explicit position.

    Speed and heading only apply to mobile kinds and are ignored otherwise.

    Raises:
        LookupError: If no class is registered for `kind`.
        ValueError: If radius or speed violate the entity invariants.
    """
    cls = get_registry().get_type(kind)
    if cls is None:
        raise LookupError(f"No entity class registered for {kind.tag}")
    if issubclass(cls, MobileAgent):
        return cls(x, y, radius, speed, heading)
    return cls(x, y, radius)  # type: ignore[call-arg]


class EntityFactory:
    """Creates randomly placed entities with per-kind fixed size and speed.

    Positions are whole numbers drawn from [margin, extent - margin) and
    headings whole degrees from [0, 360). The control bot always starts at
    the arena centre facing 0 degrees.

    Args:
        rng: Source of randomness (fresh unseeded generator if None).
        bounds: Arena bounds to place entities in.
        margin: Minimum distance between a spawn point and every wall.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        bounds: Bounds | None = None,
        margin: float = 10.0,
    ) -> None:
        self._rng = rng or random.Random()
        self._bounds = bounds or Bounds()
        self._margin = margin

    def create(self, kind: EntityKind) -> Entity:
        """Create one entity of `kind` at a random position."""
        template = TEMPLATES[kind]
        if kind is EntityKind.CONTROL_BOT:
            x, y = self._bounds.center
            heading = 0.0
        else:
            x = self._coordinate(self._bounds.width)
            y = self._coordinate(self._bounds.height)
            heading = float(self._rng.randrange(360))
        return from_record(kind, x, y, template.radius, template.speed, heading)

    def _coordinate(self, extent: float) -> float:
        span = max(int(extent - 2 * self._margin), 1)
        return float(self._rng.randrange(span)) + self._margin
