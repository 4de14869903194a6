"""Static specials: plain obstacles, teleport pads and black holes."""

from __future__ import annotations

import random

from robotarena.core.entity.base import Entity, MobileAgent
from robotarena.core.entity.core import entity_kind
from robotarena.core.entity.models import Capabilities, EntityKind, Surface
from robotarena.core.geometry import Bounds, random_point

_fallback_rng = random.Random()


@entity_kind(EntityKind.OBSTACLE)
class Obstacle(Entity):
    """Passive obstacle. Robots bounce off it and steering sensors see it."""

    capabilities = Capabilities(collides_physically=True, sensed=True)

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.radius, "gray")


@entity_kind(EntityKind.TELEPORT_PAD)
class TeleportPad(Entity):
    """Pad that throws whatever touches it to a random spot in the arena."""

    capabilities = Capabilities(teleporter=True)

    def teleport(
        self,
        target: Entity,
        rng: random.Random | None = None,
        bounds: Bounds | None = None,
        margin: float = 10.0,
    ) -> tuple[float, float]:
        """Overwrite the target's position with a fresh uniform random point.

        With default bounds the point lies in [10, 490] on both axes. Pass a
        seeded `rng` for reproducible placement.

        Args:
            target: Entity to relocate.
            rng: Source of randomness (module-level generator if None).
            bounds: Arena bounds (500x500 if None).
            margin: Minimum distance from every wall.

        Returns:
            The new (x, y) of the target.
        """
        target.x, target.y = random_point(rng or _fallback_rng, bounds or Bounds(), margin)
        return target.x, target.y

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.radius, "purple")
        surface.stroke_circle(self.x, self.y, self.radius, "yellow", 2.0)


@entity_kind(EntityKind.BLACK_HOLE)
class BlackHole(Entity):
    """Removes any mobile agent that overlaps it."""

    capabilities = Capabilities(absorber=True)

    def absorbs(self, agent: MobileAgent) -> bool:
        """Strict overlap test; an agent sitting on the centre is always absorbed."""
        return self.check_collision(agent)

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.radius, "black")
