"""Entity base classes: common state, collision predicate and wall-bounded motion."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import ClassVar

from robotarena.core.entity.models import ArenaView, Capabilities, EntityKind, Surface
from robotarena.core.geometry import Bounds, advance, circles_overlap, normalize_heading, reflect


class Entity(ABC):
    """Anything with a position and a radius that lives in an arena.

    `kind` is stamped by the @entity_kind decorator; `capabilities` tells the
    tick phases how to treat the entity without isinstance chains.

    Args:
        x: Centre x.
        y: Centre y.
        radius: Circle radius, strictly positive and fixed for life.
    """

    kind: ClassVar[EntityKind]
    capabilities: ClassVar[Capabilities] = Capabilities()

    def __init__(self, x: float, y: float, radius: float) -> None:
        if not radius > 0:
            raise ValueError(f"radius must be positive, got {radius}")
        self.x = float(x)
        self.y = float(y)
        self._radius = float(radius)

    @property
    def radius(self) -> float:
        return self._radius

    def update(self, view: ArenaView) -> None:
        """Advance internal state by one tick. Static entities keep the no-op."""

    @abstractmethod
    def render(self, surface: Surface) -> None:
        """Draw the entity. Must not mutate state."""

    def check_collision(self, other: Entity) -> bool:
        """Strict circle overlap with another entity (touching is not colliding)."""
        return circles_overlap(self.x, self.y, self.radius, other.x, other.y, other.radius)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, radius={self.radius:g})"


class MobileAgent(Entity):
    """Self-propelled entity moving `speed` units along `heading` every tick.

    Heading is in degrees; 0 points along +x and 90 along +y (downward on
    screen). Walls reflect the agent, collisions reverse it.

    Args:
        x: Centre x.
        y: Centre y.
        radius: Circle radius.
        speed: Distance covered per tick, non-negative.
        heading: Initial heading in degrees.
    """

    capabilities = Capabilities(mobile=True, collides_physically=True)
    body_color: ClassVar[str] = "blue"

    def __init__(
        self, x: float, y: float, radius: float, speed: float, heading: float = 0.0
    ) -> None:
        super().__init__(x, y, radius)
        if speed < 0:
            raise ValueError(f"speed must be non-negative, got {speed}")
        self.speed = float(speed)
        self.heading = float(heading)

    def update(self, view: ArenaView) -> None:
        self.integrate(view.bounds)

    def integrate(self, bounds: Bounds) -> None:
        """Move along the heading, then reflect off the walls."""
        x, y = advance(self.x, self.y, self.heading, self.speed)
        self.x, self.y, self.heading = reflect(x, y, self.radius, self.heading, bounds)

    def handle_collision(self, other: Entity) -> bool:
        """Reverse heading if colliding with `other`, whatever the impact angle.

        Returns:
            True if the heading was reversed.
        """
        if not self.check_collision(other):
            return False
        self.heading = normalize_heading(self.heading + 180.0)
        return True

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.radius, self.body_color)
        self._render_wheels(surface)

    def _render_wheels(self, surface: Surface) -> None:
        wheel_radius = self.radius / 4
        offset = self.radius * 1.1
        radians = math.radians(self.heading)
        for sign in (-1, 1):
            for skew in (math.pi / 4, -math.pi / 4):
                surface.fill_circle(
                    self.x + sign * offset * math.cos(radians + skew),
                    self.y + sign * offset * math.sin(radians + skew),
                    wheel_radius,
                    "black",
                )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(x={self.x:.2f}, y={self.y:.2f}, radius={self.radius:g}, "
            f"speed={self.speed:g}, heading={self.heading:.1f})"
        )
