"""Robot variants: bump, whisker, beam and the manually driven control bot."""

from __future__ import annotations

import math
from typing import ClassVar

from robotarena.core.entity.base import MobileAgent
from robotarena.core.entity.core import entity_kind
from robotarena.core.entity.models import ArenaView, Direction, EntityKind, Surface
from robotarena.core.geometry import distance, normalize_heading


@entity_kind(EntityKind.BUMP_SENSOR_ROBOT)
class BumpSensorRobot(MobileAgent):
    """Robot with no look-ahead; it only reacts once the collision pass hits it."""

    body_color = "blue"


class SteeringAgent(MobileAgent):
    """Robot that turns away from nearby obstacles before it moves.

    Subclasses set the turn increment (degrees added per triggering obstacle)
    and the trigger margin (clearance added to the sum of radii).
    """

    turn_increment: ClassVar[float]
    trigger_margin: ClassVar[float]

    def update(self, view: ArenaView) -> None:
        self.sense_and_steer(view)
        super().update(view)

    def sense_and_steer(self, view: ArenaView) -> int:
        """Turn once per sensed obstacle within range. Turns accumulate.

        Args:
            view: Live arena view for this tick.

        Returns:
            Number of obstacles that triggered a turn.
        """
        triggered = 0
        for other in view:
            if other is self or not other.capabilities.sensed:
                continue
            reach = self.radius + other.radius + self.trigger_margin
            if distance(self.x, self.y, other.x, other.y) < reach:
                self.heading = normalize_heading(self.heading + self.turn_increment)
                triggered += 1
        return triggered


@entity_kind(EntityKind.WHISKER_ROBOT)
class WhiskerRobot(SteeringAgent):
    """Short-range whiskers, hard 90 degree turns."""

    body_color = "green"
    turn_increment = 90.0
    trigger_margin = 10.0
    whisker_spread: ClassVar[float] = math.pi / 8

    @property
    def whisker_length(self) -> float:
        return self.radius * 2

    def render(self, surface: Surface) -> None:
        super().render(surface)
        radians = math.radians(self.heading)
        for skew in (-self.whisker_spread, self.whisker_spread):
            surface.stroke_line(
                self.x,
                self.y,
                self.x + self.whisker_length * math.cos(radians + skew),
                self.y + self.whisker_length * math.sin(radians + skew),
                "red",
                2.0,
            )


@entity_kind(EntityKind.BEAM_SENSOR_ROBOT)
class BeamSensorRobot(SteeringAgent):
    """Longer single beam, gentler 67 degree turns."""

    body_color = "orange"
    turn_increment = 67.0
    trigger_margin = 20.0

    def render(self, surface: Surface) -> None:
        super().render(surface)
        reach = self.radius + self.trigger_margin
        radians = math.radians(self.heading)
        surface.stroke_line(
            self.x,
            self.y,
            self.x + reach * math.cos(radians),
            self.y + reach * math.sin(radians),
            "red",
            2.0,
        )


@entity_kind(EntityKind.CONTROL_BOT)
class ControlBot(MobileAgent):
    """Manually driven robot. Never moves on its own.

    Each move command shifts one axis by exactly `speed`, with no wall or
    collision check; the tick phases still absorb, teleport and bounce it.
    """

    body_color = "purple"

    def update(self, view: ArenaView) -> None:
        """Stay put; only explicit move commands change the position."""

    def move(self, direction: Direction) -> None:
        """Step `speed` units in a screen direction."""
        dx, dy = direction.delta
        self.x += dx * self.speed
        self.y += dy * self.speed

    def move_up(self) -> None:
        self.move(Direction.UP)

    def move_down(self) -> None:
        self.move(Direction.DOWN)

    def move_left(self) -> None:
        self.move(Direction.LEFT)

    def move_right(self) -> None:
        self.move(Direction.RIGHT)

    def render(self, surface: Surface) -> None:
        surface.fill_circle(self.x, self.y, self.radius, self.body_color)
        # Corner wheels, axis-aligned since the bot has no meaningful heading.
        wheel_radius = self.radius / 4
        inset = self.radius - wheel_radius
        for sx in (-1, 1):
            for sy in (-1, 1):
                surface.fill_circle(
                    self.x + sx * inset, self.y + sy * inset, wheel_radius, "black"
                )
