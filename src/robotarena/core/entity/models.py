"""Entity models: kinds, capability flags and the protocols entities talk to.

Entities never reach for a global arena. Everything an entity needs during a
tick arrives through an ArenaView, and everything it draws goes to a Surface.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from robotarena.core.entity.base import Entity
    from robotarena.core.geometry import Bounds


class EntityKind(Enum):
    """Closed set of entity kinds. Values double as persisted kind tags."""

    BUMP_SENSOR_ROBOT = "BumpSensorRobot"
    WHISKER_ROBOT = "WhiskerRobot"
    BEAM_SENSOR_ROBOT = "BeamSensorRobot"
    CONTROL_BOT = "ControlBot"
    OBSTACLE = "Obstacle"
    TELEPORT_PAD = "TeleportPad"
    BLACK_HOLE = "BlackHole"

    @property
    def tag(self) -> str:
        """Kind tag as written to arena files."""
        return self.value


class Direction(Enum):
    """Manual movement directions in screen coordinates (y grows downward)."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()

    @property
    def delta(self) -> tuple[int, int]:
        """Unit step (dx, dy) for this direction."""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True, slots=True)
class Capabilities:
    """What tick phases may do with an entity, resolved once per class.

    Attributes:
        mobile: Self-propelled. Mobile entities are absorbed by black holes,
            relocated by teleport pads and run the collision pass.
        collides_physically: Hitting it reverses a mobile entity's heading.
        sensed: Steering sensors (whisker, beam) react to it.
        teleporter: Relocates mobile entities that touch it.
        absorber: Removes mobile entities that touch it.
    """

    mobile: bool = False
    collides_physically: bool = False
    sensed: bool = False
    teleporter: bool = False
    absorber: bool = False


@runtime_checkable
class Surface(Protocol):
    """Drawing target for Entity.render(). Colours are plain names ("gray")."""

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        """Draw a filled circle centred at (x, y)."""
        ...

    def stroke_circle(
        self, x: float, y: float, radius: float, color: str, width: float = 1.0
    ) -> None:
        """Draw a circle outline centred at (x, y)."""
        ...

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1.0
    ) -> None:
        """Draw a straight line segment."""
        ...


@runtime_checkable
class ArenaView(Protocol):
    """Read-only window on the arena handed to Entity.update().

    Iteration yields the live entity list at the moment of the call, in
    insertion order, including entities already advanced earlier in the
    same pass.
    """

    @property
    def bounds(self) -> Bounds:
        """Arena bounds used for wall reflection."""
        ...

    def __iter__(self) -> Iterator[Entity]:
        """Iterate live entities in insertion order."""
        ...

    def __len__(self) -> int:
        """Number of live entities."""
        ...
