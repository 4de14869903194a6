"""Pure geometry operations used by entities and tick phases.

All functions are total over finite inputs and never mutate their arguments.

Usage:
    if circles_overlap(a.x, a.y, a.radius, b.x, b.y, b.radius):
        ...
    x, y, heading = reflect(x, y, radius, heading, Bounds())
"""

from __future__ import annotations

import math
import random

from robotarena.core.geometry.models import Bounds

FULL_TURN = 360.0


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    """Euclidean distance between two points."""
    return math.hypot(ax - bx, ay - by)


def circles_overlap(
    ax: float, ay: float, ar: float, bx: float, by: float, br: float
) -> bool:
    """Strict circle overlap test: touching circles do not overlap.

    Symmetric in its two circles.
    """
    return distance(ax, ay, bx, by) < ar + br


def normalize_heading(heading: float) -> float:
    """Wrap a heading in degrees into [0, 360).

    Python's modulo takes the sign of the divisor, so one operation is enough
    even after several cumulative turns.
    """
    wrapped = heading % FULL_TURN
    # -1e-14 % 360 rounds to 360.0
    return 0.0 if wrapped == FULL_TURN else wrapped


def advance(x: float, y: float, heading: float, speed: float) -> tuple[float, float]:
    """Project a point `speed` units along `heading` (degrees)."""
    radians = math.radians(heading)
    return x + speed * math.cos(radians), y + speed * math.sin(radians)


def reflect(
    x: float, y: float, radius: float, heading: float, bounds: Bounds
) -> tuple[float, float, float]:
    """Clamp a circle back inside the bounds and mirror its heading.

    The x and y checks are independent, so a corner hit mirrors both axes in
    the same call. The returned heading is normalised to [0, 360).

    Args:
        x: Circle centre x after integration.
        y: Circle centre y after integration.
        radius: Circle radius.
        heading: Heading in degrees before reflection.
        bounds: Arena bounds.

    Returns:
        Tuple of (x, y, heading) after reflection.
    """
    if x - radius < 0:
        x = radius
        heading = 180.0 - heading
    elif x + radius > bounds.width:
        x = bounds.width - radius
        heading = 180.0 - heading

    if y - radius < 0:
        y = radius
        heading = -heading
    elif y + radius > bounds.height:
        y = bounds.height - radius
        heading = -heading

    return x, y, normalize_heading(heading)


def random_point(
    rng: random.Random, bounds: Bounds, margin: float = 10.0
) -> tuple[float, float]:
    """Draw a uniform point at least `margin` away from every wall.

    Raises:
        ValueError: If the margin leaves no room inside the bounds.
    """
    if 2 * margin > min(bounds.width, bounds.height):
        raise ValueError(f"Margin {margin} leaves no room in {bounds.width}x{bounds.height}")
    return (
        rng.uniform(margin, bounds.width - margin),
        rng.uniform(margin, bounds.height - margin),
    )
