"""Plane geometry: arena bounds, circle tests, heading arithmetic."""

from robotarena.core.geometry.models import Bounds
from robotarena.core.geometry.operations import (
    advance,
    circles_overlap,
    distance,
    normalize_heading,
    random_point,
    reflect,
)

__all__ = [
    "Bounds",
    "advance",
    "circles_overlap",
    "distance",
    "normalize_heading",
    "random_point",
    "reflect",
]
