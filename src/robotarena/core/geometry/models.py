"""Geometry models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned arena rectangle spanning [0, width] x [0, height].

    Coordinates are screen-style: y grows downward.
    """

    width: float = 500.0
    height: float = 500.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Bounds must be positive, got {self.width}x{self.height}")

    @property
    def center(self) -> tuple[float, float]:
        """Midpoint of the arena."""
        return self.width / 2, self.height / 2

    def contains(self, x: float, y: float, radius: float = 0.0) -> bool:
        """Check whether a circle lies fully inside the bounds (edges inclusive).

        Args:
            x: Circle centre x.
            y: Circle centre y.
            radius: Circle radius (0 for a point).

        Returns:
            True if the whole circle is inside, False otherwise.
        """
        return (
            x - radius >= 0
            and x + radius <= self.width
            and y - radius >= 0
            and y + radius <= self.height
        )
