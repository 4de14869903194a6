"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from robotarena import Arena, ArenaSettings


class RecordingSurface:
    """Surface that records draw calls as tuples instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("fill_circle", x, y, radius, color))

    def stroke_circle(self, x, y, radius, color, width=1.0):
        self.calls.append(("stroke_circle", x, y, radius, color, width))

    def stroke_line(self, x1, y1, x2, y2, color, width=1.0):
        self.calls.append(("stroke_line", x1, y1, x2, y2, color, width))

    def of(self, method: str) -> list[tuple]:
        return [call for call in self.calls if call[0] == method]


@pytest.fixture
def settings():
    """Seeded arena settings."""
    return ArenaSettings(seed=1234)


@pytest.fixture
def arena(settings):
    """Fresh, empty, seeded Arena."""
    return Arena(settings=settings)


@pytest.fixture
def surface():
    return RecordingSurface()
