"""Character-grid Surface for printing an arena to a terminal."""

from __future__ import annotations

from robotarena import Bounds

GLYPHS = {
    "blue": "b",
    "green": "w",
    "orange": "e",
    "purple": "P",
    "gray": "#",
    "black": "@",
}


class AsciiSurface:
    """Coarse Surface that marks each filled circle's centre cell.

    Only fill_circle leaves a mark; outlines and sensor lines are ignored,
    and wheels (black, small) never overwrite a body.
    """

    def __init__(self, bounds: Bounds, columns: int = 50, rows: int = 25) -> None:
        self._bounds = bounds
        self._columns = columns
        self._rows = rows
        self._cells = [["." for _ in range(columns)] for _ in range(rows)]

    def fill_circle(self, x: float, y: float, radius: float, color: str) -> None:
        column = min(max(int(x / self._bounds.width * self._columns), 0), self._columns - 1)
        row = min(max(int(y / self._bounds.height * self._rows), 0), self._rows - 1)
        if color == "black" and self._cells[row][column] != ".":
            return
        self._cells[row][column] = GLYPHS.get(color, "?")

    def stroke_circle(
        self, x: float, y: float, radius: float, color: str, width: float = 1.0
    ) -> None:
        pass

    def stroke_line(
        self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1.0
    ) -> None:
        pass

    def text(self) -> str:
        return "\n".join("".join(row) for row in self._cells)
