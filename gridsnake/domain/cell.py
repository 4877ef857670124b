"""
Cell value type - a discrete grid position.
"""

from typing import NamedTuple

from .constants import Direction


class Cell(NamedTuple):
    """A (column, row) grid position. Compares equal to a plain (x, y) tuple."""

    x: int
    y: int

    def neighbor(self, direction: Direction) -> "Cell":
        dx, dy = direction.delta
        return Cell(self.x + dx, self.y + dy)

    def in_bounds(self, width: int, height: int) -> bool:
        return 0 <= self.x < width and 0 <= self.y < height

    def is_adjacent(self, other: "Cell") -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1
