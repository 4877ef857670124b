"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Tuple

from .cell import Cell
from .constants import Direction


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        positions: deque of Cell from head at index 0 to tail at the end
        color: display color handed to the renderer
    """

    def __init__(self, positions: Iterable[Tuple[int, int]], direction: Direction, color: str = "blue"):
        self.positions = deque(Cell(x, y) for x, y in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one cell.")
        self.color = color
        self._direction = direction

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def direction(self) -> Direction:
        return self._direction

    def __len__(self) -> int:
        return len(self.positions)

    def cells(self) -> List[Cell]:
        """Snapshot of the body, head first."""
        return list(self.positions)

    def set_direction(self, new_direction: Direction):
        """
        Turn the snake.

        A 180 degree turn reverses the body in place so the old tail becomes
        the head and the snake backs out the way it came.
        """
        if new_direction is self._direction.opposite:
            self.positions.reverse()
        self._direction = new_direction

    def next_head(self) -> Cell:
        return self.head.neighbor(self._direction)

    def would_hit_self(self, cell: Tuple[int, int]) -> bool:
        # The current head moves away, so it is not an obstacle
        for i in range(1, len(self.positions)):
            if self.positions[i] == cell:
                return True
        return False

    def move(self, new_head: Tuple[int, int]):
        self.positions.appendleft(Cell(*new_head))
        self.positions.pop()

    def eat(self, new_head: Tuple[int, int]):
        self.positions.appendleft(Cell(*new_head))

    def draw(self, renderer):
        renderer.draw_pixels(self.cells(), self.color)

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={len(self)}, direction={self._direction.value}>"
