"""
BoardSnapshot - a read-only view of a session at a point in time.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .cell import Cell
from .constants import Direction


@dataclass(frozen=True)
class BoardSnapshot:
    """
    A snapshot of the game handed to players and returned to callers.

    Attributes:
        width, height: board dimensions
        snake: body cells, head first
        direction: the snake's current direction
        food: the food cell, or None once the board is full
        score: food eaten so far
        error: terminal message, None while the game is running
        ticks: number of update passes run so far
    """

    width: int
    height: int
    snake: Tuple[Cell, ...]
    direction: Direction
    food: Optional[Cell]
    score: int
    error: Optional[str]
    ticks: int

    @property
    def head(self) -> Cell:
        return self.snake[0]

    @property
    def is_over(self) -> bool:
        return self.error is not None
