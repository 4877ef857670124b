"""
Game constants for gridsnake.
"""

from enum import Enum
from typing import Dict, Tuple


class Direction(Enum):
    """Movement directions. Screen coordinates: row 0 is the top row."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def opposite(self) -> "Direction":
        return OPPOSITES[self]

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @classmethod
    def parse(cls, name: str) -> "Direction":
        """Look up a direction by name, case-insensitive."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction '{name}'. Valid directions: {valid}") from None


LEFT = Direction.LEFT
RIGHT = Direction.RIGHT
UP = Direction.UP
DOWN = Direction.DOWN
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES: Dict[Direction, Direction] = {
    LEFT: RIGHT,
    RIGHT: LEFT,
    UP: DOWN,
    DOWN: UP,
}

DELTAS: Dict[Direction, Tuple[int, int]] = {
    LEFT: (-1, 0),
    RIGHT: (1, 0),
    UP: (0, -1),
    DOWN: (0, 1),
}

# Keyboard codes: arrow keys and WASD
KEY_DIRECTIONS: Dict[int, Direction] = {
    37: LEFT,   # <-
    65: LEFT,   # 'a'
    39: RIGHT,  # ->
    68: RIGHT,  # 'd'
    38: UP,     # up arrow
    87: UP,     # 'w'
    40: DOWN,   # down arrow
    83: DOWN,   # 's'
}

# First key code for each direction, used by autopilots
DIRECTION_KEYS: Dict[Direction, int] = {
    LEFT: 37,
    UP: 38,
    RIGHT: 39,
    DOWN: 40,
}

# Terminal messages
GAME_OVER_MESSAGE = "Game Over!"
WIN_MESSAGE = "You Win!"
