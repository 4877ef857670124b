"""
Base player interface for the game engine.
"""

import random
from typing import List, Optional, Tuple

from ..domain.cell import Cell
from ..domain.constants import Direction, VALID_MOVES
from ..domain.snapshot import BoardSnapshot


class Player:
    """
    Base class/interface for player logic.

    A player looks at a snapshot of the board and returns the direction it
    wants the snake to take on the next tick.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        """
        Return a move direction given the current board.

        Args:
            snapshot: Current state of the game

        Returns:
            One of: UP, DOWN, LEFT, RIGHT
        """
        raise NotImplementedError


def projected_head(snapshot: BoardSnapshot, move: Direction) -> Tuple[Cell, Tuple[Cell, ...]]:
    """
    Where the head ends up if `move` is pressed, and the body it moves from.

    Pressing the opposite direction reverses the body first, so the move
    starts from the current tail.
    """
    body = snapshot.snake
    if move is snapshot.direction.opposite:
        body = tuple(reversed(body))
    return body[0].neighbor(move), body


def safe_moves(snapshot: BoardSnapshot) -> List[Direction]:
    """Moves that avoid walls and the body (every cell but the moving head)."""
    moves = []
    for move in sorted(VALID_MOVES, key=lambda d: d.value):
        head, body = projected_head(snapshot, move)
        # Check wall collisions
        if not head.in_bounds(snapshot.width, snapshot.height):
            continue
        # Check self collisions (the tail has not moved yet when the check runs)
        if head in body[1:]:
            continue
        moves.append(move)
    return moves
