"""
Random player implementation - picks random safe moves.
"""

from ..domain.constants import Direction, VALID_MOVES
from ..domain.snapshot import BoardSnapshot
from .base import Player, safe_moves


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.
    """

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        valid_moves = safe_moves(snapshot)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(sorted(VALID_MOVES, key=lambda d: d.value))

        return self.rng.choice(valid_moves)
