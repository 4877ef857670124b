"""
Greedy player implementation - heads for the food along safe moves.
"""

from ..domain.constants import Direction
from ..domain.snapshot import BoardSnapshot
from .base import Player, projected_head, safe_moves


class GreedyPlayer(Player):
    """
    Picks the safe move whose next head is closest (Manhattan distance) to
    the food. Keeps the current direction on ties, and keeps going straight
    when nothing is safe.
    """

    def get_move(self, snapshot: BoardSnapshot) -> Direction:
        candidates = safe_moves(snapshot)
        if not candidates:
            return snapshot.direction
        if snapshot.food is None:
            return snapshot.direction if snapshot.direction in candidates else candidates[0]

        fx, fy = snapshot.food

        def score(move: Direction):
            head, _ = projected_head(snapshot, move)
            distance = abs(head.x - fx) + abs(head.y - fy)
            return (distance, move is not snapshot.direction)

        return min(candidates, key=score)
