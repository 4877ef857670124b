"""
Food entity and placement.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .cell import Cell
from .errors import BoardFullError


@dataclass(frozen=True)
class Food:
    cell: Cell
    color: str = "red"

    def draw(self, renderer):
        renderer.draw_pixel(self.cell, self.color)


def free_cells(width: int, height: int, occupied: Iterable[Tuple[int, int]]) -> List[Cell]:
    """Every grid cell not in `occupied`, in row-major order."""
    taken = {Cell(x, y) for x, y in occupied}
    return [
        Cell(x, y)
        for y in range(height)
        for x in range(width)
        if (x, y) not in taken
    ]


def generate(
    width: int,
    height: int,
    occupied: Iterable[Tuple[int, int]],
    rng: Optional[random.Random] = None,
) -> Cell:
    """
    Pick a cell uniformly at random among the cells not in `occupied`.

    Scans the whole grid on every call, which is fine for board sizes a
    player can see.

    Args:
        width, height: grid dimensions
        occupied: cells that must not be returned (the snake's body)
        rng: random source; defaults to the module-level generator

    Raises:
        BoardFullError: if every cell is occupied.
    """
    candidates = free_cells(width, height, occupied)
    if not candidates:
        raise BoardFullError(f"No free cell left on the {width}x{height} board.")
    return (rng or random).choice(candidates)
