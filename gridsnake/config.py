"""
Session configuration.

Values come from, in increasing priority: the defaults below, environment
variables (optionally from a .env file), and explicit overrides such as CLI
flags.

Environment variables:
    GRIDSNAKE_WIDTH, GRIDSNAKE_HEIGHT      grid size in cells
    GRIDSNAKE_SPACING_RATIO                gutter between cells
    GRIDSNAKE_SNAKE_COLOR, GRIDSNAKE_FOOD_COLOR
    GRIDSNAKE_DIRECTION                    initial direction (left/right/up/down)
    GRIDSNAKE_SNAKE                        initial cells, head first: "5,3;4,3;3,3"
    GRIDSNAKE_FRAME_INTERVAL               milliseconds per tick
    GRIDSNAKE_SEED                         seed for food placement
"""

import logging
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, List, Optional, Tuple

from dotenv import find_dotenv, load_dotenv

from .domain.cell import Cell
from .domain.constants import Direction, DOWN
from .domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRIDSNAKE_"

DEFAULT_SNAKE: List[Tuple[int, int]] = [
    (5, 3), (4, 3), (3, 3), (2, 3), (1, 3),
    (0, 3), (0, 2), (0, 1), (0, 0),
]


@dataclass
class GameConfig:
    width: int = 20
    height: int = 20
    spacing_ratio: float = 0.1
    snake_color: str = "blue"
    food_color: str = "red"
    snake_cells: List[Tuple[int, int]] = field(default_factory=lambda: list(DEFAULT_SNAKE))
    direction: Direction = DOWN
    frame_interval: float = 100.0
    seed: Optional[int] = None

    def validate(self) -> "GameConfig":
        """
        Reject configurations the game cannot start from.

        Returns:
            self, so calls can be chained.

        Raises:
            ConfigurationError: describing the first problem found.
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}."
            )
        if self.frame_interval <= 0:
            raise ConfigurationError(f"Frame interval must be positive, got {self.frame_interval}.")
        if self.spacing_ratio < 0:
            raise ConfigurationError(f"Spacing ratio must not be negative, got {self.spacing_ratio}.")
        if not isinstance(self.direction, Direction):
            raise ConfigurationError(f"Initial direction must be a Direction, got {self.direction!r}.")
        if not self.snake_cells:
            raise ConfigurationError("The initial snake needs at least one cell.")

        cells = [_to_cell(entry) for entry in self.snake_cells]
        for cell in cells:
            if not cell.in_bounds(self.width, self.height):
                raise ConfigurationError(
                    f"Snake cell {tuple(cell)} is outside the {self.width}x{self.height} grid."
                )
        if len(set(cells)) != len(cells):
            raise ConfigurationError("The initial snake overlaps itself.")
        for a, b in zip(cells, cells[1:]):
            if not a.is_adjacent(b):
                raise ConfigurationError(
                    f"Snake cells {tuple(a)} and {tuple(b)} are not adjacent."
                )
        if len(cells) >= self.width * self.height:
            raise ConfigurationError("The initial snake leaves no room for food.")
        return self


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _to_cell(entry: Any) -> Cell:
    """Convert an (x, y) pair of integers to a Cell."""
    try:
        x, y = entry
    except (TypeError, ValueError):
        raise ConfigurationError(f"Snake cell {entry!r} must be an (x, y) pair.") from None
    if not (_is_int(x) and _is_int(y)):
        raise ConfigurationError(f"Snake cell {entry!r} must have integer coordinates.")
    return Cell(x, y)


def parse_cells(value: str) -> List[Tuple[int, int]]:
    """Parse "x,y;x,y;..." into a list of (x, y) tuples."""
    cells = []
    for chunk in value.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        try:
            x, y = (int(part) for part in chunk.split(","))
        except ValueError:
            raise ConfigurationError(f"Invalid cell '{chunk}', expected 'x,y'.") from None
        cells.append((x, y))
    return cells


def _convert(name: str, env_name: str, raw: str) -> Any:
    try:
        if name in ("width", "height", "seed"):
            return int(raw)
        if name in ("spacing_ratio", "frame_interval"):
            return float(raw)
        if name == "direction":
            return Direction.parse(raw)
        if name == "snake_cells":
            return parse_cells(raw)
    except ConfigurationError:
        raise
    except ValueError as e:
        raise ConfigurationError(f"Invalid value for {env_name}: {e}") from None
    return raw


# Environment variable suffix for each config field
_ENV_NAMES = {
    "snake_cells": "SNAKE",
}


def load_config(env_file: Optional[str] = None, **overrides: Any) -> GameConfig:
    """
    Build a GameConfig from defaults, the environment and overrides.

    Overrides whose value is None are ignored so argparse namespaces can be
    passed through unchanged.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))

    values = {}
    for f in fields(GameConfig):
        env_name = ENV_PREFIX + _ENV_NAMES.get(f.name, f.name.upper())
        raw = os.getenv(env_name)
        if raw is not None and raw != "":
            values[f.name] = _convert(f.name, env_name, raw)

    config = replace(GameConfig(), **values)
    explicit = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(explicit) - {f.name for f in fields(GameConfig)}
    if unknown:
        raise ConfigurationError(f"Unknown configuration options: {', '.join(sorted(unknown))}")
    config = replace(config, **explicit)

    logger.debug(f"Loaded configuration: {config}")
    return config
