"""
Domain entities for the gridsnake game engine.

This module contains the core game entities that are independent of
rendering and host concerns (canvas, keyboard, frame scheduling).
"""

from .constants import (
    Direction, UP, DOWN, LEFT, RIGHT, VALID_MOVES,
    KEY_DIRECTIONS, DIRECTION_KEYS, GAME_OVER_MESSAGE, WIN_MESSAGE,
)
from .cell import Cell
from .errors import ConfigurationError, BoardFullError
from .snake import Snake
from .food import Food, generate, free_cells
from .game_state import GameState
from .snapshot import BoardSnapshot

__all__ = [
    'Direction', 'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES',
    'KEY_DIRECTIONS', 'DIRECTION_KEYS', 'GAME_OVER_MESSAGE', 'WIN_MESSAGE',
    'Cell',
    'ConfigurationError', 'BoardFullError',
    'Snake',
    'Food', 'generate', 'free_cells',
    'GameState',
    'BoardSnapshot',
]
