"""
gridsnake - single-player grid snake game engine.
"""

from .config import GameConfig, load_config
from .game import SnakeGame, Session

__version__ = "0.1.0"

__all__ = ['GameConfig', 'load_config', 'SnakeGame', 'Session', '__version__']
