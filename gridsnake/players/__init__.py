"""
Player implementations for gridsnake.

This module contains the player abstractions and implementations that
steer the snake when nobody is at the keyboard.
"""

from .base import Player, safe_moves, projected_head
from .random_player import RandomPlayer
from .greedy_player import GreedyPlayer
from .autopilot import Autopilot
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Player',
    'safe_moves',
    'projected_head',
    'RandomPlayer',
    'GreedyPlayer',
    'Autopilot',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
