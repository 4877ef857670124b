"""
Autopilot - lets a Player drive a game through the host's keyboard.
"""

import logging

from ..domain.constants import DIRECTION_KEYS
from .base import Player

logger = logging.getLogger(__name__)


class Autopilot:
    """
    Presses one key per tick on behalf of a player.

    Hooks into the host before every display refresh; the player is asked
    for a move only once per tick, right after the previous tick has run.
    """

    def __init__(self, game, player: Player, host):
        self.game = game
        self.player = player
        self.host = host
        self._last_tick = None
        self.moves = 0

    def attach(self):
        if self.before_frame not in self.host.before_frame:
            self.host.before_frame.append(self.before_frame)

    def detach(self):
        if self.before_frame in self.host.before_frame:
            self.host.before_frame.remove(self.before_frame)

    def before_frame(self, timestamp: float):
        if not self.game.running:
            return
        snapshot = self.game.snapshot()
        if snapshot.ticks == self._last_tick:
            return
        self._last_tick = snapshot.ticks

        move = self.player.get_move(snapshot)
        self.host.press(DIRECTION_KEYS[move])
        self.moves += 1
        logger.debug(f"Tick {snapshot.ticks}: {type(self.player).__name__} pressed {move.value}")
