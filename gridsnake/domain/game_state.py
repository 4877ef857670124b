"""
GameState entity - terminal flag and score for one session.
"""

from typing import Optional


class GameState:
    """
    Running/ended flag plus the score counter.

    Attributes:
        error: None while running, otherwise the message shown on the banner
        score: number of food items eaten
    """

    def __init__(self):
        self.error: Optional[str] = None
        self.score = 0

    @property
    def is_over(self) -> bool:
        return self.error is not None

    def end(self, message: str):
        """Latch the ended state. Later calls keep the first message."""
        if self.error is None:
            self.error = message

    def __repr__(self):
        status = "running" if self.error is None else f"ended ({self.error})"
        return f"<GameState {status}, score={self.score}>"
