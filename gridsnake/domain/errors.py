"""
Exceptions raised by the game engine.

Game over is not an exception: it is latched on GameState and shown as a banner.
"""


class ConfigurationError(ValueError):
    """Raised at session start when the game configuration is unusable."""


class BoardFullError(ValueError):
    """Raised when food placement is asked for a cell on a fully occupied grid."""
