"""
Host and rendering adapters for the game engine.
"""

from .host import HeadlessHost, KeyEvent
from .renderers import Renderer, GridGeometry, PillowRenderer, TextRenderer, RecordingRenderer

__all__ = [
    'HeadlessHost', 'KeyEvent',
    'Renderer', 'GridGeometry', 'PillowRenderer', 'TextRenderer', 'RecordingRenderer',
]
