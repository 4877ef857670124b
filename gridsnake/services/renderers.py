"""
Renderer implementations.

The game calls four methods on its renderer:
    clear()                      blank the surface
    draw_banner(text)            centered text
    draw_pixel(cell, color)      one filled grid cell
    draw_pixels(cells, color)    many filled grid cells

PillowRenderer paints onto a PIL image (frames can be turned into a video),
TextRenderer keeps a character grid for terminals and logs, and
RecordingRenderer stores the calls for inspection.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]

DEFAULT_BACKGROUND = "#FFFFFF"
DEFAULT_TEXT_COLOR = "#000000"
BANNER_FONT_SIZE = 48


class Renderer:
    """
    Base class/interface for drawing surfaces.
    """

    def clear(self):
        raise NotImplementedError

    def draw_banner(self, text: str):
        raise NotImplementedError

    def draw_pixel(self, cell: Tuple[int, int], color: str):
        raise NotImplementedError

    def draw_pixels(self, cells: Iterable[Tuple[int, int]], color: str):
        for cell in cells:
            self.draw_pixel(cell, color)


@dataclass(frozen=True)
class GridGeometry:
    """
    Maps grid cells to pixel rectangles.

    Each cell gets surface/cell-count pixels; the filled part is shrunk by
    1 / (1 + spacing_ratio) so gutters stay visible between cells.
    """

    surface_width: int
    surface_height: int
    nx: int
    ny: int
    spacing_ratio: float = 0.1

    @property
    def dx(self) -> float:
        return self.surface_width / self.nx

    @property
    def dy(self) -> float:
        return self.surface_height / self.ny

    @property
    def pixel_width(self) -> float:
        return self.dx / (1 + self.spacing_ratio)

    @property
    def pixel_height(self) -> float:
        return self.dy / (1 + self.spacing_ratio)

    def rect(self, cell: Tuple[int, int]) -> Rect:
        """Return (x0, y0, x1, y1) for the filled part of `cell`."""
        x, y = cell
        x0, y0 = x * self.dx, y * self.dy
        return (x0, y0, x0 + self.pixel_width, y0 + self.pixel_height)


def _load_font(size: int):
    # Try to load a scalable font, fallback to default if not available
    try:
        return ImageFont.truetype("DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


class PillowRenderer(Renderer):
    """Draws onto an RGB PIL image."""

    def __init__(
        self,
        geometry: GridGeometry,
        background: str = DEFAULT_BACKGROUND,
        text_color: str = DEFAULT_TEXT_COLOR,
        font_size: int = BANNER_FONT_SIZE
    ):
        self.geometry = geometry
        self.background = background
        self.text_color = text_color
        self.font = _load_font(font_size)
        self.image = Image.new("RGB", (geometry.surface_width, geometry.surface_height), background)
        self._draw = ImageDraw.Draw(self.image)

    @classmethod
    def for_grid(cls, nx: int, ny: int, spacing_ratio: float, cell_size: int = 20, **kwargs) -> "PillowRenderer":
        geometry = GridGeometry(nx * cell_size, ny * cell_size, nx, ny, spacing_ratio)
        return cls(geometry, **kwargs)

    def clear(self):
        self._draw.rectangle(
            [0, 0, self.image.width, self.image.height],
            fill=self.background
        )

    def draw_banner(self, text: str):
        bbox = self._draw.textbbox((0, 0), text, font=self.font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        self._draw.text(
            (self.image.width // 2 - text_width // 2, self.image.height // 2 - text_height // 2),
            text,
            fill=self.text_color,
            font=self.font
        )

    def draw_pixel(self, cell: Tuple[int, int], color: str):
        self._draw.rectangle(self.geometry.rect(cell), fill=color)

    def draw_pixels(self, cells: Iterable[Tuple[int, int]], color: str):
        for cell in cells:
            self._draw.rectangle(self.geometry.rect(cell), fill=color)

    def snapshot(self) -> Image.Image:
        """Copy of the current surface, safe to keep after further drawing."""
        return self.image.copy()


class TextRenderer(Renderer):
    """
    Character-grid renderer.

    . = empty cell
    each color maps to a symbol (unknown colors use '#')
    The banner is written over the middle row.
    """

    EMPTY = "."

    def __init__(self, nx: int, ny: int, symbols: Optional[Dict[str, str]] = None):
        self.nx = nx
        self.ny = ny
        self.symbols = dict(symbols or {})
        self.banner: Optional[str] = None
        self._grid: List[List[str]] = []
        self.clear()

    def clear(self):
        self._grid = [[self.EMPTY for _ in range(self.nx)] for _ in range(self.ny)]
        self.banner = None

    def draw_banner(self, text: str):
        self.banner = text

    def draw_pixel(self, cell: Tuple[int, int], color: str):
        x, y = cell
        if 0 <= x < self.nx and 0 <= y < self.ny:
            self._grid[y][x] = self.symbols.get(color, "#")

    def render(self) -> str:
        rows = [" ".join(row) for row in self._grid]
        if self.banner is not None:
            middle = self.ny // 2
            width = max(len(rows[middle]), len(self.banner))
            rows[middle] = self.banner.center(width)
        return "\n".join(rows)

    def __str__(self):
        return self.render()


class RecordingRenderer(Renderer):
    """Keeps every call as a (method, *args) tuple."""

    def __init__(self):
        self.calls: List[tuple] = []

    def clear(self):
        self.calls.append(("clear",))

    def draw_banner(self, text: str):
        self.calls.append(("draw_banner", text))

    def draw_pixel(self, cell: Tuple[int, int], color: str):
        self.calls.append(("draw_pixel", tuple(cell), color))

    def draw_pixels(self, cells: Iterable[Tuple[int, int]], color: str):
        self.calls.append(("draw_pixels", [tuple(c) for c in cells], color))

    def reset(self):
        self.calls.clear()
