"""Pillow rendering of a cell grid.

Each cell becomes a ``cell_width x cell_height`` rectangle filled with its
background colour (or ``background`` when unset) with its glyph drawn on top
in its foreground colour (or ``foreground`` when unset).
"""

from typing import Optional

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from texel_universe.buffer import Grid
from texel_universe.types import Color

DEFAULT_CELL_WIDTH = 8
DEFAULT_CELL_HEIGHT = 16
DEFAULT_FOREGROUND: Color = (255, 255, 255)
DEFAULT_BACKGROUND: Color = (0, 0, 0)

UInt8Array = npt.NDArray[np.uint8]
FontType = ImageFont.ImageFont | ImageFont.FreeTypeFont


def render_image(
    grid: Grid,
    cell_width: int = DEFAULT_CELL_WIDTH,
    cell_height: int = DEFAULT_CELL_HEIGHT,
    foreground: Color = DEFAULT_FOREGROUND,
    background: Color = DEFAULT_BACKGROUND,
    font: Optional[FontType] = None,
) -> Image.Image:
    """
    Renders the grid as an RGBA PIL Image of size (cols * cell_width, rows * cell_height).
    """
    if cell_width <= 0 or cell_height <= 0:
        raise ValueError(f"Cell size must be positive, got {(cell_width, cell_height)}")

    rows, cols = grid.shape
    img = Image.new("RGBA", (cols * cell_width, rows * cell_height), (*background, 255))
    draw = ImageDraw.Draw(img)
    if font is None:
        font = ImageFont.load_default()

    for row, col, cell in grid.cells():
        x0, y0 = col * cell_width, row * cell_height
        if cell.bg is not None:
            draw.rectangle(
                [x0, y0, x0 + cell_width - 1, y0 + cell_height - 1],
                fill=(*cell.bg, 255),
            )
        if cell.character is not None and not cell.character.isspace():
            fg = cell.fg if cell.fg is not None else foreground
            draw.text((x0, y0), cell.character, fill=(*fg, 255), font=font)
    return img


def to_array(
    grid: Grid,
    cell_width: int = DEFAULT_CELL_WIDTH,
    cell_height: int = DEFAULT_CELL_HEIGHT,
) -> UInt8Array:
    """Return the rendered image as an ``(H, W, 4)`` uint8 array."""
    return np.array(render_image(grid, cell_width=cell_width, cell_height=cell_height))


class ImageRenderer:
    cell_width: int
    cell_height: int
    foreground: Color
    background: Color
    font: Optional[FontType]

    def __init__(
        self,
        cell_width: int = DEFAULT_CELL_WIDTH,
        cell_height: int = DEFAULT_CELL_HEIGHT,
        foreground: Color = DEFAULT_FOREGROUND,
        background: Color = DEFAULT_BACKGROUND,
        font: Optional[FontType] = None,
    ):
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.foreground = foreground
        self.background = background
        self.font = font

    def render(self, grid: Grid) -> Image.Image:
        return render_image(
            grid,
            cell_width=self.cell_width,
            cell_height=self.cell_height,
            foreground=self.foreground,
            background=self.background,
            font=self.font,
        )
