"""Convenience factories for authoring ``EntitySpec`` objects and sprite assets.

``grid_from_text`` / ``sprite_from_text`` turn text art into sprite grids:
every character becomes a cell with the given colours and depth, except
``blank`` characters which become empty cells (``character=None``). Empty
cells still take part in the depth test when composited.
"""

from __future__ import annotations

from typing import Optional, Sequence

from texel_universe.buffer import Cell, Grid
from texel_universe.components import Frame, Level, Sprite, Transform
from texel_universe.types import Color
from .entity_spec import EntitySpec

DEFAULT_BLANK = " "


def grid_from_text(
    lines: Sequence[str],
    fg: Optional[Color] = None,
    bg: Optional[Color] = None,
    depth: float = 0.0,
    blank: str = DEFAULT_BLANK,
) -> Grid:
    """Build a grid from text rows; shorter rows are padded with empty cells."""
    width = max((len(line) for line in lines), default=0)
    rows = [
        [
            Cell() if ch == blank else Cell(character=ch, fg=fg, bg=bg, depth=depth)
            for ch in line.ljust(width, blank)
        ]
        for line in lines
    ]
    if not rows:
        return Grid.filled(0, 0)
    return Grid.from_rows(rows)


def sprite_from_text(
    lines: Sequence[str],
    fg: Optional[Color] = None,
    bg: Optional[Color] = None,
    depth: float = 0.0,
    blank: str = DEFAULT_BLANK,
) -> Sprite:
    """Sprite whose grid is ``grid_from_text(lines, ...)``."""
    return Sprite(grid=grid_from_text(lines, fg=fg, bg=bg, depth=depth, blank=blank))


def create_frame(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> EntitySpec:
    """Viewing frame placed at ``(x, y, z)``."""
    return EntitySpec(frame=Frame(), transform=Transform.from_translation(x, y, z))


def create_sprite(
    sprite: Sprite, x: float = 0.0, y: float = 0.0, z: float = 0.0
) -> EntitySpec:
    """Sprite entity placed at ``(x, y, z)`` in world space."""
    return EntitySpec(sprite=sprite, transform=Transform.from_translation(x, y, z))


def create_level_root() -> EntitySpec:
    """Level root at the origin (what the level system spawns)."""
    return EntitySpec(level=Level(), transform=Transform())
