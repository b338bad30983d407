"""Sprite component.

A ``Sprite`` owns the local cell grid of a visual asset. Each cell carries its
own depth so parts of one sprite can sit in front of or behind other sprites.
The component is treated as read-only while a composition pass runs.
"""

from dataclasses import dataclass, field

from texel_universe.buffer import Grid


def _empty_grid() -> Grid:
    return Grid.filled(0, 0)


@dataclass(frozen=True)
class Sprite:
    """Visual asset made of character cells.

    Attributes:
        grid: Local appearance; ``grid.get(0, 0)`` lands on the translated origin.
    """

    grid: Grid = field(default_factory=_empty_grid)
