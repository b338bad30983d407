"""Sprite compositor.

Projects each sprite into the viewing frame and writes its cells into a
destination :class:`texel_universe.buffer.Grid` under a depth test.

Per sprite, with frame-relative translation ``(tx, ty, tz)``:

* If ``tx < 0`` or ``ty < 0`` the sprite is skipped as a whole, even the
  cells that would land inside the grid. In-range placements are clipped per
  cell instead.
* Cell ``(row, col)`` lands on ``(row + round(ty), col + round(tx))`` with
  ``.5`` rounding up. Destinations outside the grid are dropped.
* A NaN or infinite ``tx`` or ``ty`` skips the sprite like a negative one.
* The candidate depth is ``tz + cell.depth``. The write happens unless the
  candidate is strictly greater than the occupant's depth, so on equal depth
  the incoming cell wins and the last sprite processed wins between sprites.

A pass with zero or several frames is aborted before anything is written.
None of these outcomes raise.
"""

import logging
import math
from dataclasses import replace
from typing import Iterable, Sequence, Tuple

from texel_universe.buffer import Grid
from texel_universe.components import Sprite, Transform
from texel_universe.state import State
from texel_universe.types import RenderStatus
from texel_universe.utils.ecs import frame_transforms, sprite_placements
from texel_universe.utils.math import round_half_up

logger = logging.getLogger(__name__)


def render_to_buffer(sprite: Sprite, transform: Transform, buffer: Grid) -> int:
    """Composite one sprite already expressed in frame space.

    Args:
        sprite (Sprite): Sprite whose grid is copied.
        transform (Transform): Frame-relative placement.
        buffer (Grid): Destination, mutated in place.

    Returns:
        int: Number of destination cells written.
    """
    tx, ty, tz = transform.translation
    if tx < 0 or ty < 0:
        logger.debug("Skipping sprite at negative offset (%s, %s)", tx, ty)
        return 0
    if not (math.isfinite(tx) and math.isfinite(ty)):
        logger.debug("Skipping sprite at non-finite offset (%s, %s)", tx, ty)
        return 0

    col_offset = round_half_up(tx)
    row_offset = round_half_up(ty)
    written = 0
    for row, col, sprite_cell in sprite.grid.cells():
        dest_row, dest_col = row + row_offset, col + col_offset
        cell = buffer.get(dest_row, dest_col)
        if cell is None:
            continue
        depth = tz + sprite_cell.depth
        if depth > cell.depth:
            continue
        buffer.set(dest_row, dest_col, replace(sprite_cell, depth=depth))
        written += 1
    return written


def composite(
    frames: Sequence[Transform],
    sprites: Iterable[Tuple[Sprite, Transform]],
    buffer: Grid,
) -> RenderStatus:
    """Run one composition pass.

    Args:
        frames (Sequence[Transform]): World transforms of every frame present
            this tick. Exactly one is required.
        sprites (Iterable[Tuple[Sprite, Transform]]): Sprites with their world
            placements, in the order they should be written.
        buffer (Grid): Destination, mutated in place. Left untouched when the
            pass is aborted.

    Returns:
        RenderStatus: ``RENDERED`` or ``NO_UNIQUE_FRAME``.
    """
    if len(frames) != 1:
        logger.error("Could not get unique frame (found %d)", len(frames))
        return RenderStatus.NO_UNIQUE_FRAME

    frame_inverse = frames[0].inverse().compute_matrix()
    for sprite, placement in sprites:
        render_to_buffer(sprite, placement.relative_to(frame_inverse), buffer)
    return RenderStatus.RENDERED


def render_system(state: State, buffer: Grid) -> RenderStatus:
    """Composite every sprite entity of ``state`` into ``buffer``.

    Frame entities are excluded from the sprite list. Sprites are written in
    ascending entity id order.
    """
    return composite(
        frame_transforms(state),
        ((sprite, placement) for _, sprite, placement in sprite_placements(state)),
        buffer,
    )
