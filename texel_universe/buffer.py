"""Character-grid buffer primitives.

``Cell`` is the immutable unit of visual content (glyph, colours, depth).
``Grid`` is a fixed-shape, row-major 2D container of cells backed by a numpy
object array. Sprites own a ``Grid`` for their local appearance and the
compositor writes into a destination ``Grid``.

Out-of-range coordinates never raise: :meth:`Grid.get` returns ``None`` and
:meth:`Grid.set` returns ``False``. The compositor relies on this for
clipping.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import numpy.typing as npt

from texel_universe.types import Color

CellArray = npt.NDArray[np.object_]


def _check_color(color: Optional[Color]) -> None:
    if color is None:
        return
    if len(color) != 3 or any(not 0 <= channel <= 255 for channel in color):
        raise ValueError(f"Color must be an (r, g, b) tuple in 0..255, got {color!r}")


@dataclass(frozen=True)
class Cell:
    """One addressable unit of visual content.

    Attributes:
        character: Glyph to display, ``None`` when the cell is unset.
        fg: Foreground colour, ``None`` for the display default.
        bg: Background colour, ``None`` for the display default.
        depth: Occlusion depth. Lower values are nearer the viewer.
    """

    character: Optional[str] = None
    fg: Optional[Color] = None
    bg: Optional[Color] = None
    depth: float = 0.0

    def __post_init__(self) -> None:
        if self.character is not None and len(self.character) != 1:
            raise ValueError(
                f"Cell character must be a single glyph, got {self.character!r}"
            )
        _check_color(self.fg)
        _check_color(self.bg)


EMPTY_CELL = Cell()


class Grid:
    """Fixed-shape 2D array of :class:`Cell` addressed by ``(row, col)``."""

    __slots__ = ("_cells",)

    _cells: CellArray

    def __init__(self, cells: CellArray) -> None:
        if cells.ndim != 2:
            raise ValueError(f"Grid requires a 2D array, got {cells.ndim}D")
        if not all(isinstance(cell, Cell) for cell in cells.flat):
            raise ValueError("Grid elements must all be Cell instances")
        self._cells = cells.copy()

    @classmethod
    def filled(cls, rows: int, cols: int, cell: Cell = EMPTY_CELL) -> Grid:
        """Return a ``rows x cols`` grid with every position set to ``cell``."""
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid shape must be non-negative, got {(rows, cols)}")
        cells: CellArray = np.empty((rows, cols), dtype=object)
        cells.fill(cell)
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> Grid:
        """Build a grid from nested row sequences (all rows equally long)."""
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("Grid rows must all have the same length")
        cells: CellArray = np.empty((len(rows), width), dtype=object)
        for r, row in enumerate(rows):
            for c, cell in enumerate(row):
                cells[r, c] = cell
        return cls(cells)

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._cells.shape
        return int(rows), int(cols)

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if ``(row, col)`` addresses a cell of this grid."""
        rows, cols = self.shape
        return 0 <= row < rows and 0 <= col < cols

    def get(self, row: int, col: int) -> Optional[Cell]:
        """Return the cell at ``(row, col)`` or ``None`` when out of range."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row, col]

    def set(self, row: int, col: int, cell: Cell) -> bool:
        """Replace the cell at ``(row, col)``.

        Returns:
            bool: ``False`` (and no change) if the coordinate is out of range.
        """
        if not self.in_bounds(row, col):
            return False
        self._cells[row, col] = cell
        return True

    def fill(self, cell: Cell = EMPTY_CELL) -> None:
        """Overwrite every position with ``cell`` (shape is unchanged)."""
        self._cells.fill(cell)

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` in row-major order."""
        rows, cols = self.shape
        for row in range(rows):
            for col in range(cols):
                yield row, col, self._cells[row, col]

    def to_rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._cells]

    def copy(self) -> Grid:
        return Grid(self._cells)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self._cells.flat, other._cells.flat))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape}, rows={self.to_rows()!r})"
