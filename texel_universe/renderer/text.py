"""Plain text and ANSI rendering of a cell grid."""

from typing import List, Optional

from texel_universe.buffer import Grid
from texel_universe.types import Color

DEFAULT_BLANK = " "
ANSI_RESET = "\x1b[0m"


def _fg_code(color: Color) -> str:
    r, g, b = color
    return f"\x1b[38;2;{r};{g};{b}m"


def _bg_code(color: Color) -> str:
    r, g, b = color
    return f"\x1b[48;2;{r};{g};{b}m"


def to_lines(grid: Grid, blank: str = DEFAULT_BLANK) -> List[str]:
    """Return one string per row; unset cells render as ``blank``."""
    return [
        "".join(blank if cell.character is None else cell.character for cell in row)
        for row in grid.to_rows()
    ]


def to_text(grid: Grid, blank: str = DEFAULT_BLANK) -> str:
    return "\n".join(to_lines(grid, blank=blank))


def to_ansi(grid: Grid, blank: str = DEFAULT_BLANK) -> str:
    """Render with 24-bit colour escapes.

    Escapes are only emitted when a colour changes along a row, and every row
    that used colour ends with a reset so lines can be printed independently.
    """
    lines: List[str] = []
    for row in grid.to_rows():
        parts: List[str] = []
        fg: Optional[Color] = None
        bg: Optional[Color] = None
        styled = False
        for cell in row:
            if cell.fg != fg or cell.bg != bg:
                if styled:
                    parts.append(ANSI_RESET)
                    styled = False
                if cell.fg is not None:
                    parts.append(_fg_code(cell.fg))
                    styled = True
                if cell.bg is not None:
                    parts.append(_bg_code(cell.bg))
                    styled = True
                fg, bg = cell.fg, cell.bg
            parts.append(blank if cell.character is None else cell.character)
        if styled:
            parts.append(ANSI_RESET)
        lines.append("".join(parts))
    return "\n".join(lines)


class TextRenderer:
    blank: str
    color: bool

    def __init__(self, blank: str = DEFAULT_BLANK, color: bool = True):
        self.blank = blank
        self.color = color

    def render(self, grid: Grid) -> str:
        if self.color:
            return to_ansi(grid, blank=self.blank)
        return to_text(grid, blank=self.blank)
