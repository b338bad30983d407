"""Common type aliases and enumerations.

``Color`` is the colour payload carried by buffer cells; ``RenderStatus`` is
the control outcome of a single composition pass.
"""

from enum import StrEnum, auto
from typing import Tuple

EntityID = int

Color = Tuple[int, int, int]


class RenderStatus(StrEnum):
    """Outcome of one compositor pass."""

    RENDERED = auto()
    NO_UNIQUE_FRAME = auto()


class LevelEventType(StrEnum):
    """Bootstrap event kinds exchanged with the level system."""

    LEVEL_START = auto()
    ROOT_SPAWNED = auto()
