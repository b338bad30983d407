"""Level marker component.

Tags the root entity created by :func:`texel_universe.systems.level.level_system`.
Its presence is what makes the bootstrap idempotent.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Level:
    """Level root marker (no data)."""

    pass
