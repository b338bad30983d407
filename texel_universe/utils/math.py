"""Numeric helpers for projecting continuous placements onto the grid."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with ``.5`` going up (``2.5 -> 3``).

    Python's built-in ``round`` rounds ties to even, which would shift sprites
    placed exactly between two cells inconsistently.

    Raises:
        ValueError: If ``value`` is NaN or infinite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor
