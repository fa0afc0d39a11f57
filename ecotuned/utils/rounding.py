"""
Rounding helpers.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
Forecast statistics and suggested thermostat settings round halves up
instead, so 2.5 → 3 and -2.5 → -2.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def round_to_half(value: float) -> float:
    """Round to the nearest 0.5, halves towards positive infinity (18.25 → 18.5)."""
    return math.floor(value * 2 + 0.5) / 2
