"""Numeric helpers for display values"""

import math


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round halves towards positive infinity.

    Python's round() uses banker's rounding (round(2.5) == 2); report values
    are rounded the way the consuming UI rounds them (2.5 -> 3, -2.5 -> -2).
    """
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Half-up rounding to a whole currency unit"""
    return int(math.floor(value + 0.5))
