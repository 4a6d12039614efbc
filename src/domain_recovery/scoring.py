"""
Numeric helpers shared by the scoring modules.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positive input."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    """Constrain value to the closed interval [low, high]."""
    return max(low, min(high, value))
