"""Numeric helpers shared by the scoring components.

All public scores are integers in [0, 100]. Rounding is half-up: a value
exactly between two integers rounds toward positive infinity for either
sign (2.5 -> 3, -2.5 -> -2).
"""

import math

MIN_SCORE = 0
MAX_SCORE = 100


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into [low, high]."""
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return int(math.floor(value + 0.5))


def to_score(value: float) -> int:
    """Round and clamp a raw value into a 0-100 integer score."""
    return int(clamp(round_half_up(value), MIN_SCORE, MAX_SCORE))
