"""Rounding and clamping used by every score formula."""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (77.5 -> 78, 92.5 -> 93).

    Python's built-in round() sends ties to the even neighbour, which would
    move band midpoints such as 92.5 down to 92.
    """
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    """Clamp value to [low, high]."""
    return max(low, min(high, value))


def safe_ratio(numerator: float, denominator: float, default: float = 0.0) -> float:
    """numerator / denominator, or default when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator


def percent(part: float, whole: float) -> float:
    """Percentage of part in whole, 0.0 for an empty whole."""
    return safe_ratio(part * 100.0, whole)


def format_fixed(value: float, digits: int = 0) -> str:
    """Fixed-point string with exact ties rounded up (2.25 -> "2.3").

    Format specs round the binary value half-to-even, which would render
    0.125 as "0.12" where reports expect "0.13".
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
