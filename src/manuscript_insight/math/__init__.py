"""Mathematical utilities for manuscript scoring."""

from .rounding import clamp, format_fixed, percent, round_half_up, safe_ratio
from .statistics import Statistics

__all__ = [
    "Statistics",
    "clamp",
    "format_fixed",
    "percent",
    "round_half_up",
    "safe_ratio",
]
