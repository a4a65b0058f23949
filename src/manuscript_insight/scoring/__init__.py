"""Scoring: normalizers, principle score builder and aggregator."""

from .aggregator import (
    Aggregate,
    aggregate,
    evaluation_view,
    overall_score,
    visualization_view,
    weighted_score,
)
from .builder import PrincipleScoreBuilder
from .normalizer import (
    DualCodingCounts,
    PacingCounts,
    calculate_dual_coding_score,
    calculate_pacing_score,
    classify_paragraph,
    count_pacing,
)

__all__ = [
    "Aggregate",
    "aggregate",
    "evaluation_view",
    "overall_score",
    "visualization_view",
    "weighted_score",
    "PrincipleScoreBuilder",
    "DualCodingCounts",
    "PacingCounts",
    "calculate_dual_coding_score",
    "calculate_pacing_score",
    "classify_paragraph",
    "count_pacing",
]
