"""Weighted aggregation of principle scores and the two report views."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from ..exceptions import NoScorablePrinciplesError
from ..math import Statistics, round_half_up
from ..models import (
    Finding,
    PrincipleEvaluation,
    PrincipleScore,
    PrincipleVisualization,
    VisualizedPrinciple,
)


def weighted_score(principle_scores: Sequence[PrincipleScore]) -> float:
    """Unrounded weighted mean of the scores.

    Raises:
        NoScorablePrinciplesError: If the list is empty or its weights sum to 0.
    """
    if not principle_scores:
        raise NoScorablePrinciplesError(0)
    try:
        return Statistics.weighted_mean(
            [ps.score for ps in principle_scores],
            [ps.weight for ps in principle_scores],
        )
    except ZeroDivisionError as e:
        raise NoScorablePrinciplesError(len(principle_scores)) from e


def overall_score(principle_scores: Sequence[PrincipleScore]) -> int:
    """round(sum(score * weight) / sum(weight)), ties rounding up."""
    return round_half_up(weighted_score(principle_scores))


def evaluation_view(principle_scores: Sequence[PrincipleScore]) -> Tuple[PrincipleEvaluation, ...]:
    """One evaluation per principle; each detail string becomes a neutral finding."""
    return tuple(
        PrincipleEvaluation(
            principle_id=ps.principle_id,
            score=ps.score,
            weight=ps.weight,
            findings=tuple(Finding(message=d, evidence=d) for d in ps.details),
            suggestions=ps.suggestions,
        )
        for ps in principle_scores
    )


def visualization_view(
    principle_scores: Sequence[PrincipleScore], overall: int
) -> PrincipleVisualization:
    return PrincipleVisualization(
        principles=tuple(
            VisualizedPrinciple(
                name=ps.principle_id,
                display_name=ps.display_name,
                score=ps.score,
                weight=ps.weight,
            )
            for ps in principle_scores
        ),
        overall_weighted_score=overall,
    )


@dataclass(frozen=True)
class Aggregate:
    overall_score: int
    evaluation: Tuple[PrincipleEvaluation, ...]
    visualization: PrincipleVisualization


def aggregate(principle_scores: Sequence[PrincipleScore]) -> Aggregate:
    """Overall score plus both views, computed from the same list."""
    overall = overall_score(principle_scores)
    return Aggregate(
        overall_score=overall,
        evaluation=evaluation_view(principle_scores),
        visualization=visualization_view(principle_scores, overall),
    )
