"""Conflict tracking: internal, external and interpersonal keywords per sentence."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..math import Statistics
from ._text import SENTENCE_TERMINATORS, per_thousand
from .base import BaseAnalyzer

CHUNK_CHARS = 2000
DESCRIPTION_LENGTH = 100

CONFLICT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "internal": ("doubt", "fear", "guilt", "shame", "anxiety", "struggle", "torn",
                 "conflicted", "wrestled", "battled with himself", "battled with herself",
                 "inner turmoil", "conscience"),
    "external": ("obstacle", "barrier", "enemy", "threat", "danger", "battle", "war",
                 "fight", "attack", "storm", "challenge", "opposition"),
    "interpersonal": ("argued", "disagreed", "quarrel", "dispute", "tension", "clash",
                      "confrontation", "rivalry", "jealousy", "betrayal", "conflict",
                      "against"),
}

RESOLUTION_WORDS = ("resolved", "settled", "peace", "agreement")


@dataclass(frozen=True)
class ConflictInstance:
    type: str  # internal | external | interpersonal
    position: int
    intensity: int
    description: str
    resolved: bool


@dataclass(frozen=True)
class ConflictTrackingResult:
    conflicts: Tuple[ConflictInstance, ...]
    total_conflicts: int
    internal_count: int
    external_count: int
    interpersonal_count: int
    average_intensity: float
    conflict_density: float  # per 1000 words
    low_conflict_sections: Tuple[int, ...]
    resolution_points: Tuple[int, ...]
    recommendations: Tuple[str, ...]


def sentence_conflicts(sentence: str, position: int) -> List[ConflictInstance]:
    """One instance per matched keyword (substring match)."""
    lower = sentence.lower()
    resolved = any(w in lower for w in RESOLUTION_WORDS)
    found = []
    for conflict_type, keywords in CONFLICT_KEYWORDS.items():
        matched = [k for k in keywords if k in lower]
        intensity = min(100, 40 + len(matched) * 15)
        for _ in matched:
            found.append(
                ConflictInstance(
                    type=conflict_type,
                    position=position,
                    intensity=intensity,
                    description=sentence.strip()[:DESCRIPTION_LENGTH],
                    resolved=resolved,
                )
            )
    return found


def low_conflict_sections(conflicts: Tuple[ConflictInstance, ...], text_length: int) -> List[int]:
    """Start offsets of 2000-character chunks holding fewer than two conflicts."""
    starts = []
    for start in range(0, text_length, CHUNK_CHARS):
        inside = sum(1 for c in conflicts if start <= c.position < start + CHUNK_CHARS)
        if inside < 2:
            starts.append(start)
    return starts


class ConflictTracker(BaseAnalyzer):
    name = "conflict"

    def analyze(self, text: str, genre: Optional[str] = None) -> ConflictTrackingResult:
        found: List[ConflictInstance] = []
        cursor = 0
        for sentence in SENTENCE_TERMINATORS.split(text):
            if not sentence.strip():
                continue
            found.extend(sentence_conflicts(sentence, text.find(sentence, cursor)))
            cursor += len(sentence)
        conflicts = tuple(found)

        internal = sum(1 for c in conflicts if c.type == "internal")
        external = sum(1 for c in conflicts if c.type == "external")
        interpersonal = sum(1 for c in conflicts if c.type == "interpersonal")
        density = per_thousand(len(conflicts), len(text.split()))
        quiet = low_conflict_sections(conflicts, len(text))

        recs = []
        if density < 1:
            recs.append("Low overall conflict - consider adding more tension and obstacles")
        if len(quiet) > 3:
            recs.append(
                f"{len(quiet)} sections have minimal conflict - add stakes and challenges"
            )
        if internal == 0:
            recs.append("No internal conflict detected - develop character struggles and doubts")
        if external == 0 and interpersonal == 0:
            recs.append(
                "No external conflict - add obstacles, antagonists, or environmental challenges"
            )

        return ConflictTrackingResult(
            conflicts=conflicts,
            total_conflicts=len(conflicts),
            internal_count=internal,
            external_count=external,
            interpersonal_count=interpersonal,
            average_intensity=Statistics.mean([c.intensity for c in conflicts]),
            conflict_density=density,
            low_conflict_sections=tuple(quiet),
            resolution_points=tuple(c.position for c in conflicts if c.resolved),
            recommendations=tuple(recs),
        )
