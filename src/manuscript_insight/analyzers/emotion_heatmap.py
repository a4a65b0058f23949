"""Emotional intensity over fixed-size character chunks."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..math import Statistics
from .base import BaseAnalyzer

CHUNK_SIZE = 500
CONTEXT_LENGTH = 100
MAX_EXTREMES = 5

EMOTION_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "joy": ("happy", "joy", "delight", "ecstatic", "thrilled", "cheerful", "elated",
            "jubilant", "laugh", "smile", "grin", "celebrate"),
    "sadness": ("sad", "sorrow", "grief", "mourn", "cry", "weep", "tears", "despair",
                "heartbreak", "melancholy", "depressed", "miserable"),
    "anger": ("angry", "rage", "fury", "furious", "mad", "livid", "irate", "enraged",
              "hostile", "resentment", "hatred", "wrath"),
    "fear": ("fear", "afraid", "scared", "terrified", "panic", "dread", "horror",
             "anxiety", "nervous", "worried", "alarmed", "frightened"),
    "love": ("love", "adore", "cherish", "affection", "passion", "devoted", "tender",
             "romantic", "intimate", "beloved", "sweetheart", "kiss"),
    "tension": ("tense", "suspense", "anticipation", "urgent", "rush", "danger",
                "threat", "chase", "pursue", "escape", "conflict", "confrontation"),
}


@dataclass(frozen=True)
class EmotionalIntensity:
    position: int
    intensity: int
    emotion: str
    context: str


@dataclass(frozen=True)
class EmotionHeatmapResult:
    data_points: Tuple[EmotionalIntensity, ...]
    average_intensity: float
    peaks: Tuple[EmotionalIntensity, ...]
    valleys: Tuple[EmotionalIntensity, ...]
    emotion_breakdown: Dict[str, int]
    pacing_issues: Tuple[str, ...]

    def dominant_emotions(self, limit: int = 3) -> List[Tuple[str, int]]:
        """Most frequent emotions by keyword count."""
        ranked = sorted(self.emotion_breakdown.items(), key=lambda kv: kv[1], reverse=True)
        return ranked[:limit]


def score_chunk(chunk: str, position: int, counts: Dict[str, int]) -> EmotionalIntensity:
    """Score one chunk by its strongest emotion family; updates ``counts``."""
    lower = chunk.lower()
    best_intensity = 0
    best_emotion = "neutral"
    for emotion, keywords in EMOTION_KEYWORDS.items():
        # substring presence: each keyword counts once per chunk
        matches = sum(1 for k in keywords if k in lower)
        intensity = min(100, matches * 20)
        if intensity > best_intensity:
            best_intensity = intensity
            best_emotion = emotion
        if matches:
            counts[emotion] = counts.get(emotion, 0) + matches
    return EmotionalIntensity(
        position=position,
        intensity=best_intensity,
        emotion=best_emotion,
        context=chunk[:CONTEXT_LENGTH] + "...",
    )


def pacing_issues(points: Tuple[EmotionalIntensity, ...], average: float, valleys: int) -> List[str]:
    issues = []
    if average < 20:
        issues.append("Overall emotional intensity is low - consider adding more tension")
    if valleys > len(points) * 0.4:
        issues.append("Too many low-intensity sections - manuscript may feel flat")

    monotony = sum(
        1 for prev, curr in zip(points, points[1:]) if abs(curr.intensity - prev.intensity) < 10
    )
    if monotony > len(points) * 0.5:
        issues.append("Emotional intensity too consistent - vary the pacing")
    return issues


class EmotionHeatmapAnalyzer(BaseAnalyzer):
    name = "emotion_heatmap"

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        self.chunk_size = chunk_size

    def analyze(self, text: str, genre: Optional[str] = None) -> EmotionHeatmapResult:
        counts: Dict[str, int] = {}
        points = tuple(
            score_chunk(text[start : start + self.chunk_size], start, counts)
            for start in range(0, len(text), self.chunk_size)
        )

        average = Statistics.mean([p.intensity for p in points])
        peaks = sorted(
            (p for p in points if p.intensity > average * 1.5),
            key=lambda p: p.intensity,
            reverse=True,
        )[:MAX_EXTREMES]
        valleys = sorted(
            (p for p in points if p.intensity < average * 0.5),
            key=lambda p: p.intensity,
        )[:MAX_EXTREMES]

        return EmotionHeatmapResult(
            data_points=points,
            average_intensity=average,
            peaks=tuple(peaks),
            valleys=tuple(valleys),
            emotion_breakdown=counts,
            pacing_issues=tuple(pacing_issues(points, average, len(valleys))),
        )
