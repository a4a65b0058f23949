"""Scene (action) versus sequel (reflection) structure over 1000-word chunks."""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..math import Statistics
from .base import BaseAnalyzer

CHUNK_WORDS = 1000

SCENE_INDICATORS = (
    "grabbed", "ran", "jumped", "fought", "attacked", "chased", "escaped", "confronted",
    "demanded", "shouted", "charged", "fired", "struck", "burst", "lunged", "rushed",
    "sprinted", "slammed",
)

SEQUEL_INDICATORS = (
    "thought", "wondered", "considered", "realized", "remembered", "reflected", "decided",
    "resolved", "understood", "contemplated", "pondered", "felt", "emotion", "reaction",
    "processing",
)


@dataclass(frozen=True)
class SceneSequel:
    type: str  # scene | sequel
    start: int  # word offsets
    end: int
    length: int
    indicators: Tuple[str, ...]
    intensity: int


@dataclass(frozen=True)
class SceneSequelResult:
    scenes: Tuple[SceneSequel, ...]
    sequels: Tuple[SceneSequel, ...]
    scene_count: int
    sequel_count: int
    scene_to_sequel_ratio: float
    average_scene_length: float
    average_sequel_length: float
    balance: str  # excellent | good | unbalanced
    recommendations: Tuple[str, ...]


def classify_chunk(words: Tuple[str, ...], start: int) -> SceneSequel:
    """Ties go to sequel; indicators match as substrings."""
    lower = " ".join(words).lower()
    scene_hits = tuple(i for i in SCENE_INDICATORS if i in lower)
    sequel_hits = tuple(i for i in SEQUEL_INDICATORS if i in lower)
    if len(scene_hits) > len(sequel_hits):
        kind, hits, intensity = "scene", scene_hits, min(100, len(scene_hits) * 10)
    else:
        kind, hits, intensity = "sequel", sequel_hits, min(100, len(sequel_hits) * 8)
    return SceneSequel(kind, start, start + len(words), len(words), hits, intensity)


def balance_for(ratio: float) -> str:
    if ratio > 5 or ratio < 1:
        return "unbalanced"
    if ratio > 3 or ratio < 1.5:
        return "good"
    return "excellent"


class SceneSequelAnalyzer(BaseAnalyzer):
    name = "scene_sequel"

    def analyze(self, text: str, genre: Optional[str] = None) -> SceneSequelResult:
        words = tuple(text.split())
        chunks = [
            classify_chunk(words[i : i + CHUNK_WORDS], i) for i in range(0, len(words), CHUNK_WORDS)
        ]
        scenes = tuple(c for c in chunks if c.type == "scene")
        sequels = tuple(c for c in chunks if c.type == "sequel")
        ratio = len(scenes) / len(sequels) if sequels else float(len(scenes))

        recs = []
        if ratio > 4:
            recs.append("Too many scenes - add more reflection and character processing")
        elif ratio < 1.5:
            recs.append("Too much reflection - increase action and goal-oriented scenes")
        if not scenes:
            recs.append("No clear scene structure detected - add more action sequences")
        if not sequels:
            recs.append(
                "No sequel/reflection detected - add character reaction and decision points"
            )

        return SceneSequelResult(
            scenes=scenes,
            sequels=sequels,
            scene_count=len(scenes),
            sequel_count=len(sequels),
            scene_to_sequel_ratio=ratio,
            average_scene_length=Statistics.mean([s.length for s in scenes]),
            average_sequel_length=Statistics.mean([s.length for s in sequels]),
            balance=balance_for(ratio),
            recommendations=tuple(recs),
        )
