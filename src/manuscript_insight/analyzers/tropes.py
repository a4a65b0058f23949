"""Genre trope and story-beat detection."""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..math import round_half_up
from .base import BaseAnalyzer
from .trope_library import GenreLibrary, get_library

MIN_TROPE_STRENGTH = 5


@dataclass(frozen=True)
class Trope:
    name: str
    keywords: Tuple[str, ...]
    patterns: Tuple[str, ...]
    strength: int


@dataclass(frozen=True)
class StoryBeat:
    name: str
    position: str
    keywords: Tuple[str, ...]
    detected: bool
    confidence: int


@dataclass(frozen=True)
class TropeAnalysisResult:
    genre: str
    detected_tropes: Tuple[Trope, ...]
    story_beats: Tuple[StoryBeat, ...]
    convention_score: int
    subversion_score: int
    trope_overuse_score: int
    recommendations: Tuple[str, ...]

    @property
    def detected_beats(self) -> Tuple[StoryBeat, ...]:
        return tuple(b for b in self.story_beats if b.detected)


def count_stem_matches(text: str, keywords: Sequence[str]) -> int:
    """Count keyword-prefixed words ("betray" also matches "betrayed")."""
    return sum(
        len(re.findall(rf"\b{re.escape(k)}\w*\b", text, re.IGNORECASE)) for k in keywords
    )


def divide_into_sections(text: str) -> Tuple[str, str, str]:
    length = len(text)
    first = length // 3
    second = (length * 2) // 3
    return text[:first], text[first:second], text[second:]


def convention_score(tropes: Sequence[Trope], beats: Sequence[StoryBeat]) -> int:
    detected_beats = sum(1 for b in beats if b.detected)
    if not tropes and detected_beats == 0:
        return 30
    strong = sum(1 for t in tropes if t.strength > 30)
    trope_score = min(100, len(tropes) * 10 + strong * 15)
    beat_score = min(100, detected_beats / len(beats) * 100)
    return round_half_up(trope_score * 0.6 + beat_score * 0.4)


def subversion_score(
    tropes: Sequence[Trope], beats: Sequence[StoryBeat], library: GenreLibrary
) -> int:
    expected_tropes = len(library.tropes)
    trope_absence = (expected_tropes - len(tropes)) / expected_tropes * 100
    expected_beats = len(library.beats)
    detected_beats = sum(1 for b in beats if b.detected)
    beat_absence = (expected_beats - detected_beats) / expected_beats * 100
    return round_half_up((trope_absence + beat_absence) / 2)


def overuse_score(tropes: Sequence[Trope]) -> int:
    if not tropes:
        return 0
    very_strong = sum(1 for t in tropes if t.strength > 50)
    strong = sum(1 for t in tropes if t.strength > 30)
    return min(100, very_strong * 25 + strong * 10)


def _recommendations(
    tropes: Sequence[Trope],
    beats: Sequence[StoryBeat],
    convention: int,
    subversion: int,
    overuse: int,
    genre: str,
) -> List[str]:
    recs = []
    if convention < 40:
        recs.append(
            f"Your {genre} story has few recognizable genre markers. Consider incorporating "
            f"more {genre}-specific elements to meet reader expectations."
        )
    elif convention > 80:
        recs.append(
            f"Strong genre adherence detected. Your story hits key {genre} conventions effectively."
        )

    if subversion > 70:
        recs.append(
            "High subversion detected. You're breaking genre conventions significantly - "
            "ensure this is intentional and readers are prepared for it."
        )
    elif subversion < 30:
        recs.append(
            "Low subversion detected. Consider adding unique twists to avoid predictability."
        )

    if overuse > 60:
        recs.append(
            "Warning: Multiple common tropes detected at high frequency. Consider reducing "
            "clichés or adding fresh twists to familiar elements."
        )
    elif overuse < 20 and tropes:
        recs.append(
            "Good balance of trope usage - familiar elements present without overwhelming "
            "the narrative."
        )

    if tropes:
        top = tropes[0]
        recs.append(
            f'Primary trope detected: "{top.name}" ({top.strength}% strength). '
            "This is a strong genre marker."
        )

    detected = [b for b in beats if b.detected]
    missing = [b for b in beats if not b.detected]
    if detected:
        recs.append(
            f"Story beats found: {', '.join(b.name for b in detected)}. "
            "These provide good narrative structure."
        )
    if 0 < len(missing) <= 3:
        recs.append(
            f"Consider adding: {', '.join(b.name for b in missing[:2])}. "
            f"These beats can strengthen your {genre} narrative arc."
        )
    return recs


class TropeAnalyzer(BaseAnalyzer):
    """Genre-aware: the genre label selects the trope library."""

    name = "tropes"

    def analyze(self, text: str, genre: Optional[str] = None) -> TropeAnalysisResult:
        genre = genre or "general"
        library = get_library(genre)
        if library is None:
            return TropeAnalysisResult(
                genre=genre,
                detected_tropes=(),
                story_beats=(),
                convention_score=50,
                subversion_score=50,
                trope_overuse_score=0,
                recommendations=(
                    f'Genre "{genre}" doesn\'t have a specialized trope library yet.',
                    "Analysis will be available for: Romance, Thriller, Fantasy, Mystery, SciFi, Horror",
                ),
            )

        lower = text.lower()
        total_words = max(1, len(lower.split()))

        tropes = []
        for trope in library.tropes:
            per_thousand = count_stem_matches(lower, trope.keywords) / total_words * 1000
            strength = round_half_up(min(100, per_thousand * 20))
            if strength > MIN_TROPE_STRENGTH:
                tropes.append(Trope(trope.name, trope.keywords, trope.patterns, strength))
        tropes.sort(key=lambda t: t.strength, reverse=True)

        early, middle, late = divide_into_sections(text)
        by_position = {"early": early, "middle": middle, "late": late}
        beats = []
        for beat in library.beats:
            section = by_position.get(beat.position, text)
            matches = count_stem_matches(section.lower(), beat.keywords)
            beats.append(
                StoryBeat(
                    name=beat.name,
                    position=beat.position,
                    keywords=beat.keywords,
                    detected=matches > 0,
                    confidence=round_half_up(min(100, matches / len(beat.keywords) * 50)),
                )
            )

        convention = convention_score(tropes, beats)
        subversion = subversion_score(tropes, beats, library)
        overuse = overuse_score(tropes)

        return TropeAnalysisResult(
            genre=genre,
            detected_tropes=tuple(tropes),
            story_beats=tuple(beats),
            convention_score=convention,
            subversion_score=subversion,
            trope_overuse_score=overuse,
            recommendations=tuple(
                _recommendations(tropes, beats, convention, subversion, overuse, genre)
            ),
        )
