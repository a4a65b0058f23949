"""Backstory density: indicator phrases counted per 1000-word section."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..math import percent
from .base import BaseAnalyzer

WORDS_PER_SECTION = 1000
DISTRIBUTION_SEGMENTS = 10
OPENING_SHARE = 0.2

BACKSTORY_INDICATORS = (
    "remembered", "recalled", "thought back", "years ago", "months ago", "used to",
    "had been", "had always", "in the past", "before", "once upon a time",
    "flashback", "memory", "memories",
)


@dataclass(frozen=True)
class BackstorySection:
    start: int
    end: int
    length: int
    indicators: Tuple[str, ...]
    severity: str  # light | moderate | heavy


@dataclass(frozen=True)
class BackstoryDensityResult:
    sections: Tuple[BackstorySection, ...]
    total_backstory_length: int
    percentage: float
    opening_chapters_backstory: float
    distribution: Tuple[float, ...]
    warnings: Tuple[str, ...]

    @property
    def heavy_sections(self) -> int:
        return sum(1 for s in self.sections if s.severity == "heavy")


def severity_for(indicator_count: int) -> str:
    if indicator_count > 8:
        return "heavy"
    if indicator_count > 4:
        return "moderate"
    return "light"


def find_sections(text: str, words_per_section: int = WORDS_PER_SECTION) -> List[BackstorySection]:
    """Sections with more than two indicator hits.

    Offsets advance by the rejoined section length, so they drift from the
    source text by the whitespace between sections.
    """
    words = text.split()
    sections = []
    position = 0
    for i in range(0, len(words), words_per_section):
        section = " ".join(words[i : i + words_per_section])
        lower = section.lower()
        found = []
        hits = 0
        for indicator in BACKSTORY_INDICATORS:
            occurrences = lower.count(indicator)
            if occurrences:
                found.append(indicator)
                hits += occurrences
        if hits > 2:
            sections.append(
                BackstorySection(
                    start=position,
                    end=position + len(section),
                    length=len(section),
                    indicators=tuple(found),
                    severity=severity_for(hits),
                )
            )
        position += len(section)
    return sections


def distribution(sections: List[BackstorySection], text_length: int) -> List[float]:
    """Backstory percentage for each tenth of the text, by section start."""
    if text_length == 0:
        return [0.0] * DISTRIBUTION_SEGMENTS
    size = text_length / DISTRIBUTION_SEGMENTS
    result = []
    for i in range(DISTRIBUTION_SEGMENTS):
        low, high = i * size, (i + 1) * size
        length = sum(s.length for s in sections if low <= s.start < high)
        result.append(length / size * 100)
    return result


class BackstoryAnalyzer(BaseAnalyzer):
    name = "backstory"

    def analyze(self, text: str, genre: Optional[str] = None) -> BackstoryDensityResult:
        sections = find_sections(text)
        total = sum(s.length for s in sections)
        percentage = percent(total, len(text))

        opening_length = len(text) * OPENING_SHARE
        opening = percent(
            sum(s.length for s in sections if s.start < opening_length), opening_length
        )

        warnings = []
        if opening > 30:
            warnings.append(
                "High backstory density in opening (>30%) - consider starting with action"
            )
        if percentage > 25:
            warnings.append(
                "Overall backstory percentage high (>25%) - consider weaving in more gradually"
            )
        heavy = sum(1 for s in sections if s.severity == "heavy")
        if heavy > 3:
            warnings.append(f"{heavy} heavy backstory sections detected - break up exposition")

        return BackstoryDensityResult(
            sections=tuple(sections),
            total_backstory_length=total,
            percentage=percentage,
            opening_chapters_backstory=opening,
            distribution=tuple(distribution(sections, len(text))),
            warnings=tuple(warnings),
        )
