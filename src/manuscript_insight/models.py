"""Data models for Manuscript Insight.

All records are frozen: a report is assembled once from already-computed
parts and never mutated afterwards.
"""

import dataclasses
import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .exceptions import InvalidManuscriptError
from .principles import FictionElementPrinciple, PrincipleId

_WHITESPACE = re.compile(r"\s+")


def count_words(text: str) -> int:
    """Whitespace-delimited word count (0 for blank text)."""
    stripped = text.strip()
    if not stripped:
        return 0
    return len(_WHITESPACE.split(stripped))


@dataclass(frozen=True)
class Section:
    """A structural section of a manuscript (heading plus character bounds)."""

    heading: str
    start_index: int
    end_index: int


# Markdown-style headings or "Chapter N" lines
_HEADING = re.compile(
    r"^[ \t]*(#{1,6}[ \t]+\S.*|chapter[ \t]+\w+[^.!?\n]{0,60})[ \t]*$", re.IGNORECASE | re.MULTILINE
)


def detect_sections(text: str) -> Tuple[Section, ...]:
    """Split text into sections at each heading line.

    A section runs from its heading to the next heading (or the end of the
    text). Text before the first heading belongs to no section.
    """
    matches = list(_HEADING.finditer(text))
    sections = []
    for i, match in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        heading = match.group(1).lstrip("#").strip()
        sections.append(Section(heading=heading, start_index=match.start(), end_index=end))
    return tuple(sections)


@dataclass(frozen=True)
class ManuscriptInput:
    """One manuscript submitted for analysis."""

    id: str
    content: str
    word_count: int
    sections: Tuple[Section, ...] = ()
    genre: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            raise InvalidManuscriptError("content must be a string", self.id)
        if self.word_count < 0:
            raise InvalidManuscriptError("word count must be non-negative", self.id)
        # Accept lists from callers but store a tuple
        object.__setattr__(self, "sections", tuple(self.sections))
        length = len(self.content)
        for section in self.sections:
            if not 0 <= section.start_index <= section.end_index <= length:
                raise InvalidManuscriptError(
                    f"section {section.heading!r} lies outside the content", self.id
                )

    @classmethod
    def from_text(
        cls,
        manuscript_id: str,
        content: str,
        sections: Tuple[Section, ...] = (),
        genre: Optional[str] = None,
    ) -> "ManuscriptInput":
        """Build an input, computing the word count from the content."""
        return cls(
            id=manuscript_id,
            content=content,
            word_count=count_words(content),
            sections=sections,
            genre=genre,
        )


@dataclass(frozen=True)
class Paragraph:
    """A non-empty paragraph produced by the segmenter."""

    id: str
    text: str
    start_index: int
    end_index: int
    char_count: int
    word_count: int


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class Suggestion:
    id: str
    principle: PrincipleId
    priority: Priority
    title: str
    description: str
    implementation: str
    expected_impact: str
    related_concepts: Tuple[str, ...] = ()

    @property
    def principle_id(self) -> str:
        return self.principle.id


@dataclass(frozen=True)
class PrincipleScore:
    """Uniform scored record, one per tracked metric."""

    principle: PrincipleId
    display_name: str
    score: float
    weight: float
    details: Tuple[str, ...] = ()
    suggestions: Tuple[Suggestion, ...] = ()

    @property
    def principle_id(self) -> str:
        return self.principle.id

    @property
    def is_fiction_element(self) -> bool:
        return isinstance(self.principle, FictionElementPrinciple)


@dataclass(frozen=True)
class Finding:
    message: str
    evidence: str
    type: str = "neutral"
    severity: float = 0.5


@dataclass(frozen=True)
class PrincipleEvaluation:
    """Evaluation view of one principle score (findings mirror its details)."""

    principle_id: str
    score: float
    weight: float
    findings: Tuple[Finding, ...]
    suggestions: Tuple[Suggestion, ...]
    evidence: Tuple[str, ...] = ()


@dataclass(frozen=True)
class VisualizedPrinciple:
    name: str
    display_name: str
    score: float
    weight: float


@dataclass(frozen=True)
class PrincipleVisualization:
    """Visualization view: name/score/weight tuples plus the rounded overall score."""

    principles: Tuple[VisualizedPrinciple, ...]
    overall_weighted_score: int


@dataclass(frozen=True)
class AnalysisMetrics:
    total_words: int
    reading_time: int             # minutes, rounded up
    average_section_length: float
    timestamp: datetime


@dataclass(frozen=True)
class AnalyzerOutputs:
    """Verbatim raw results of every analyzer for downstream display.

    Fields hold the frozen result dataclasses of ``manuscript_insight.analyzers``.
    """

    paragraphs: Tuple[Paragraph, ...]
    dual_coding: Any
    characters: Any
    themes: Any
    tropes: Any
    fiction_elements: Any
    prose_quality: Any
    emotion_heatmap: Any
    pov_consistency: Any
    cliches: Any
    filtering_words: Any
    backstory: Any
    dialogue_ratio: Any
    scene_sequel: Any
    conflict: Any
    sensory: Any


@dataclass(frozen=True)
class AnalysisReport:
    """Terminal artifact of one analysis run."""

    chapter_id: str
    genre: str
    overall_score: int
    principle_scores: Tuple[PrincipleScore, ...]
    evaluation: Tuple[PrincipleEvaluation, ...]
    visualization: PrincipleVisualization
    metrics: AnalysisMetrics
    timestamp: datetime
    results: AnalyzerOutputs = field(repr=False)

    @property
    def fiction_element_scores(self) -> Tuple[PrincipleScore, ...]:
        return tuple(ps for ps in self.principle_scores if ps.is_fiction_element)

    def get_score(self, principle_id: str) -> PrincipleScore:
        for ps in self.principle_scores:
            if ps.principle_id == principle_id:
                return ps
        raise KeyError(f"Unknown principle: {principle_id!r}")


def to_plain(value: Any) -> Any:
    """Convert models to JSON-compatible plain data.

    Principle ids become their id strings, enums their values, datetimes
    ISO-8601 strings, sets sorted lists.
    """
    if isinstance(value, FictionElementPrinciple):
        return value.id
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (set, frozenset)):
        return sorted(to_plain(v) for v in value)
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


def report_to_dict(report: AnalysisReport) -> Dict[str, Any]:
    """Serialize a report to a plain dict (safe to copy across a worker boundary)."""
    return to_plain(report)
