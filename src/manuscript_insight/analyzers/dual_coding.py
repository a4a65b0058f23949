"""Show-vs-tell detection: paragraphs whose content would benefit from imagery.

Each paragraph is checked against six pattern families. A family that passes
its threshold emits one ``VisualSuggestion``; the engine only counts them.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models import Paragraph
from ._text import count_matches, split_whitespace
from .base import BaseAnalyzer
from .segmenter import extract_paragraphs

MIN_PARAGRAPH_CHARS = 50


@dataclass(frozen=True)
class VisualSuggestion:
    position: int
    paragraph: str
    reason: str
    visual_type: str  # diagram, flowchart, graph, concept-map, illustration
    priority: str
    context: str


@dataclass(frozen=True)
class DualCodingResult:
    suggestions: Tuple[VisualSuggestion, ...]
    paragraphs_analyzed: int

    @property
    def suggestion_count(self) -> int:
        return len(self.suggestions)


def _compile(*alternations: str) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(rf"\b({alt})\b", re.IGNORECASE) for alt in alternations)


SPATIAL_PATTERNS = _compile(
    "above|below|beneath|adjacent|parallel|perpendicular|horizontal|vertical|diagonal",
    "left|right|top|bottom|center|middle|side|corner",
    "structure|shape|form|arrangement|configuration|layout|position",
    "connected|attached|linked|joined|bonded|between",
)

PROCESS_PATTERNS = _compile(
    "first|second|third|next|then|finally|subsequently|afterward",
    "step|stage|phase|process|procedure|sequence|cycle",
    "begins|starts|initiates|leads to|results in|produces|forms",
)

QUANTITATIVE_PATTERNS = (
    re.compile(r"\b\d+(?:\.\d+)?\s*(?:percent|%|times|fold|ratio|proportion)\b", re.IGNORECASE),
) + _compile(
    "increase|decrease|higher|lower|greater|less|more|fewer",
    r"compare|comparison|versus|vs\.|contrast|difference|similar",
    "data|values|measurements|results|statistics",
)

CONCEPT_PATTERNS = _compile(
    "concept|theory|principle|law|hypothesis|model",
    "relationship|interaction|correlation|connection",
    "defined as|refers to|means|represents|symbolizes",
    "consists of|composed of|made up of|includes",
)

SYSTEM_PATTERNS = _compile(
    "system|component|part|element|unit|module",
    "contains|comprises|consists of|includes",
    "function|role|purpose|operates|works",
)

_ACRONYM = re.compile(r"[A-Z]{2,}")
_PARENTHESIZED = re.compile(r"\([^)]+\)")


def technical_density(text: str) -> float:
    """Share of whitespace tokens that look technical."""
    words = split_whitespace(text)
    if not words:
        return 0.0
    technical = [
        w for w in words
        if len(w) > 10 or _ACRONYM.search(w) or "-" in w or _PARENTHESIZED.search(w)
    ]
    return len(technical) / len(words)


def _context(prev_para: str, current: str, next_para: str) -> str:
    prev = prev_para[:100] + "..." if prev_para else ""
    curr = current[:150] + "..."
    nxt = "..." + next_para[:100] if next_para else ""
    return " ".join(part for part in (prev, curr, nxt) if part)


def analyze_paragraph(
    text: str, position: int, prev_para: str = "", next_para: str = ""
) -> List[VisualSuggestion]:
    """Return the imagery suggestions for one paragraph."""
    para = text.strip()
    if len(para) < MIN_PARAGRAPH_CHARS:
        return []

    suggestions: List[VisualSuggestion] = []
    preview = para[:150] + "..."
    context = _context(prev_para, para, next_para)

    def emit(reason: str, visual_type: str, priority: str) -> None:
        suggestions.append(
            VisualSuggestion(position, preview, reason, visual_type, priority, context)
        )

    spatial = count_matches(para, SPATIAL_PATTERNS)
    if spatial >= 2 and len(para) > 80:
        emit("Contains spatial/structural descriptions", "diagram",
             "high" if spatial >= 4 else "medium")

    process = count_matches(para, PROCESS_PATTERNS)
    if process >= 2 and len(para) > 80:
        emit("Describes a process or sequence", "flowchart",
             "high" if process >= 4 else "medium")

    quantitative = count_matches(para, QUANTITATIVE_PATTERNS)
    if quantitative >= 2 and len(para) > 60:
        emit("Contains quantitative data or comparisons", "graph",
             "high" if quantitative >= 4 else "medium")

    if count_matches(para, CONCEPT_PATTERNS) >= 2 and len(para) > 100:
        emit("Explains abstract concepts", "concept-map", "medium")

    density = technical_density(para)
    if density > 0.12 and len(para) > 120:
        emit("High density of technical terms", "illustration",
             "high" if density > 0.2 else "medium")

    if count_matches(para, SYSTEM_PATTERNS) >= 3 and len(para) > 100:
        emit("Describes system or components", "diagram", "medium")

    return suggestions


def analyze_paragraphs(paragraphs: Sequence[Paragraph]) -> DualCodingResult:
    suggestions: List[VisualSuggestion] = []
    for index, para in enumerate(paragraphs):
        prev_para = paragraphs[index - 1].text if index > 0 else ""
        next_para = paragraphs[index + 1].text if index < len(paragraphs) - 1 else ""
        suggestions.extend(analyze_paragraph(para.text, index, prev_para, next_para))
    return DualCodingResult(suggestions=tuple(suggestions), paragraphs_analyzed=len(paragraphs))


class DualCodingAnalyzer(BaseAnalyzer):
    name = "dual_coding"

    def analyze(self, text: str, genre: Optional[str] = None) -> DualCodingResult:
        return analyze_paragraphs(extract_paragraphs(text))
