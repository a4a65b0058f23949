"""Score normalizers: fixed banding rules turning raw counts into 0-100 scores."""

from dataclasses import dataclass
from typing import Iterable

from ..math import round_half_up
from ..models import Paragraph

COMPACT_MAX_EXCLUSIVE = 60
EXTENDED_MIN_EXCLUSIVE = 160

COMPACT = "compact"
BALANCED = "balanced"
EXTENDED = "extended"


@dataclass(frozen=True)
class PacingCounts:
    compact: int = 0
    balanced: int = 0
    extended: int = 0

    @property
    def total(self) -> int:
        return self.compact + self.balanced + self.extended


@dataclass(frozen=True)
class DualCodingCounts:
    suggestion_count: int = 0
    total_paragraphs: int = 0


def classify_paragraph(word_count: int) -> str:
    """Classify a paragraph by length: compact (< 60), extended (> 160), else balanced."""
    if word_count < COMPACT_MAX_EXCLUSIVE:
        return COMPACT
    if word_count > EXTENDED_MIN_EXCLUSIVE:
        return EXTENDED
    return BALANCED


def count_pacing(paragraphs: Iterable[Paragraph]) -> PacingCounts:
    """Bucket paragraphs into compact/balanced/extended counts."""
    counts = {COMPACT: 0, BALANCED: 0, EXTENDED: 0}
    for para in paragraphs:
        counts[classify_paragraph(para.word_count)] += 1
    return PacingCounts(
        compact=counts[COMPACT],
        balanced=counts[BALANCED],
        extended=counts[EXTENDED],
    )


def calculate_pacing_score(counts: PacingCounts) -> int:
    """Pacing score from the paragraph mix.

    No paragraphs is neutral (50). Variety is 100 only when all three
    styles appear, otherwise 70. Balance is 100 for a balanced share in
    [0.4, 0.6], 85 in [0.3, 0.7], else 70. The result is the rounded mean.
    """
    total = counts.total
    if total == 0:
        return 50

    all_present = min(counts.compact, counts.balanced, counts.extended) != 0
    variety_score = 100 if all_present else 70

    balanced_ratio = counts.balanced / total
    if 0.4 <= balanced_ratio <= 0.6:
        balance_score = 100
    elif 0.3 <= balanced_ratio <= 0.7:
        balance_score = 85
    else:
        balance_score = 70

    return round_half_up((variety_score + balance_score) / 2)


_DUAL_CODING_BANDS = (
    (0.1, 95),
    (0.2, 85),
    (0.3, 75),
    (0.4, 65),
    (0.5, 55),
)


def calculate_dual_coding_score(counts: DualCodingCounts) -> int:
    """Show-vs-tell score: fewer imagery suggestions per paragraph scores higher."""
    ratio = counts.suggestion_count / max(counts.total_paragraphs, 1)
    for upper, score in _DUAL_CODING_BANDS:
        if ratio < upper:
            return score
    return 45
