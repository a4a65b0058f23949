"""Point-of-view classification per sentence, shifts and head-hopping."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._text import SENTENCE_TERMINATORS
from .base import BaseAnalyzer

HEAD_HOP_DISTANCE = 1000

_FIRST = re.compile(r"\b(i|me|my|mine|we|us|our|ours)\b")
_SECOND = re.compile(r"\byou\b")
_THANK_YOU = re.compile(r"\bthank you\b")
_OMNISCIENT = re.compile(r"\b(everyone|no one|all of them) (knew|thought|felt|realized)\b")
_THIRD = re.compile(r"\b(he|she|they|him|her|them|his|hers|their)\b")


@dataclass(frozen=True)
class POVInstance:
    position: int
    pov_type: str  # first | second | third-limited | third-omniscient
    character: Optional[str]
    sentence: str


@dataclass(frozen=True)
class POVConsistencyResult:
    dominant_pov: str
    pov_shifts: Tuple[POVInstance, ...]
    shift_count: int
    consistency: float
    potential_head_hops: Tuple[POVInstance, ...]
    recommendations: Tuple[str, ...]


def classify_sentence(sentence: str) -> Optional[str]:
    """POV type signalled by a sentence's pronouns, first match wins."""
    lower = sentence.strip().lower()
    if _FIRST.search(lower):
        return "first"
    if _SECOND.search(lower) and not _THANK_YOU.search(lower):
        return "second"
    if _OMNISCIENT.search(lower):
        return "third-omniscient"
    if _THIRD.search(lower):
        return "third-limited"
    return None


def find_head_hops(shifts: Tuple[POVInstance, ...]) -> List[POVInstance]:
    """Shifts landing within HEAD_HOP_DISTANCE characters of the previous shift."""
    return [
        curr
        for prev, curr in zip(shifts, shifts[1:])
        if curr.position - prev.position < HEAD_HOP_DISTANCE
    ]


class POVAnalyzer(BaseAnalyzer):
    name = "pov_consistency"

    def analyze(self, text: str, genre: Optional[str] = None) -> POVConsistencyResult:
        instances: List[POVInstance] = []
        counts: Dict[str, int] = {}
        for sentence in SENTENCE_TERMINATORS.split(text):
            if not sentence.strip():
                continue
            pov_type = classify_sentence(sentence)
            if pov_type is None:
                continue
            instances.append(POVInstance(text.find(sentence), pov_type, None, sentence.strip()))
            counts[pov_type] = counts.get(pov_type, 0) + 1

        dominant = "unknown"
        max_count = 0
        for pov_type, count in counts.items():
            if count > max_count:
                dominant, max_count = pov_type, count

        shifts = tuple(
            curr for prev, curr in zip(instances, instances[1:]) if curr.pov_type != prev.pov_type
        )
        consistency = max_count / len(instances) * 100 if max_count else 0.0
        head_hops = find_head_hops(shifts)

        recs = []
        if consistency < 80:
            recs.append("POV consistency is low - consider sticking to one POV")
        if head_hops:
            recs.append(
                f"{len(head_hops)} potential head-hopping instances detected - "
                "maintain POV within scenes"
            )
        if len(shifts) > 10:
            recs.append("Many POV shifts detected - ensure each shift is intentional")

        return POVConsistencyResult(
            dominant_pov=dominant,
            pov_shifts=shifts,
            shift_count=len(shifts),
            consistency=consistency,
            potential_head_hops=tuple(head_hops),
            recommendations=tuple(recs),
        )
