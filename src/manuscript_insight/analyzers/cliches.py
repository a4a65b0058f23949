"""Stock-phrase detection."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Pattern, Tuple

from ._text import per_thousand
from .base import BaseAnalyzer


@dataclass(frozen=True)
class ClicheSpec:
    pattern: Pattern
    category: str
    severity: str  # mild | moderate | severe
    alternative: str


def _c(phrase: str, category: str, severity: str, alternative: str) -> ClicheSpec:
    return ClicheSpec(re.compile(phrase, re.IGNORECASE), category, severity, alternative)


CLICHES: Tuple[ClicheSpec, ...] = (
    _c("it was a dark and stormy night", "opening", "severe",
       "Start with action or a unique atmospheric detail"),
    _c("eyes sparkled like diamonds", "description", "severe",
       "Use a fresh, specific comparison"),
    _c("time stood still", "description", "moderate",
       "Describe the moment with sensory details"),
    _c("butterflies in (her|his|their) stomach", "emotion", "moderate",
       "Show physical sensations uniquely"),
    _c("heart skipped a beat", "emotion", "moderate",
       "Describe the physiological response specifically"),
    _c("a needle in a haystack", "comparison", "mild", "Create a fresh metaphor"),
    _c("easier said than done", "idiom", "mild", "Show the difficulty through action"),
    _c("the calm before the storm", "description", "moderate",
       "Describe the specific atmosphere"),
    _c("blood ran cold", "emotion", "moderate",
       "Show fear through unique physical reactions"),
    _c("white as a ghost", "description", "moderate",
       "Use a specific, original comparison"),
)


@dataclass(frozen=True)
class ClicheInstance:
    cliche: str
    position: int
    context: str
    severity: str
    alternative: str


@dataclass(frozen=True)
class ClicheDetectionResult:
    instances: Tuple[ClicheInstance, ...]
    count: int
    density: float  # per 1000 words
    categories: Dict[str, int]

    def top_categories(self, limit: int = 2) -> List[Tuple[str, int]]:
        return sorted(self.categories.items(), key=lambda kv: kv[1], reverse=True)[:limit]


class ClicheDetector(BaseAnalyzer):
    name = "cliches"

    def analyze(self, text: str, genre: Optional[str] = None) -> ClicheDetectionResult:
        lower = text.lower()
        instances = []
        categories: Dict[str, int] = {}
        for cliche in CLICHES:
            for match in cliche.pattern.finditer(lower):
                position = match.start()
                instances.append(
                    ClicheInstance(
                        cliche=match.group(0),
                        position=position,
                        context=text[max(0, position - 50) : position + 100],
                        severity=cliche.severity,
                        alternative=cliche.alternative,
                    )
                )
                categories[cliche.category] = categories.get(cliche.category, 0) + 1

        return ClicheDetectionResult(
            instances=tuple(instances),
            count=len(instances),
            density=per_thousand(len(instances), len(text.split())),
            categories=categories,
        )
