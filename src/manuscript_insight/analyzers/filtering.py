"""Filter words: perception and cognition verbs that distance the reader."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._text import SENTENCE_TERMINATORS, per_thousand
from .base import BaseAnalyzer

FILTERING_WORDS: Dict[str, Tuple[str, ...]] = {
    "perception": ("saw", "seen", "see", "sees", "seeing"),
    "hearing": ("heard", "hear", "hears", "hearing"),
    "thought": ("thought", "think", "thinks", "thinking", "wondered", "wonder", "wonders",
                "wondering"),
    "feeling": ("felt", "feel", "feels", "feeling"),
    "realization": ("realized", "realize", "realizes", "realizing", "noticed", "notice",
                    "notices", "noticing"),
    "watching": ("watched", "watch", "watches", "watching"),
    "seeming": ("seemed", "seem", "seems", "seeming", "appeared", "appear", "appears"),
}

SUGGESTIONS: Dict[str, str] = {
    "perception": "Show what is seen directly instead of filtering through 'saw'",
    "hearing": "Present sounds directly instead of 'heard'",
    "thought": "Use italics or close POV to show thoughts directly",
    "feeling": "Show emotions through actions and physical sensations",
    "realization": "Show the realization through character reaction",
    "watching": "Describe the action directly",
    "seeming": "State what is or describe the appearance specifically",
}

_PATTERNS = {
    word: re.compile(rf"\b{word}\b")
    for words in FILTERING_WORDS.values()
    for word in words
}


@dataclass(frozen=True)
class FilteringWord:
    word: str
    position: int
    sentence: str
    suggestion: str


@dataclass(frozen=True)
class FilteringWordsResult:
    instances: Tuple[FilteringWord, ...]
    count: int
    density: float  # per 1000 words
    by_type: Dict[str, int]

    def top_types(self, limit: int = 3) -> List[Tuple[str, int]]:
        return sorted(self.by_type.items(), key=lambda kv: kv[1], reverse=True)[:limit]


class FilteringWordsDetector(BaseAnalyzer):
    """Counts each filter word at most once per sentence."""

    name = "filtering_words"

    def analyze(self, text: str, genre: Optional[str] = None) -> FilteringWordsResult:
        instances = []
        by_type: Dict[str, int] = {}
        for sentence in SENTENCE_TERMINATORS.split(text):
            if not sentence.strip():
                continue
            lower = sentence.lower()
            for word_type, words in FILTERING_WORDS.items():
                for word in words:
                    if _PATTERNS[word].search(lower):
                        instances.append(
                            FilteringWord(
                                word=word,
                                position=text.find(sentence),
                                sentence=sentence.strip(),
                                suggestion=SUGGESTIONS[word_type],
                            )
                        )
                        by_type[word_type] = by_type.get(word_type, 0) + 1

        return FilteringWordsResult(
            instances=tuple(instances),
            count=len(instances),
            density=per_thousand(len(instances), len(text.split())),
            by_type=by_type,
        )
