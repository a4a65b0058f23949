"""Dialogue, description and action shares against genre targets."""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..math import percent, round_half_up
from .base import BaseAnalyzer

# Each action verb stands in for roughly this many words of action prose.
WORDS_PER_ACTION_VERB = 10
DIFF_THRESHOLD = 15

_QUOTED = re.compile(r'"([^"]+)"')

ACTION_VERBS = (
    "ran", "jumped", "grabbed", "threw", "kicked", "punched", "dodged", "lunged",
    "rushed", "dashed", "sprinted", "fought", "attacked", "defended", "chased", "fled",
)
_ACTION_PATTERNS = tuple(re.compile(rf"\b{verb}\b") for verb in ACTION_VERBS)


@dataclass(frozen=True)
class GenreTarget:
    genre: str
    ideal_dialogue: int
    ideal_description: int
    ideal_action: int


# genre -> (dialogue, description, action) percentages
GENRE_TARGETS: Dict[str, Tuple[int, int, int]] = {
    "thriller": (30, 20, 50),
    "romance": (45, 35, 20),
    "mystery": (35, 30, 35),
    "fantasy": (30, 45, 25),
    "scifi": (30, 40, 30),
    "horror": (25, 35, 40),
    "literary": (35, 50, 15),
    "historical": (35, 45, 20),
    "general": (35, 35, 30),
}


@dataclass(frozen=True)
class DialogueNarrativeRatio:
    total_words: int
    dialogue_words: int
    description_words: int
    action_words: int
    dialogue_percentage: float
    description_percentage: float
    action_percentage: float
    genre_target: GenreTarget
    balance: str  # excellent | good | needs-adjustment
    recommendations: Tuple[str, ...]


def genre_target(genre: str) -> GenreTarget:
    dialogue, description, action = GENRE_TARGETS.get(genre.lower(), GENRE_TARGETS["general"])
    return GenreTarget(genre, dialogue, description, action)


class DialogueRatioAnalyzer(BaseAnalyzer):
    name = "dialogue_ratio"

    def analyze(self, text: str, genre: Optional[str] = None) -> DialogueNarrativeRatio:
        target = genre_target(genre or "general")
        total = len(text.split())
        dialogue = sum(len(m.group(1).split()) for m in _QUOTED.finditer(text))
        lower = text.lower()
        action = sum(len(p.findall(lower)) for p in _ACTION_PATTERNS) * WORDS_PER_ACTION_VERB
        description = max(0, total - dialogue - action)

        dialogue_pct = percent(dialogue, total)
        description_pct = percent(description, total)
        action_pct = percent(action, total)

        dialogue_diff = abs(dialogue_pct - target.ideal_dialogue)
        description_diff = abs(description_pct - target.ideal_description)
        action_diff = abs(action_pct - target.ideal_action)
        total_diff = dialogue_diff + description_diff + action_diff
        if total_diff > 40:
            balance = "needs-adjustment"
        elif total_diff > 20:
            balance = "good"
        else:
            balance = "excellent"

        recs = []
        if dialogue_diff > DIFF_THRESHOLD:
            if dialogue_pct < target.ideal_dialogue:
                gap = round_half_up(target.ideal_dialogue - dialogue_pct)
                recs.append(f"Increase dialogue - add {gap}% more conversations")
            else:
                gap = round_half_up(dialogue_pct - target.ideal_dialogue)
                recs.append(f"Reduce dialogue - cut {gap}% for better balance")
        if description_diff > DIFF_THRESHOLD:
            recs.append(
                "Add more description - enrich settings and sensory details"
                if description_pct < target.ideal_description
                else "Trim description - keep it concise and impactful"
            )
        if action_diff > DIFF_THRESHOLD:
            recs.append(
                "Increase action - add more movement and tension"
                if action_pct < target.ideal_action
                else "Reduce action pacing - allow for breathing room"
            )

        return DialogueNarrativeRatio(
            total_words=total,
            dialogue_words=dialogue,
            description_words=description,
            action_words=action,
            dialogue_percentage=dialogue_pct,
            description_percentage=description_pct,
            action_percentage=action_pct,
            genre_target=target,
            balance=balance,
            recommendations=tuple(recs),
        )
