"""Balance of sight, sound, touch, smell and taste vocabulary."""

import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..math import percent, round_half_up
from .base import BaseAnalyzer

CONTEXT_RADIUS = 30

SENSORY_WORDS: Dict[str, Tuple[str, ...]] = {
    "sight": ("saw", "looked", "watched", "glanced", "stared", "glimpsed", "observed",
              "noticed", "visible", "bright", "dark", "color", "shadow", "light", "glow",
              "shimmer", "sparkle", "gleam", "glitter", "shine"),
    "sound": ("heard", "listened", "sound", "noise", "whisper", "shout", "scream", "cry",
              "voice", "echo", "bang", "crash", "thud", "click", "hum", "buzz", "ring",
              "roar", "silence", "quiet"),
    "touch": ("touched", "felt", "grabbed", "held", "rough", "smooth", "soft", "hard",
              "cold", "hot", "warm", "cool", "texture", "pressure", "grip", "squeeze",
              "brush", "stroke", "tap", "pat"),
    "smell": ("smelled", "scent", "odor", "aroma", "fragrance", "perfume", "stench",
              "stink", "whiff", "sniff", "musty", "fresh", "sweet", "pungent", "acrid",
              "smoky"),
    "taste": ("tasted", "flavor", "sweet", "bitter", "sour", "salty", "savory", "spicy",
              "bland", "delicious", "tongue", "mouth", "palate", "ate", "drank"),
}


@dataclass(frozen=True)
class SensoryInstance:
    sense: str
    word: str
    position: int
    context: str


@dataclass(frozen=True)
class SensoryBalanceResult:
    instances: Tuple[SensoryInstance, ...]
    sight_count: int
    sound_count: int
    touch_count: int
    smell_count: int
    taste_count: int
    total: int
    sight_percentage: float
    sound_percentage: float
    touch_percentage: float
    smell_percentage: float
    taste_percentage: float
    balance: str  # excellent | good | visual-heavy | needs-variety
    recommendations: Tuple[str, ...]


class SensoryBalanceAnalyzer(BaseAnalyzer):
    """Words listed under two senses (such as sweet) count for each."""

    name = "sensory"

    def analyze(self, text: str, genre: Optional[str] = None) -> SensoryBalanceResult:
        lower = text.lower()
        instances = []
        for sense, words in SENSORY_WORDS.items():
            for word in words:
                for match in re.finditer(rf"\b{word}\b", lower):
                    start = max(0, match.start() - CONTEXT_RADIUS)
                    end = match.start() + len(word) + CONTEXT_RADIUS
                    instances.append(SensoryInstance(sense, word, match.start(), text[start:end]))

        counts = {sense: sum(1 for i in instances if i.sense == sense) for sense in SENSORY_WORDS}
        total = len(instances)
        pct = {sense: percent(n, total) for sense, n in counts.items()}

        if pct["sight"] > 70:
            balance = "visual-heavy"
        elif pct["sound"] < 5 or pct["touch"] < 5 or counts["smell"] + counts["taste"] < 5:
            balance = "needs-variety"
        elif pct["sight"] > 60:
            balance = "good"
        else:
            balance = "excellent"

        recs = []
        if pct["sight"] > 65:
            recs.append(
                f"{round_half_up(pct['sight'])}% visual focus - "
                "add more sound, touch, smell, and taste"
            )
        if pct["sound"] < 10:
            recs.append("Underutilized sound - add ambient noise, dialogue tone, music, etc.")
        if pct["touch"] < 10:
            recs.append("Low tactile descriptions - add texture, temperature, physical sensation")
        if counts["smell"] < 3:
            recs.append("Missing smell descriptions - powerful for memory and atmosphere")
        if counts["taste"] < 2:
            recs.append("Minimal taste references - consider food scenes or environmental tastes")

        return SensoryBalanceResult(
            instances=tuple(instances),
            sight_count=counts["sight"],
            sound_count=counts["sound"],
            touch_count=counts["touch"],
            smell_count=counts["smell"],
            taste_count=counts["taste"],
            total=total,
            sight_percentage=pct["sight"],
            sound_percentage=pct["sound"],
            touch_percentage=pct["touch"],
            smell_percentage=pct["smell"],
            taste_percentage=pct["taste"],
            balance=balance,
            recommendations=tuple(recs),
        )
