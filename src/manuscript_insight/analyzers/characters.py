"""Character arc analysis.

Characters are capitalized words (3+ letters) outside a common-word stoplist
that appear at least three times. Each mention is scored by the sentiment of
its surrounding context, and the early/middle/late averages give the arc.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..math import Statistics, clamp, round_half_up
from ._names import COMMON_CAPITALIZED
from .base import BaseAnalyzer

CONTEXT_RADIUS = 200
MIN_MENTIONS = 3

POSITIVE_WORDS = frozenset(
    """
    happy joy smile laugh love delight pleased wonderful excellent perfect
    beautiful amazing brilliant fantastic hope excited thrilled grateful proud
    confident warm gentle kind caring peaceful calm relieved content
    """.split()
)

NEGATIVE_WORDS = frozenset(
    """
    sad angry fear hate terrible awful horrible bad worse worst cruel harsh
    pain hurt wound blood death die kill scream cry tears grief despair
    anxious worried scared frightened terrified nervous bitter resentful
    jealous guilty ashamed disgusted
    """.split()
)

SENTIMENT_SCORES = {"positive": 75, "negative": 25, "neutral": 50}

_CAPITALIZED = re.compile(r"\b[A-Z][a-z]{2,}\b")
_QUOTE_CHARS = ('"', "'", "“", "”")


@dataclass(frozen=True)
class CharacterMention:
    name: str
    position: int
    context: str
    sentiment: str  # positive | negative | neutral
    in_dialogue: bool


@dataclass(frozen=True)
class EmotionalTrajectory:
    early: int
    middle: int
    late: int


@dataclass(frozen=True)
class CharacterProfile:
    name: str
    mentions: Tuple[CharacterMention, ...]
    total_mentions: int
    first_appearance: int
    last_appearance: int
    emotional_trajectory: EmotionalTrajectory
    dialogue_ratio: float
    role: str       # protagonist | major | supporting | minor
    arc_type: str   # dynamic | flat | unclear
    development_score: int


@dataclass(frozen=True)
class CharacterAnalysisResult:
    characters: Tuple[CharacterProfile, ...]
    protagonists: Tuple[str, ...]
    total_characters: int
    average_development: int
    recommendations: Tuple[str, ...]


def extract_character_names(text: str) -> Dict[str, int]:
    """Candidate names with their capitalized occurrence counts (>= 3)."""
    counts: Dict[str, int] = {}
    for match in _CAPITALIZED.findall(text):
        if match not in COMMON_CAPITALIZED:
            counts[match] = counts.get(match, 0) + 1
    return {name: n for name, n in counts.items() if n >= MIN_MENTIONS}


def calculate_sentiment(text: str) -> str:
    positive = negative = 0
    for word in text.lower().split():
        if word in POSITIVE_WORDS:
            positive += 1
        if word in NEGATIVE_WORDS:
            negative += 1
    if positive > negative:
        return "positive"
    if negative > positive:
        return "negative"
    return "neutral"


def _is_dialogue(context: str) -> bool:
    return any(q in context for q in _QUOTE_CHARS)


def extract_mentions(text: str, name: str) -> List[CharacterMention]:
    mentions = []
    for match in re.finditer(rf"\b{re.escape(name)}\b", text, re.IGNORECASE):
        position = match.start()
        start = max(0, position - CONTEXT_RADIUS)
        end = min(len(text), position + len(name) + CONTEXT_RADIUS)
        context = text[start:end]
        mentions.append(
            CharacterMention(
                name=name,
                position=position,
                context=context,
                sentiment=calculate_sentiment(context),
                in_dialogue=_is_dialogue(context),
            )
        )
    return mentions


def emotional_trajectory(mentions: List[CharacterMention]) -> EmotionalTrajectory:
    if not mentions:
        return EmotionalTrajectory(50, 50, 50)

    def average(part: List[CharacterMention]) -> int:
        if not part:
            return 50
        return round_half_up(Statistics.mean([SENTIMENT_SCORES[m.sentiment] for m in part]))

    early, middle, late = Statistics.thirds(mentions)
    return EmotionalTrajectory(average(early), average(middle), average(late))


def determine_arc_type(trajectory: EmotionalTrajectory) -> str:
    total_change = abs(trajectory.late - trajectory.early)
    progression = (
        trajectory.early < trajectory.middle < trajectory.late
        or trajectory.early > trajectory.middle > trajectory.late
    )
    if total_change >= 8 or (total_change >= 4 and progression):
        return "dynamic"
    if total_change == 0:
        return "flat"
    return "unclear"


def development_score(arc_type: str, trajectory: EmotionalTrajectory, mentions: int) -> int:
    score = 50
    if arc_type == "dynamic":
        score += min(30, abs(trajectory.late - trajectory.early))
    if mentions > 20:
        score += 10
    if mentions > 50:
        score += 10
    if arc_type == "unclear" and mentions > 30:
        score -= 10
    return int(clamp(score))


def determine_role(mentions: int, total_mentions: int) -> str:
    ratio = mentions / total_mentions
    if ratio > 0.15:
        return "protagonist"
    if ratio > 0.08:
        return "major"
    if ratio > 0.03:
        return "supporting"
    return "minor"


def _recommendations(
    characters: List[CharacterProfile], protagonists: List[str], average: int
) -> List[str]:
    recs = []
    if not protagonists:
        recs.append(
            "No clear protagonist detected. Consider giving your main character more presence."
        )
    flat = [c for c in characters if c.role == "protagonist" and c.arc_type == "flat"]
    if flat:
        recs.append(
            f"{flat[0].name} shows little emotional change. Consider adding character development."
        )
    minor = sum(1 for c in characters if c.role == "minor")
    if minor > len(characters) * 0.7:
        recs.append(
            "Many minor characters detected. Consider consolidating or giving some more depth."
        )
    if average < 50:
        recs.append(
            "Character development scores are low. Add more emotional depth and transformation."
        )
    return recs


class CharacterAnalyzer(BaseAnalyzer):
    name = "characters"

    def analyze(self, text: str, genre: Optional[str] = None) -> CharacterAnalysisResult:
        names = extract_character_names(text)
        if not names:
            return CharacterAnalysisResult(
                characters=(),
                protagonists=(),
                total_characters=0,
                average_development=0,
                recommendations=(
                    "No characters detected. Ensure character names are capitalized "
                    "and mentioned multiple times.",
                ),
            )

        total_mentions = sum(names.values())
        characters: List[CharacterProfile] = []
        for name, count in names.items():
            mentions = extract_mentions(text, name)
            trajectory = emotional_trajectory(mentions)
            arc_type = determine_arc_type(trajectory)
            in_dialogue = sum(1 for m in mentions if m.in_dialogue)
            characters.append(
                CharacterProfile(
                    name=name,
                    mentions=tuple(mentions),
                    total_mentions=count,
                    first_appearance=mentions[0].position if mentions else 0,
                    last_appearance=mentions[-1].position if mentions else 0,
                    emotional_trajectory=trajectory,
                    dialogue_ratio=in_dialogue / len(mentions) if mentions else 0.0,
                    role=determine_role(count, total_mentions),
                    arc_type=arc_type,
                    development_score=development_score(arc_type, trajectory, count),
                )
            )

        characters.sort(key=lambda c: c.total_mentions, reverse=True)
        protagonists = [c.name for c in characters if c.role == "protagonist"]
        average = round_half_up(Statistics.mean([c.development_score for c in characters]))

        return CharacterAnalysisResult(
            characters=tuple(characters),
            protagonists=tuple(protagonists),
            total_characters=len(characters),
            average_development=average,
            recommendations=tuple(_recommendations(characters, protagonists, average)),
        )
