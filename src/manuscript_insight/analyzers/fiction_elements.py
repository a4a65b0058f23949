"""Twelve core fiction elements, each scored 0-100 from keyword heuristics.

Keyword matching is prefix-based (``\\bkeyword\\w*\\b``), so "fight" also
counts "fighting" and "fighter".
"""

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..math import Statistics, round_half_up
from .base import BaseAnalyzer

MAX_RECOMMENDATIONS = 5


@dataclass(frozen=True)
class FictionElementScore:
    element: str
    score: float
    presence: str  # strong | moderate | weak | absent
    details: Tuple[str, ...]
    insights: Tuple[str, ...]


@dataclass(frozen=True)
class FictionElementsResult:
    elements: Tuple[FictionElementScore, ...]
    overall_balance: int
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class _Text:
    """Views of the manuscript shared by every element scorer."""

    raw: str
    lower: str
    words: Tuple[str, ...]
    sentences: Tuple[str, ...]
    paragraphs: Tuple[str, ...]


def count_keywords(text: str, keywords: Sequence[str]) -> int:
    return sum(
        len(re.findall(rf"\b{re.escape(k)}\w*\b", text, re.IGNORECASE)) for k in keywords
    )


def presence_level(score: float) -> str:
    if score >= 70:
        return "strong"
    if score >= 40:
        return "moderate"
    if score >= 20:
        return "weak"
    return "absent"


def _element(name: str, score: float, details: List[str], insights: List[str]) -> FictionElementScore:
    return FictionElementScore(
        element=name,
        score=min(100, score),
        presence=presence_level(score),
        details=tuple(details),
        insights=tuple(insights),
    )


def _span_length(sentence: str) -> int:
    # Counts the empty edges of a leading/trailing space as tokens
    return len(re.split(r"\s+", sentence))


def _quote_pairs(text: str) -> float:
    return len(re.findall(r"[\"']", text)) / 2


def proper_names(text: str) -> List[str]:
    counts: Dict[str, int] = {}
    for word in text.split():
        if re.fullmatch(r"[A-Z][a-z]{2,}", word) and len(word) > 3:
            counts[word] = counts.get(word, 0) + 1
    return [name for name, n in counts.items() if n >= 2]


CHARACTER_WORDS = ("protagonist", "antagonist", "character", "hero", "villain", "friend",
                   "ally", "enemy", "she", "he", "they", "her", "his", "their", "him", "them")
CHARACTER_ARC_WORDS = ("changed", "realized", "learned", "grew", "became", "transformed",
                       "discovered")
CHARACTER_ACTIONS = ("walked", "ran", "grabbed", "looked", "turned", "spoke", "whispered",
                     "shouted", "smiled", "frowned")


def score_characters(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []
    dialogue = _quote_pairs(t.raw)

    score += min(30, count_keywords(t.lower, CHARACTER_WORDS) * 2)

    if count_keywords(t.lower, CHARACTER_ARC_WORDS) > 3:
        score += 20
        insights.append("Character development language detected")

    if dialogue > 10:
        score += 15
        details.append(f"~{int(dialogue)} dialogue exchanges")

    names = proper_names(t.raw)
    if len(names) > 2:
        score += 20
        details.append(f"{len(names)} recurring character names")
    elif names:
        score += 10
        details.append(f"{len(names)} character name(s)")

    score += min(15, count_keywords(t.lower, CHARACTER_ACTIONS))

    if score < 40:
        insights.append("Consider deepening character presence and actions")
    if dialogue < 5:
        insights.append("More dialogue could enhance character voice")
    return _element("Characters", score, details, insights)


LOCATION_WORDS = ("room", "house", "street", "city", "town", "village", "forest", "mountain",
                  "ocean", "building", "office", "home", "place", "space", "world", "land",
                  "kingdom", "planet")
SETTING_SENSORY_WORDS = ("smell", "scent", "odor", "aroma", "sound", "noise", "quiet", "loud",
                         "soft", "warm", "cold", "hot", "cool", "bright", "dark", "light",
                         "shadow", "rough", "smooth", "soft", "hard", "texture")
WEATHER_WORDS = ("rain", "sun", "cloud", "wind", "storm", "snow", "fog", "mist")
_PLACEMENT = re.compile(r"\b(?:stood|sat|located|nestled|perched|overlooked)\b")


def score_setting(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    locations = count_keywords(t.lower, LOCATION_WORDS)
    score += min(30, locations * 3)
    if locations > 5:
        details.append("Multiple location references")

    sensory = count_keywords(t.lower, SETTING_SENSORY_WORDS)
    score += min(40, sensory * 4)
    if sensory > 8:
        details.append("Rich sensory details")
        insights.append("Strong immersive setting")

    if count_keywords(t.lower, WEATHER_WORDS) > 2:
        score += 15
        details.append("Environmental atmosphere present")

    score += min(15, len(_PLACEMENT.findall(t.lower)) * 5)

    if score < 40:
        insights.append("Setting could be more vivid; add sensory details")
    if sensory < 3:
        insights.append("Consider incorporating more sensory descriptions")
    return _element("Setting", score, details, insights)


TIME_WORDS = ("morning", "afternoon", "evening", "night", "dawn", "dusk", "midnight", "noon",
              "yesterday", "today", "tomorrow", "now", "then", "later", "earlier", "before",
              "after", "minute", "hour", "day", "week", "month", "year", "century")
TIME_TRANSITIONS = ("meanwhile", "later", "earlier", "suddenly", "eventually", "finally", "soon")
_PAST_MARKERS = re.compile(r"\b(?:was|were|had|did|went|came|saw)\b")
_PRESENT_MARKERS = re.compile(r"\b(?:is|are|has|does|goes|comes|sees)\b")


def score_time(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    markers = count_keywords(t.lower, TIME_WORDS)
    score += min(35, markers * 3)
    if markers > 5:
        details.append("Clear temporal markers")

    transitions = count_keywords(t.lower, TIME_TRANSITIONS)
    score += min(25, transitions * 8)
    if transitions > 2:
        details.append("Time transitions present")
        insights.append("Good temporal flow")

    past = len(_PAST_MARKERS.findall(t.lower))
    present = len(_PRESENT_MARKERS.findall(t.lower))
    dominant = "past" if past > present else "present"
    tense_ratio = min(past, present) / max(past, present, 1)
    if tense_ratio > 0.3 and len(t.sentences) > 10:
        insights.append("Mixed tenses detected; verify this is intentional")
    else:
        score += 20
        details.append(f"Consistent {dominant} tense")

    if "years" in t.lower or "months" in t.lower:
        score += 10
        details.append("Long time span indicated")

    if score < 40:
        insights.append("Add more temporal context to ground readers")
    return _element("Time", score, details, insights)


INCITING_WORDS = ("suddenly", "unexpected", "discovered", "arrived", "appeared", "broke", "changed")
COMPLICATION_WORDS = ("but", "however", "although", "despite", "yet", "still", "nevertheless")
CLIMAX_WORDS = ("finally", "ultimate", "confronted", "faced", "battle", "showdown", "moment")
RESOLUTION_WORDS = ("resolved", "ended", "concluded", "finished", "peace", "finally", "at last")
PLOT_ACTIONS = ("grabbed", "ran", "jumped", "fought", "escaped", "chased", "attacked", "defended")


def score_plot(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    inciting = count_keywords(t.lower, INCITING_WORDS)
    if inciting > 0:
        score += 20
        details.append("Inciting events present")

    complications = count_keywords(t.lower, COMPLICATION_WORDS)
    score += min(30, complications * 3)
    if complications > 5:
        insights.append("Good use of complication and contrast")

    if count_keywords(t.lower, CLIMAX_WORDS) > 0:
        score += 25
        details.append("Climactic moments detected")

    if count_keywords(t.lower, RESOLUTION_WORDS) > 0:
        score += 15
        details.append("Resolution elements present")

    score += min(10, count_keywords(t.lower, PLOT_ACTIONS) * 2)

    if score < 40:
        insights.append("Plot structure could be more defined")
    if inciting == 0:
        insights.append("Consider a stronger inciting incident")
    return _element("Plot", score, details, insights)


EXTERNAL_CONFLICT_WORDS = ("fight", "struggle", "conflict", "battle", "argue", "disagree",
                           "oppose", "resist", "against", "versus", "enemy", "threat", "danger",
                           "problem", "obstacle", "challenge")
INTERNAL_CONFLICT_WORDS = ("torn", "conflicted", "confused", "uncertain", "doubt", "fear",
                           "anger", "frustration")
TENSION_WORDS = ("tension", "pressure", "stress", "strain", "anxiety")


def score_conflict(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    external = count_keywords(t.lower, EXTERNAL_CONFLICT_WORDS)
    score += min(40, external * 4)
    if external > 5:
        details.append("Strong external conflict")
        insights.append("Clear antagonistic forces")

    internal = count_keywords(t.lower, INTERNAL_CONFLICT_WORDS)
    score += min(30, internal * 5)
    if internal > 3:
        details.append("Internal conflict present")
        insights.append("Good psychological depth")

    if count_keywords(t.lower, TENSION_WORDS) > 2:
        score += 20
        details.append("Tension explicitly developed")

    if t.raw.count("?") + t.raw.count("!") > 5:
        score += 10
        details.append("Dramatic dialogue present")

    if score < 40:
        insights.append("Conflict could be more pronounced; what opposes the protagonist?")
    if internal == 0 and external == 0:
        insights.append("Consider adding both internal and external conflict")
    return _element("Conflict", score, details, insights)


THEME_WORDS = ("love", "death", "truth", "justice", "freedom", "power", "identity", "hope",
               "loss", "redemption", "sacrifice", "betrayal", "loyalty", "honor", "change")
SYMBOL_WORDS = ("symbol", "represent", "metaphor", "meaning", "significance")


def score_theme(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    score += min(50, count_keywords(t.lower, THEME_WORDS) * 4)

    present = [theme for theme in THEME_WORDS if theme in t.lower]
    if present:
        details.append(f"Themes: {', '.join(present[:3])}")
        if len(present) > 3:
            insights.append("Multiple thematic threads detected")

    if count_keywords(t.lower, SYMBOL_WORDS) > 0:
        score += 25
        details.append("Symbolic language present")

    frequency: Dict[str, int] = {}
    for word in t.words:
        if len(word) > 5:
            frequency[word] = frequency.get(word, 0) + 1
    if sum(1 for n in frequency.values() if n > 3) > 2:
        score += 25
        insights.append("Recurring concepts suggest thematic depth")

    if score < 40:
        insights.append("Theme could be more developed through recurring symbols or ideas")
    return _element("Theme", score, details, insights)


_FIRST_PERSON = re.compile(r"\b(?:I|me|my|we|us|our)\b", re.IGNORECASE)
_THIRD_PERSON = re.compile(r"\b(?:he|she|they|him|her|them)\b", re.IGNORECASE)
IMAGERY_WORDS = ("like", "as if", "seemed", "appeared", "resembled")


def score_voice(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    lengths = [_span_length(s) for s in t.sentences]
    average = Statistics.mean(lengths)
    spread = Statistics.population_std(lengths)

    if spread > 8:
        score += 25
        details.append("Varied sentence rhythm")
        insights.append("Good sentence-level pacing")
    elif spread < 4:
        insights.append("Sentence length is very consistent; consider varying rhythm")
        score += 10
    else:
        score += 20

    first = len(_FIRST_PERSON.findall(t.raw))
    third = len(_THIRD_PERSON.findall(t.raw))
    if first > third:
        details.append("First person narration")
        score += 20
    elif third > first:
        details.append("Third person narration")
        score += 20

    if average > 20:
        score += 15
        details.append("Lyrical, complex style")
    elif average < 12:
        score += 15
        details.append("Concise, minimalist style")
    else:
        score += 20
        details.append("Balanced prose style")

    if count_keywords(t.lower, IMAGERY_WORDS) > 3:
        score += 20
        details.append("Rich in simile and metaphor")

    return _element("Voice", score, details, insights)


GENRE_MARKERS: Dict[str, Tuple[str, ...]] = {
    "Fantasy": ("magic", "spell", "dragon", "wizard", "sword", "kingdom", "quest"),
    "SciFi": ("space", "ship", "alien", "technology", "future", "robot", "planet"),
    "Romance": ("love", "heart", "kiss", "passion", "romance", "together"),
    "Thriller": ("danger", "threat", "chase", "escape", "suspect", "murder"),
    "Horror": ("fear", "terror", "scream", "blood", "dark", "monster", "nightmare"),
    "Mystery": ("clue", "detective", "investigate", "suspect", "mystery", "solve"),
}


def score_genre(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    counts = {genre: count_keywords(t.lower, words) for genre, words in GENRE_MARKERS.items()}
    dominant = "General Fiction"
    top = 0
    for genre, count in counts.items():
        if count > top:
            top = count
            dominant = genre

    if top > 5:
        score += 60
        details.append(f"Strong {dominant} elements")
        insights.append(f"Clear genre markers for {dominant}")
    elif top > 2:
        score += 40
        details.append(f"{dominant} indicators present")
    else:
        score += 20
        details.append("Genre-neutral or literary fiction")
        insights.append("No dominant genre markers; intentional?")

    blended = [genre for genre, count in counts.items() if count > 2]
    if len(blended) > 1:
        score += 20
        insights.append(f"Genre blending detected: {', '.join(blended)}")

    return _element("Genre & Subgenre", score, details, insights)


def score_structure(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []
    paragraphs = len(t.paragraphs)
    sentences = len(t.sentences)

    if paragraphs > 5:
        score += 25
        details.append(f"{paragraphs} paragraphs")
    else:
        score += 15
        details.append(f"{paragraphs} paragraph(s)")
        if paragraphs < 3:
            insights.append("Consider breaking into more paragraphs for readability")

    scene_breaks = len(re.split(r"\n\n\n+", t.raw)) - 1
    if scene_breaks > 0:
        score += 15
        details.append(f"{scene_breaks} scene break(s)")

    if sentences > 15:
        score += 30
        insights.append("Sufficient length for three-act structure")
    else:
        score += 20

    per_paragraph = sentences / paragraphs if paragraphs else 0.0
    if 3 < per_paragraph < 8:
        score += 20
        details.append("Balanced paragraph density")
    elif per_paragraph > 8:
        score += 10
        insights.append("Long paragraphs; consider varying length for rhythm")
    else:
        score += 15
        details.append("Short, punchy paragraphs")

    if "Chapter" in t.raw or "CHAPTER" in t.raw:
        score += 10
        details.append("Chapter divisions present")

    return _element("Structure", score, details, insights)


PACING_ACTIONS = ("ran", "jumped", "grabbed", "rushed", "burst", "exploded", "attacked")
PACING_DESCRIPTIVE = ("was", "were", "seemed", "appeared", "looked", "felt")


def score_pacing(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    lengths = [_span_length(s) for s in t.sentences]
    short = sum(1 for n in lengths if n < 10)
    long = sum(1 for n in lengths if n > 25)
    if short > len(lengths) * 0.4:
        score += 30
        details.append("Fast pacing (short sentences)")
        insights.append("Brisk narrative momentum")
    elif long > len(lengths) * 0.3:
        score += 25
        details.append("Slow, immersive pacing")
        insights.append("Contemplative, detailed style")
    else:
        score += 35
        details.append("Varied pacing")
        insights.append("Good balance of speed and detail")

    action = count_keywords(t.lower, PACING_ACTIONS)
    descriptive = count_keywords(t.lower, PACING_DESCRIPTIVE)
    if action > descriptive:
        score += 25
        details.append("Action-driven pacing")
    elif descriptive > action * 2:
        score += 20
        details.append("Description-heavy pacing")
        insights.append("Consider adding more active scenes")
    else:
        score += 30
        details.append("Balanced action and description")

    if _quote_pairs(t.raw) > 10:
        score += 10
        insights.append("Dialogue adds dynamic pacing")

    return _element("Pacing", score, details, insights)


WORLD_WORDS = ("kingdom", "empire", "city", "world", "realm", "land", "nation", "planet",
               "culture", "society", "people", "custom", "tradition", "law", "rule", "magic",
               "technology", "system", "power", "energy", "force")
HISTORY_WORDS = ("ancient", "history", "legend", "myth", "past", "once", "ago", "before")
CULTURE_WORDS = ("ritual", "ceremony", "belief", "religion", "god", "worship", "sacred")


def score_worldbuilding(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    world = count_keywords(t.lower, WORLD_WORDS)
    score += min(40, world * 3)
    if world > 8:
        details.append("Rich world description")
        insights.append("Detailed worldbuilding present")

    if count_keywords(t.lower, HISTORY_WORDS) > 3:
        score += 25
        details.append("Historical depth")

    if count_keywords(t.lower, CULTURE_WORDS) > 2:
        score += 20
        details.append("Cultural elements")

    if score < 30:
        insights.append(
            "Worldbuilding is minimal; appropriate for realistic or character-driven fiction"
        )
    if world == 0:
        details.append("Contemporary or minimal setting")
    return _element("Worldbuilding", score, details, insights)


EMOTION_WORDS = ("love", "hate", "fear", "joy", "sadness", "anger", "hope", "despair", "happy",
                 "sad", "afraid", "angry", "worried", "excited", "nervous", "relieved", "grief",
                 "pain", "suffering", "comfort", "warmth", "tenderness")
EMPATHY_WORDS = ("felt", "understood", "realized", "knew", "sensed", "recognized")
VULNERABILITY_WORDS = ("vulnerable", "weak", "exposed", "raw", "broken", "hurt", "wounded")
CONNECTION_WORDS = ("together", "alone", "connected", "apart", "bond", "relationship")
THOUGHT_WORDS = ("thought", "wondered", "considered", "realized", "remembered")


def score_emotional_core(t: _Text) -> FictionElementScore:
    score = 0
    details: List[str] = []
    insights: List[str] = []

    emotions = count_keywords(t.lower, EMOTION_WORDS)
    score += min(40, emotions * 3)
    if emotions > 8:
        details.append("Strong emotional content")
        insights.append("Rich emotional landscape")
    elif emotions < 3:
        insights.append("Limited emotional language; consider deepening character feelings")

    if count_keywords(t.lower, EMPATHY_WORDS) > 3:
        score += 25
        details.append("Emotional awareness present")

    if count_keywords(t.lower, VULNERABILITY_WORDS) > 0:
        score += 20
        details.append("Emotional vulnerability shown")
        insights.append("Characters reveal authentic humanity")

    if count_keywords(t.lower, CONNECTION_WORDS) > 2:
        score += 15
        details.append("Relationship focus")

    if count_keywords(t.lower, THOUGHT_WORDS) > 3:
        score += 10
        insights.append("Internal reflection adds depth")

    if score < 40:
        insights.append("Emotional core could be strengthened; what do characters truly feel?")
    return _element("Emotional Core", score, details, insights)


ELEMENT_SCORERS: Tuple[Callable[[_Text], FictionElementScore], ...] = (
    score_characters,
    score_setting,
    score_time,
    score_plot,
    score_conflict,
    score_theme,
    score_voice,
    score_genre,
    score_structure,
    score_pacing,
    score_worldbuilding,
    score_emotional_core,
)


def calculate_balance(elements: Sequence[FictionElementScore]) -> int:
    """100 minus twice the population standard deviation of element scores."""
    spread = Statistics.population_std([e.score for e in elements])
    return round_half_up(max(0.0, 100 - spread * 2))


def _recommendations(
    elements: Sequence[FictionElementScore],
    strengths: Sequence[str],
    weaknesses: Sequence[str],
    balance: int,
) -> List[str]:
    recs = []
    if strengths:
        recs.append(f"Strong elements: {', '.join(strengths)}. Build on these strengths.")
    if weaknesses:
        recs.append(f"Focus areas: {', '.join(weaknesses)}. These elements need development.")
    for element in elements:
        if element.score < 40 and element.insights:
            recs.append(element.insights[0])
    if balance < 60:
        recs.append("Consider balancing narrative elements more evenly across all categories.")
    return recs[:MAX_RECOMMENDATIONS]


class FictionElementsAnalyzer(BaseAnalyzer):
    name = "fiction_elements"

    def analyze(self, text: str, genre: Optional[str] = None) -> FictionElementsResult:
        lower = text.lower()
        views = _Text(
            raw=text,
            lower=lower,
            words=tuple(lower.split()),
            sentences=tuple(s for s in re.split(r"[.!?]+", text) if s.strip()),
            paragraphs=tuple(p for p in re.split(r"\n\n+", text) if p.strip()),
        )
        elements = [scorer(views) for scorer in ELEMENT_SCORERS]

        balance = calculate_balance(elements)
        strengths = [e.element for e in elements if e.score >= 70][:3]
        weaknesses = [e.element for e in elements if e.score < 40][:3]

        return FictionElementsResult(
            elements=tuple(elements),
            overall_balance=balance,
            strengths=tuple(strengths),
            weaknesses=tuple(weaknesses),
            recommendations=tuple(_recommendations(elements, strengths, weaknesses, balance)),
        )
