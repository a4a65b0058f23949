"""Theme and symbol detection.

Themes are keyword clusters counted by case-insensitive substring search, so
"love" also counts inside "beloved".
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..math import round_half_up
from ._text import sentences_with_terminators
from .base import BaseAnalyzer

MAX_EXAMPLES = 3
MIN_SYMBOL_OCCURRENCES = 3

THEME_CLUSTERS: Dict[str, Tuple[str, ...]] = {
    "Love & Connection": (
        "love", "loved", "loving", "heart", "passion", "romance", "affection",
        "devotion", "desire", "longing", "connection", "bond", "relationship",
        "intimacy", "attachment", "warmth", "tenderness", "caring", "cherish",
    ),
    "Identity & Self": (
        "identity", "self", "who", "am", "become", "belong", "find", "discover",
        "myself", "yourself", "himself", "herself", "purpose", "meaning", "exist",
        "authentic", "true", "real", "mask", "pretend", "facade", "persona",
    ),
    "Power & Control": (
        "power", "control", "authority", "command", "rule", "dominate", "submit",
        "obey", "resist", "rebel", "force", "strength", "weak", "helpless",
        "manipulate", "influence", "dominance", "subordinate", "master", "servant",
    ),
    "Justice & Morality": (
        "justice", "injustice", "right", "wrong", "moral", "immoral", "ethical",
        "fair", "unfair", "deserve", "punish", "reward", "guilt", "innocent",
        "sin", "virtue", "evil", "good", "conscience", "principle", "honor",
    ),
    "Freedom & Captivity": (
        "freedom", "free", "liberty", "escape", "trap", "trapped", "prison",
        "cage", "bound", "chains", "release", "liberate", "captive", "confined",
        "restricted", "limit", "break free", "independence", "autonomy",
        "constrained",
    ),
    "Loss & Grief": (
        "loss", "lose", "lost", "grief", "mourn", "mourning", "death", "dead",
        "die", "dying", "gone", "absence", "missing", "empty", "void", "sorrow",
        "ache", "pain", "hurt", "regret", "farewell", "goodbye", "end",
    ),
    "Hope & Despair": (
        "hope", "hopeful", "hopeless", "despair", "desperate", "optimism",
        "pessimism", "dream", "nightmare", "wish", "fear", "dread", "dark",
        "light", "future", "fate", "destiny", "promise", "impossible", "possible",
    ),
    "Truth & Deception": (
        "truth", "true", "lie", "lied", "lies", "lying", "deceive", "deceit",
        "deception", "honest", "dishonest", "fake", "false", "real", "illusion",
        "secret", "hide", "hidden", "reveal", "conceal", "expose", "betrayal",
    ),
    "Survival & Struggle": (
        "survive", "survival", "struggle", "fight", "battle", "endure",
        "persevere", "overcome", "challenge", "threat", "danger", "risk", "peril",
        "adversity", "hardship", "suffer", "sacrifice", "conquer", "victory",
        "defeat",
    ),
    "Change & Transformation": (
        "change", "changed", "changing", "transform", "transformation", "evolve",
        "evolution", "growth", "develop", "different", "new", "old", "before",
        "after", "become", "was", "now", "then", "shift", "transition",
    ),
    "Isolation & Belonging": (
        "alone", "lonely", "solitude", "isolation", "isolated", "together",
        "belong", "belonging", "outsider", "stranger", "community", "family",
        "home", "exile", "outcast", "separate", "apart", "connect", "disconnect",
    ),
    "Memory & Forgetting": (
        "remember", "remembering", "memory", "memories", "forget", "forgotten",
        "forgetting", "recall", "reminisce", "past", "nostalgia", "history",
        "remind", "recollection", "flashback", "haunt", "linger", "erase",
    ),
}

SYMBOLIC_OBJECTS: Dict[str, Tuple[str, ...]] = {
    "Light/Dark": ("light", "lights", "darkness", "shadow", "shadows", "sun",
                   "moon", "stars", "dawn", "dusk", "twilight"),
    "Water": ("water", "ocean", "sea", "river", "rain", "storm", "wave", "waves",
              "flood", "drown", "drowning"),
    "Fire": ("fire", "flame", "flames", "burn", "burning", "ash", "ashes", "smoke",
             "ember", "blaze"),
    "Nature": ("tree", "trees", "flower", "flowers", "garden", "forest", "woods",
               "mountain", "valley", "leaf", "leaves"),
    "Birds": ("bird", "birds", "wing", "wings", "fly", "flying", "feather",
              "feathers", "nest", "flight"),
    "Barriers": ("wall", "walls", "door", "doors", "window", "windows", "gate",
                 "gates", "fence", "barrier", "threshold"),
    "Paths": ("road", "path", "journey", "crossroads", "bridge", "bridges", "way",
              "direction", "destination"),
    "Mirrors": ("mirror", "mirrors", "reflection", "reflections", "reflect",
                "glass", "image"),
    "Blood": ("blood", "bleeding", "bleed", "wound", "wounds", "scar", "scars", "cut"),
    "Time": ("clock", "clocks", "time", "hour", "hours", "minute", "minutes",
             "second", "seconds", "watch", "watches"),
}

SYMBOL_MEANINGS: Dict[str, str] = {
    "Light/Dark": "Often represents hope vs. despair, knowledge vs. ignorance, or good vs. evil",
    "Water": "May symbolize emotions, cleansing, life/death, or the unconscious",
    "Fire": "Could represent destruction, passion, transformation, or purification",
    "Nature": "Often symbolizes growth, life cycles, or connection to something larger",
    "Birds": "May represent freedom, transcendence, perspective, or the soul",
    "Barriers": "Could symbolize obstacles, boundaries, transitions, or protection vs. confinement",
    "Paths": "Often represents choices, life journey, or destiny",
    "Mirrors": "May symbolize self-reflection, truth, identity, or duality",
    "Blood": "Could represent life force, sacrifice, violence, or family bonds",
    "Time": "Often symbolizes mortality, pressure, or the inevitability of change",
}


@dataclass(frozen=True)
class ThematicConcept:
    theme: str
    frequency: int
    examples: Tuple[str, ...]
    intensity: int
    distribution: str  # concentrated | scattered | balanced


@dataclass(frozen=True)
class SymbolicPattern:
    symbol: str
    occurrences: int
    contexts: Tuple[str, ...]
    possible_meaning: str


@dataclass(frozen=True)
class ThemeAnalysisResult:
    primary_themes: Tuple[ThematicConcept, ...]
    secondary_themes: Tuple[ThematicConcept, ...]
    symbolic_patterns: Tuple[SymbolicPattern, ...]
    thematic_density: int
    dominant_theme: Optional[str]
    recommendations: Tuple[str, ...]


def find_keyword_positions(text: str, keywords: Sequence[str]) -> List[int]:
    lower = text.lower()
    positions = []
    for keyword in keywords:
        needle = keyword.lower()
        index = lower.find(needle)
        while index != -1:
            positions.append(index)
            index = lower.find(needle, index + len(needle))
    return sorted(positions)


def example_sentences(text: str, keywords: Sequence[str]) -> List[str]:
    examples = []
    lowered = [k.lower() for k in keywords]
    for sentence in sentences_with_terminators(text):
        low = sentence.lower()
        if any(k in low for k in lowered):
            examples.append(sentence.strip())
        if len(examples) >= MAX_EXAMPLES:
            break
    return examples


def distribution(positions: Sequence[int], text_length: int) -> str:
    if len(positions) < 3:
        return "scattered"
    third = text_length / 3
    early = sum(1 for p in positions if p < third)
    middle = sum(1 for p in positions if third <= p < third * 2)
    late = sum(1 for p in positions if p >= third * 2)
    spread = max(early, middle, late) - min(early, middle, late)
    if spread > len(positions) * 0.5:
        return "concentrated"
    if spread < len(positions) * 0.2:
        return "balanced"
    return "scattered"


def _intensity(word_count: int, frequency: int) -> int:
    words_per_occurrence = word_count / max(1, frequency)
    if words_per_occurrence > 500:
        return 40
    if words_per_occurrence > 300:
        return 60
    if words_per_occurrence > 150:
        return 80
    return 100


def _recommendations(
    primary: Sequence[ThematicConcept], symbols: Sequence[SymbolicPattern], density: int
) -> List[str]:
    recs = []
    if not primary:
        recs.append(
            "No clear themes detected. Consider adding deeper thematic layers "
            "to strengthen your narrative."
        )
    if len(primary) > 5:
        recs.append(
            "Many themes detected. Consider focusing on 2-3 core themes for stronger impact."
        )
    concentrated = [t for t in primary if t.distribution == "concentrated"]
    if concentrated:
        recs.append(
            f'Theme "{concentrated[0].theme}" is concentrated in one section. '
            "Consider distributing it more evenly."
        )
    if not symbols:
        recs.append(
            "No recurring symbolic patterns detected. Consider using recurring "
            "imagery to reinforce themes."
        )
    if density < 30:
        recs.append(
            "Low thematic density. Add more thematic depth to give readers "
            "something to contemplate."
        )
    if density > 80:
        recs.append(
            "Very high thematic density. Ensure themes enhance rather than overwhelm the story."
        )
    weak = [t for t in primary if t.intensity < 50]
    if weak:
        recs.append(
            f'Theme "{weak[0].theme}" is present but weak. Develop it further or remove it.'
        )
    return recs


class ThemeAnalyzer(BaseAnalyzer):
    name = "themes"

    def analyze(self, text: str, genre: Optional[str] = None) -> ThemeAnalysisResult:
        word_count = max(1, len(text.split()))

        concepts = []
        for theme, keywords in THEME_CLUSTERS.items():
            positions = find_keyword_positions(text, keywords)
            if positions:
                concepts.append(
                    ThematicConcept(
                        theme=theme,
                        frequency=len(positions),
                        examples=tuple(example_sentences(text, keywords)),
                        intensity=_intensity(word_count, len(positions)),
                        distribution=distribution(positions, len(text)),
                    )
                )
        concepts.sort(key=lambda t: t.frequency, reverse=True)

        symbols = []
        for symbol, keywords in SYMBOLIC_OBJECTS.items():
            occurrences = len(find_keyword_positions(text, keywords))
            if occurrences >= MIN_SYMBOL_OCCURRENCES:
                symbols.append(
                    SymbolicPattern(
                        symbol=symbol,
                        occurrences=occurrences,
                        contexts=tuple(example_sentences(text, keywords)),
                        possible_meaning=SYMBOL_MEANINGS[symbol],
                    )
                )
        symbols.sort(key=lambda s: s.occurrences, reverse=True)
        symbols = symbols[:5]

        primary = concepts[:5]
        total_mentions = sum(t.frequency for t in concepts)
        density = min(100, round_half_up(total_mentions / word_count * 100))

        return ThemeAnalysisResult(
            primary_themes=tuple(primary),
            secondary_themes=tuple(concepts[5:10]),
            symbolic_patterns=tuple(symbols),
            thematic_density=density,
            dominant_theme=primary[0].theme if primary else None,
            recommendations=tuple(_recommendations(primary, symbols, density)),
        )
