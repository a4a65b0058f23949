"""Prose quality metrics: vocabulary, dialogue attribution, passive voice,
adverbs, sentence variety and Flesch-Kincaid readability."""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ._text import per_thousand, split_sentences
from .base import BaseAnalyzer

TOP_WORDS = 50
ADVERB_CONTEXT = 30

_SAID_VERBS = (
    "said|asked|replied|answered|whispered|shouted|muttered|exclaimed|yelled|cried|"
    "screamed|murmured|stammered|declared|announced|insisted|protested|demanded|pleaded|"
    "begged|suggested|offered|continued|added|interrupted|explained|remarked|observed|"
    "noted|mentioned|admitted|confessed|agreed|disagreed|argued|confirmed|denied|claimed|"
    "stated|responded"
)

DIALOGUE_PATTERN = re.compile(
    rf'"([^"]+)"\s*,?\s*([^.!?]*(?:{_SAID_VERBS})[^.!?]*[.!?])?', re.IGNORECASE
)
_SPEAKER_PATTERN = re.compile(
    rf"\b([A-Z][a-z]+(?:\s+[A-Z][a-z]+)?)\s+({_SAID_VERBS})", re.IGNORECASE
)
_TAG_VERB = re.compile(rf"\b({_SAID_VERBS})\b", re.IGNORECASE)

_BE = "was|were|is|are|am|be|been|being"
PASSIVE_PATTERNS = (
    re.compile(
        rf"\b(?:{_BE})\s+(?:\w+ed|given|taken|made|seen|found|told|shown|written|spoken|"
        r"broken|chosen|driven|eaten|fallen|forgotten|gotten|hidden|known|ridden|risen|"
        r"shaken|stolen|torn|worn)\b",
        re.IGNORECASE,
    ),
    re.compile(
        rf"\b(?:{_BE})\s+(?:hit|put|cut|set|let|shut|split|spread|cast|cost|hurt|shed|quit|rid)\b",
        re.IGNORECASE,
    ),
)

WEAK_ADVERBS = frozenset(
    """
    very really quite rather somewhat just actually literally basically
    essentially practically virtually
    """.split()
)

_ADVERB = re.compile(r"\b(\w+ly)\b", re.IGNORECASE)
_NON_WORD_CHARS = re.compile(r"[^a-z\s'-]")
_VOWEL_GROUPS = re.compile(r"[aeiouy]+")


@dataclass(frozen=True)
class WordFrequency:
    word: str
    count: int
    positions: Tuple[int, ...]


@dataclass(frozen=True)
class WordFrequencyStats:
    total: int
    unique: int
    top_words: Tuple[WordFrequency, ...]
    overused_words: Tuple[WordFrequency, ...]

    @property
    def richness(self) -> float:
        """Unique share of all words (0.0 for empty text)."""
        return self.unique / self.total if self.total else 0.0


@dataclass(frozen=True)
class DialogueTag:
    speaker: Optional[str]
    dialogue: str
    position: int
    tag: str
    has_tag: bool


@dataclass(frozen=True)
class DialogueStats:
    total_dialogue_lines: int
    tagged_lines: int
    untagged_lines: int
    speakers: Dict[str, int]
    tags: Tuple[DialogueTag, ...]


@dataclass(frozen=True)
class PassiveVoiceInstance:
    sentence: str
    position: int
    verb: str
    suggestion: str


@dataclass(frozen=True)
class PassiveVoiceStats:
    instances: Tuple[PassiveVoiceInstance, ...]
    count: int
    percentage: float  # instances per 100 sentences


@dataclass(frozen=True)
class AdverbInstance:
    adverb: str
    position: int
    context: str
    severity: str  # weak | moderate | strong


@dataclass(frozen=True)
class AdverbStats:
    instances: Tuple[AdverbInstance, ...]
    count: int
    density: float  # per 1000 words
    weak_adverbs: int


@dataclass(frozen=True)
class SentenceStats:
    length: int
    words: int
    position: int


@dataclass(frozen=True)
class SentenceVariety:
    sentences: Tuple[SentenceStats, ...]
    average_length: float
    short_sentences: int
    medium_sentences: int
    long_sentences: int
    variety_score: float


@dataclass(frozen=True)
class Readability:
    flesch_kincaid: float
    flesch_reading: float
    average_sentence_length: float
    average_syllables_per_word: float
    interpretation: str


@dataclass(frozen=True)
class ProseQualityResult:
    word_frequency: WordFrequencyStats
    dialogue: DialogueStats
    passive_voice: PassiveVoiceStats
    adverbs: AdverbStats
    sentence_variety: SentenceVariety
    readability: Readability


def analyze_word_frequency(text: str) -> WordFrequencyStats:
    lower = text.lower()
    words = _NON_WORD_CHARS.sub(" ", lower).split()

    counts: Dict[str, int] = {}
    positions: Dict[str, List[int]] = {}
    cursor = 0
    for word in words:
        pos = lower.find(word, cursor)
        if pos != -1:
            cursor = pos + len(word)
        counts[word] = counts.get(word, 0) + 1
        slot = positions.setdefault(word, [])
        if pos != -1:
            slot.append(pos)

    ranked = sorted(
        (WordFrequency(w, n, tuple(positions[w])) for w, n in counts.items()),
        key=lambda wf: wf.count,
        reverse=True,
    )
    threshold = len(words) * 0.005
    overused = [wf for wf in ranked if wf.count > threshold and wf.count > 10 and len(wf.word) > 3]

    return WordFrequencyStats(
        total=len(words),
        unique=len(counts),
        top_words=tuple(ranked[:TOP_WORDS]),
        overused_words=tuple(overused),
    )


def analyze_dialogue(text: str) -> DialogueStats:
    tags: List[DialogueTag] = []
    speakers: Dict[str, int] = {}

    for match in DIALOGUE_PATTERN.finditer(text):
        tag_text = match.group(2) or ""
        speaker = None
        verb = ""
        if tag_text:
            named = _SPEAKER_PATTERN.search(tag_text)
            if named:
                speaker = named.group(1)
                verb = named.group(2).lower()
                speakers[speaker] = speakers.get(speaker, 0) + 1
            else:
                bare = _TAG_VERB.search(tag_text)
                if bare:
                    verb = bare.group(1).lower()
        tags.append(
            DialogueTag(
                speaker=speaker,
                dialogue=match.group(1),
                position=match.start(),
                tag=verb,
                has_tag=bool(tag_text),
            )
        )

    tagged = sum(1 for t in tags if t.has_tag)
    return DialogueStats(
        total_dialogue_lines=len(tags),
        tagged_lines=tagged,
        untagged_lines=len(tags) - tagged,
        speakers=speakers,
        tags=tuple(tags),
    )


def analyze_passive_voice(text: str) -> PassiveVoiceStats:
    sentences = split_sentences(text)
    instances: List[PassiveVoiceInstance] = []
    cursor = 0
    for sentence in sentences:
        for pattern in PASSIVE_PATTERNS:
            for match in pattern.finditer(sentence):
                verb = match.group(0)
                instances.append(
                    PassiveVoiceInstance(
                        sentence=sentence,
                        position=text.find(sentence, cursor),
                        verb=verb,
                        suggestion=(
                            f'Consider active voice: Instead of "{verb}", '
                            "try a more direct construction"
                        ),
                    )
                )
        cursor += len(sentence)

    percentage = len(instances) / len(sentences) * 100 if sentences else 0.0
    return PassiveVoiceStats(instances=tuple(instances), count=len(instances), percentage=percentage)


def analyze_adverbs(text: str) -> AdverbStats:
    instances = []
    for match in _ADVERB.finditer(text):
        adverb = match.group(1).lower()
        position = match.start()
        start = max(0, position - ADVERB_CONTEXT)
        end = min(len(text), position + len(adverb) + ADVERB_CONTEXT)
        if adverb in WEAK_ADVERBS:
            severity = "weak"
        elif len(adverb) > 10:
            severity = "moderate"
        else:
            severity = "strong"
        instances.append(AdverbInstance(adverb, position, text[start:end], severity))

    return AdverbStats(
        instances=tuple(instances),
        count=len(instances),
        density=per_thousand(len(instances), len(text.split())),
        weak_adverbs=sum(1 for i in instances if i.severity == "weak"),
    )


def analyze_sentence_variety(text: str) -> SentenceVariety:
    stats = []
    cursor = 0
    for sentence in split_sentences(text):
        stats.append(SentenceStats(len(sentence), len(sentence.split()), text.find(sentence, cursor)))
        cursor += len(sentence)

    total = len(stats)
    short = sum(1 for s in stats if s.words < 10)
    medium = sum(1 for s in stats if 10 <= s.words <= 20)
    long = sum(1 for s in stats if s.words > 20)
    average = sum(s.words for s in stats) / total if total else 0.0

    # Target mix: 30% short, 50% medium, 20% long
    short_ratio = short / total if total else 0.0
    medium_ratio = medium / total if total else 0.0
    long_ratio = long / total if total else 0.0
    variety = (
        (100 - abs(short_ratio - 0.3) * 200)
        + (100 - abs(medium_ratio - 0.5) * 200)
        + (100 - abs(long_ratio - 0.2) * 200)
    ) / 3

    return SentenceVariety(
        sentences=tuple(stats),
        average_length=average,
        short_sentences=short,
        medium_sentences=medium,
        long_sentences=long,
        variety_score=max(0.0, variety),
    )


def count_syllables(word: str) -> int:
    """Approximate syllables: vowel groups after dropping a silent final e."""
    word = re.sub(r"[^a-z]", "", word.lower())
    if len(word) <= 3:
        return 1
    if word.endswith("e"):
        word = word[:-1]
    return max(1, len(_VOWEL_GROUPS.findall(word)))


def interpret_grade(grade: float) -> str:
    if grade < 6:
        return "Elementary school level - Very easy to read"
    if grade < 9:
        return "Middle school level - Easy to read"
    if grade < 13:
        return "High school level - Standard reading level"
    if grade < 16:
        return "College level - Moderately difficult"
    return "Graduate level - Difficult to read"


def calculate_readability(text: str) -> Readability:
    words = text.split()
    sentences = len(split_sentences(text)) or 1
    total_words = len(words) or 1
    syllables = sum(count_syllables(w) for w in words) or 1

    avg_sentence = total_words / sentences
    avg_syllables = syllables / total_words
    grade = 0.39 * avg_sentence + 11.8 * avg_syllables - 15.59
    ease = 206.835 - 1.015 * avg_sentence - 84.6 * avg_syllables

    return Readability(
        flesch_kincaid=max(0.0, grade),
        flesch_reading=max(0.0, min(100.0, ease)),
        average_sentence_length=avg_sentence,
        average_syllables_per_word=avg_syllables,
        interpretation=interpret_grade(grade),
    )


class ProseQualityAnalyzer(BaseAnalyzer):
    name = "prose_quality"

    def analyze(self, text: str, genre: Optional[str] = None) -> ProseQualityResult:
        return ProseQualityResult(
            word_frequency=analyze_word_frequency(text),
            dialogue=analyze_dialogue(text),
            passive_voice=analyze_passive_voice(text),
            adverbs=analyze_adverbs(text),
            sentence_variety=analyze_sentence_variety(text),
            readability=calculate_readability(text),
        )
