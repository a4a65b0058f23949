"""Principle definitions registry: the single source of truth for scored principles.

Every principle the engine reports is either one of the closed set of
``PrincipleKind`` members or a ``FictionElementPrinciple`` generated per
element reported by the fiction-elements analyzer.

Weights are fixed here and are not configurable at call time: changing one
changes every overall score.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union


class PrincipleKind(str, Enum):
    PACING = "pacing"
    DUAL_CODING = "dualCoding"
    CHARACTER_DEVELOPMENT = "characterDevelopment"
    THEME_DEPTH = "themeDepth"
    GENRE_TROPES = "genreTropes"
    WORD_CHOICE = "wordChoice"
    DIALOGUE_QUALITY = "dialogueQuality"
    VOICE_STRENGTH = "voiceStrength"
    ADVERB_USAGE = "adverbUsage"
    SENTENCE_VARIETY = "sentenceVariety"
    READABILITY = "readability"
    EMOTIONAL_PACING = "emotionalPacing"
    POV_CONSISTENCY = "povConsistency"
    CLICHE_AVOIDANCE = "clicheAvoidance"
    DIRECT_PROSE = "directProse"
    BACKSTORY_BALANCE = "backstoryBalance"
    FICTION_BALANCE = "fictionBalance"
    DIALOGUE_NARRATIVE_BALANCE = "dialogueNarrativeBalance"
    SCENE_SEQUEL_STRUCTURE = "sceneSequelStructure"
    CONFLICT_PRESENCE = "conflictPresence"
    SENSORY_RICHNESS = "sensoryRichness"

    @property
    def id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return PRINCIPLE_REGISTRY[self].display_name

    @property
    def weight(self) -> float:
        return PRINCIPLE_REGISTRY[self].weight

    @property
    def description(self) -> str:
        return PRINCIPLE_REGISTRY[self].description


FICTION_ELEMENT_WEIGHT = 0.8


@dataclass(frozen=True)
class FictionElementPrinciple:
    """Dynamic principle: one per element reported by the fiction-elements analyzer.

    ``index`` is the element's position after sorting by score (descending),
    so ids read ``fictionElement0``, ``fictionElement1``, ...
    """

    index: int
    element_name: str

    @property
    def id(self) -> str:
        return f"fictionElement{self.index}"

    @property
    def display_name(self) -> str:
        return self.element_name

    @property
    def weight(self) -> float:
        return FICTION_ELEMENT_WEIGHT

    @property
    def description(self) -> str:
        return f"Fiction element: {self.element_name}"


PrincipleId = Union[PrincipleKind, FictionElementPrinciple]


@dataclass(frozen=True)
class PrincipleDefinition:
    kind: PrincipleKind
    display_name: str     # "Pacing & Flow"
    weight: float         # relative weight in the overall weighted mean
    description: str      # one-line human-readable description


_DEFINITIONS: List[PrincipleDefinition] = [
    PrincipleDefinition(PrincipleKind.PACING, "Pacing & Flow", 1.0,
                        "Mix of compact, balanced and extended paragraphs"),
    PrincipleDefinition(PrincipleKind.DUAL_CODING, "Show vs Tell", 1.0,
                        "Share of paragraphs that would benefit from concrete imagery"),
    PrincipleDefinition(PrincipleKind.CHARACTER_DEVELOPMENT, "Character Development", 1.0,
                        "Average development of detected characters"),
    PrincipleDefinition(PrincipleKind.THEME_DEPTH, "Theme Depth", 1.0,
                        "Density of thematic keywords and symbols"),
    PrincipleDefinition(PrincipleKind.GENRE_TROPES, "Genre Conventions", 1.0,
                        "Adherence to the genre's tropes and story beats"),
    PrincipleDefinition(PrincipleKind.WORD_CHOICE, "Word Choice & Variety", 0.7,
                        "Vocabulary richness"),
    PrincipleDefinition(PrincipleKind.DIALOGUE_QUALITY, "Dialogue & Attribution", 0.8,
                        "Share of dialogue lines with a speaker tag"),
    PrincipleDefinition(PrincipleKind.VOICE_STRENGTH, "Active Voice Usage", 0.6,
                        "Inverse of the passive-voice rate"),
    PrincipleDefinition(PrincipleKind.ADVERB_USAGE, "Adverb Economy", 0.5,
                        "Inverse of adverb density"),
    PrincipleDefinition(PrincipleKind.SENTENCE_VARIETY, "Sentence Variety", 0.7,
                        "Spread of short, medium and long sentences"),
    PrincipleDefinition(PrincipleKind.READABILITY, "Readability", 0.6,
                        "Distance of the Flesch-Kincaid grade from grade 8"),
    PrincipleDefinition(PrincipleKind.EMOTIONAL_PACING, "Emotional Pacing", 0.8,
                        "Average emotional intensity across the text"),
    PrincipleDefinition(PrincipleKind.POV_CONSISTENCY, "POV Consistency", 0.9,
                        "Stability of the narrative point of view"),
    PrincipleDefinition(PrincipleKind.CLICHE_AVOIDANCE, "Originality (Cliché Avoidance)", 0.6,
                        "Inverse of cliché density"),
    PrincipleDefinition(PrincipleKind.DIRECT_PROSE, "Direct Prose (Filtering Words)", 0.7,
                        "Inverse of filtering-word density"),
    PrincipleDefinition(PrincipleKind.BACKSTORY_BALANCE, "Backstory Balance", 0.7,
                        "Inverse of the share of backstory paragraphs"),
    PrincipleDefinition(PrincipleKind.FICTION_BALANCE, "Fiction Elements Balance", 1.0,
                        "Evenness of the twelve fiction element scores"),
    PrincipleDefinition(PrincipleKind.DIALOGUE_NARRATIVE_BALANCE, "Dialogue-to-Narrative Balance", 0.8,
                        "Dialogue, description and action against genre targets"),
    PrincipleDefinition(PrincipleKind.SCENE_SEQUEL_STRUCTURE, "Scene vs Sequel Structure", 0.8,
                        "Ratio of action scenes to reflective sequels"),
    PrincipleDefinition(PrincipleKind.CONFLICT_PRESENCE, "Conflict Tracking", 1.0,
                        "Conflict density and intensity"),
    PrincipleDefinition(PrincipleKind.SENSORY_RICHNESS, "Sensory Balance", 0.7,
                        "Spread of sensory details across the five senses"),
]

PRINCIPLE_REGISTRY: Dict[PrincipleKind, PrincipleDefinition] = {
    d.kind: d for d in _DEFINITIONS
}
