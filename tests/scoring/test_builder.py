"""Tests for scoring/builder.py - per-principle score formulas and suggestions."""

import pytest

from manuscript_insight.analyzers.backstory import BackstoryDensityResult, BackstorySection
from manuscript_insight.analyzers.cliches import ClicheDetectionResult
from manuscript_insight.analyzers.conflict import ConflictTrackingResult
from manuscript_insight.analyzers.dialogue_ratio import DialogueNarrativeRatio, genre_target
from manuscript_insight.analyzers.emotion_heatmap import EmotionHeatmapResult
from manuscript_insight.analyzers.fiction_elements import FictionElementScore, FictionElementsResult
from manuscript_insight.analyzers.filtering import FilteringWordsResult
from manuscript_insight.analyzers.pov import POVConsistencyResult
from manuscript_insight.analyzers.prose_quality import (
    AdverbStats,
    DialogueStats,
    PassiveVoiceStats,
    ProseQualityResult,
    Readability,
    SentenceVariety,
    WordFrequency,
    WordFrequencyStats,
)
from manuscript_insight.analyzers.scene_sequel import SceneSequelResult
from manuscript_insight.analyzers.sensory import SensoryBalanceResult
from manuscript_insight.models import Priority
from manuscript_insight.principles import PrincipleKind
from manuscript_insight.scoring import DualCodingCounts, PacingCounts, PrincipleScoreBuilder


@pytest.fixture
def builder():
    return PrincipleScoreBuilder()


def _make_prose(
    total=1000,
    unique=200,
    overused=(),
    dialogue=(0, 0, 0),
    passive=(0, 0.0),
    adverbs=(0, 0.0, 0),
    variety=70.0,
    grade=8.0,
):
    lines, tagged, untagged = dialogue
    return ProseQualityResult(
        word_frequency=WordFrequencyStats(
            total=total,
            unique=unique,
            top_words=(),
            overused_words=tuple(WordFrequency(w, 30, ()) for w in overused),
        ),
        dialogue=DialogueStats(lines, tagged, untagged, {}, ()),
        passive_voice=PassiveVoiceStats((), passive[0], passive[1]),
        adverbs=AdverbStats((), adverbs[0], adverbs[1], adverbs[2]),
        sentence_variety=SentenceVariety((), 14.0, 3, 5, 2, variety),
        readability=Readability(grade, 65.0, 14.0, 1.45, "8th-9th grade"),
    )


def _make_element(name, score, insights=()):
    return FictionElementScore(
        element=name, score=score, presence="moderate", details=(), insights=tuple(insights)
    )


class TestStructureScores:
    def test_pacing_details(self, builder):
        ps = builder.pacing(PacingCounts(1, 2, 1))
        assert ps.principle is PrincipleKind.PACING
        assert ps.score == 100
        assert ps.details == (
            "1 compact paragraphs",
            "2 balanced paragraphs",
            "1 extended paragraphs",
        )
        assert ps.suggestions == ()

    def test_dual_coding(self, builder):
        ps = builder.dual_coding(DualCodingCounts(suggestion_count=3, total_paragraphs=10))
        assert ps.score == 65
        assert ps.details == ("3 areas could use more sensory details",)


class TestProseScores:
    def test_word_choice_richness(self, builder):
        ps = builder.word_choice(_make_prose(total=1000, unique=200))
        assert ps.score == pytest.approx(60.0)
        assert "Vocabulary richness: 20.0%" in ps.details
        assert "No significantly overused words detected" in ps.details

    def test_word_choice_capped_and_suggests_variety(self, builder):
        prose = _make_prose(total=100, unique=90, overused=("said", "very", "just", "then", "that", "was"))
        ps = builder.word_choice(prose)
        assert ps.score == 100.0
        (suggestion,) = ps.suggestions
        assert suggestion.id == "word-variety-1"
        assert suggestion.description.endswith("said, very, just, then, that")

    def test_word_choice_empty_text(self, builder):
        assert builder.word_choice(_make_prose(total=0, unique=0)).score == 0

    def test_dialogue_quality_without_dialogue_is_neutral(self, builder):
        assert builder.dialogue_quality(_make_prose()).score == 50

    def test_dialogue_quality_tag_share(self, builder):
        ps = builder.dialogue_quality(_make_prose(dialogue=(10, 3, 7)))
        assert ps.score == pytest.approx(30.0)
        assert ps.suggestions[0].id == "dialogue-1"
        assert ps.suggestions[0].description.startswith("7 dialogue lines")

    def test_voice_strength_clamped(self, builder):
        assert builder.voice_strength(_make_prose(passive=(2, 10.0))).score == 80
        assert builder.voice_strength(_make_prose(passive=(40, 75.0))).score == 0

    def test_voice_strength_priority(self, builder):
        ps = builder.voice_strength(_make_prose(passive=(12, 30.0)))
        assert ps.suggestions[0].priority is Priority.HIGH
        ps = builder.voice_strength(_make_prose(passive=(12, 15.0)))
        assert ps.suggestions[0].priority is Priority.MEDIUM
        assert "Good, but could strengthen some sentences" in ps.details

    def test_adverb_usage(self, builder):
        ps = builder.adverb_usage(_make_prose(adverbs=(20, 20.0, 6)))
        assert ps.score == 60
        assert ps.suggestions[0].priority is Priority.LOW
        assert "Consider replacing some adverbs with stronger verbs" in ps.details
        assert builder.adverb_usage(_make_prose(adverbs=(90, 80.0, 0))).score == 0

    def test_sentence_variety_suggestion_below_60(self, builder):
        assert builder.sentence_variety(_make_prose(variety=55)).suggestions[0].id == "variety-1"
        assert builder.sentence_variety(_make_prose(variety=60)).suggestions == ()

    def test_readability_distance_from_grade_8(self, builder):
        assert builder.readability(_make_prose(grade=8.0)).score == 100
        assert builder.readability(_make_prose(grade=14.0)).score == 70
        assert builder.readability(_make_prose(grade=40.0)).score == 0

    def test_readability_suggestion_direction(self, builder):
        (too_complex,) = builder.readability(_make_prose(grade=13.0)).suggestions
        assert too_complex.title == "Simplify Complex Prose"
        (too_simple,) = builder.readability(_make_prose(grade=4.0)).suggestions
        assert too_simple.title == "Add Complexity"
        assert builder.readability(_make_prose(grade=9.0)).suggestions == ()


class TestStyleScores:
    def test_emotional_pacing(self, builder):
        result = EmotionHeatmapResult(
            data_points=(),
            average_intensity=35.0,
            peaks=(),
            valleys=(),
            emotion_breakdown={"fear": 4, "joy": 1, "anger": 2},
            pacing_issues=("Too many low-tension sections", "Flat middle"),
        )
        ps = builder.emotional_pacing(result)
        assert ps.score == 70
        assert "Dominant emotions: fear, anger, joy" in ps.details
        assert [s.id for s in ps.suggestions] == ["emotion-0", "emotion-1"]

    def test_pov_consistency_suggestion(self, builder):
        result = POVConsistencyResult(
            dominant_pov="third-limited",
            pov_shifts=(),
            shift_count=0,
            consistency=95.0,
            potential_head_hops=(),
            recommendations=(),
        )
        assert builder.pov_consistency(result).suggestions == ()

        shaky = POVConsistencyResult("first", (), 6, 60.0, (), ("Stay in one head",))
        (suggestion,) = builder.pov_consistency(shaky).suggestions
        assert suggestion.description == "Stay in one head"
        assert suggestion.priority is Priority.MEDIUM

    def test_cliche_avoidance(self, builder):
        clean = ClicheDetectionResult((), 0, 0.0, {})
        ps = builder.cliche_avoidance(clean)
        assert ps.score == 100
        assert "No common clichés detected" in ps.details

        heavy = ClicheDetectionResult((), 8, 2.5, {"time": 5, "emotion": 2, "action": 1})
        ps = builder.cliche_avoidance(heavy)
        assert ps.score == 50
        assert "Most common: time (5), emotion (2)" in ps.details
        assert ps.suggestions[0].id == "cliche-1"

    def test_direct_prose(self, builder):
        result = FilteringWordsResult((), 25, 12.0, {"saw": 10, "felt": 10, "heard": 5})
        ps = builder.direct_prose(result)
        assert ps.score == 40
        assert "Most common types: saw (10), felt (10), heard (5)" in ps.details
        assert ps.suggestions[0].id == "filtering-1"

    def test_backstory_balance(self, builder):
        result = BackstoryDensityResult(
            sections=(BackstorySection(0, 10, 10, ("remembered",), "heavy"),),
            total_backstory_length=10,
            percentage=20.0,
            opening_chapters_backstory=40.0,
            distribution=(),
            warnings=("Opening is backstory-heavy",),
        )
        ps = builder.backstory_balance(result)
        assert ps.score == 60
        assert "Heavy sections: 1" in ps.details
        assert ps.suggestions[0].priority is Priority.HIGH


class TestFictionElements:
    def test_element_ids_follow_rank(self, builder):
        ranked = [_make_element("Plot", 90), _make_element("Setting", 30, ["Add place detail"])]
        scores = builder.fiction_elements(ranked)
        assert [ps.principle_id for ps in scores] == ["fictionElement0", "fictionElement1"]
        assert [ps.display_name for ps in scores] == ["Plot", "Setting"]
        assert all(ps.weight == 0.8 for ps in scores)
        (suggestion,) = scores[1].suggestions
        assert suggestion.id == "element-Setting-0"
        assert suggestion.priority is Priority.HIGH
        assert suggestion.implementation == "Focus on strengthening setting"

    def test_at_most_three_element_suggestions(self, builder):
        element = _make_element("Voice", 50, ["a", "b", "c", "d"])
        assert len(builder.fiction_element(0, element).suggestions) == 3

    def test_fiction_balance_lists(self, builder):
        ranked = [_make_element("Plot", 80), _make_element("Time", 65), _make_element("Theme", 40)]
        result = FictionElementsResult(tuple(ranked), 62, (), (), ())
        ps = builder.fiction_balance(result, ranked)
        assert ps.score == 62
        assert ps.details == ("Overall balance: 62/100", "Strong: Plot", "Needs work: Theme")


class TestAdvancedScores:
    def test_dialogue_narrative_balance_bands(self, builder):
        def ratio(balance):
            return DialogueNarrativeRatio(
                100, 30, 50, 20, 30.0, 50.0, 20.0, genre_target("thriller"), balance, ("Add dialogue",)
            )

        assert builder.dialogue_narrative_balance(ratio("excellent")).score == 90
        assert builder.dialogue_narrative_balance(ratio("good")).score == 75
        ps = builder.dialogue_narrative_balance(ratio("needs-adjustment"))
        assert ps.score == 55
        assert ps.suggestions[0].id == "dialogue-ratio-0"

    def test_scene_sequel_bands(self, builder):
        def result(balance):
            return SceneSequelResult((), (), 3, 1, 3.0, 800.0, 600.0, balance, ("Add a sequel",))

        assert builder.scene_sequel_structure(result("excellent")).score == 90
        assert builder.scene_sequel_structure(result("good")).score == 75
        ps = builder.scene_sequel_structure(result("unbalanced"))
        assert ps.score == 50
        assert ps.suggestions[0].priority is Priority.HIGH
        assert "Scene:Sequel ratio: 3.0:1" in ps.details

    def test_conflict_presence_formula(self, builder):
        def result(density, intensity):
            return ConflictTrackingResult((), 4, 1, 2, 1, intensity, density, (), (), ("More stakes",))

        # 40 + 2 * 10 + 50 / 2 = 85
        assert builder.conflict_presence(result(2.0, 50.0)).score == pytest.approx(85.0)
        assert builder.conflict_presence(result(9.0, 80.0)).score == 100
        ps = builder.conflict_presence(result(0.5, 0.0))
        assert ps.suggestions[0].priority is Priority.HIGH

    def test_sensory_bands(self, builder):
        def result(balance):
            return SensoryBalanceResult(
                (), 6, 2, 1, 1, 0, 10, 60.0, 20.0, 10.0, 10.0, 0.0, balance, ("Add taste",)
            )

        assert builder.sensory_richness(result("excellent")).score == 90
        assert builder.sensory_richness(result("good")).score == 75
        visual = builder.sensory_richness(result("visual-heavy"))
        assert visual.score == 60
        assert visual.suggestions[0].priority is Priority.MEDIUM
        assert builder.sensory_richness(result("needs-variety")).score == 50
