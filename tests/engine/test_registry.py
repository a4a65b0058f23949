"""Tests for engine/registry.py - slot binding and result validation."""

from dataclasses import replace
from types import SimpleNamespace

import pytest

from manuscript_insight.analyzers import (
    CharacterAnalyzer,
    FictionElementsAnalyzer,
    ProseQualityAnalyzer,
    ThemeAnalyzer,
    default_analyzers,
)
from manuscript_insight.engine import (
    SLOTS,
    AnalyzerRegistry,
    Stage,
    default_registry,
    get_slot,
    slots_for_stage,
)
from manuscript_insight.exceptions import (
    MalformedAnalyzerResultError,
    MissingAnalyzerError,
    UnknownAnalyzerError,
)
from manuscript_insight.models import Paragraph

from conftest import StubAnalyzer


class TestSlots:
    def test_sixteen_unique_slots(self):
        names = [s.name for s in SLOTS]
        assert len(names) == 16
        assert len(set(names)) == 16

    def test_default_analyzers_fill_every_slot(self):
        assert sorted(a.name for a in default_analyzers()) == sorted(s.name for s in SLOTS)

    def test_stage_mapping(self):
        assert [s.name for s in slots_for_stage(Stage.ANALYZING_VISUAL_ENHANCEMENTS)] == [
            "emotion_heatmap",
            "pov_consistency",
            "cliches",
            "filtering_words",
            "backstory",
        ]
        assert [s.name for s in slots_for_stage(Stage.ANALYZING_ADVANCED_METRICS)] == [
            "dialogue_ratio",
            "scene_sequel",
            "conflict",
            "sensory",
        ]
        assert slots_for_stage(Stage.BUILDING_REPORT) == []

    def test_genre_aware_slots(self):
        assert {s.name for s in SLOTS if s.genre_aware} == {"tropes", "dialogue_ratio"}

    def test_unknown_slot(self):
        with pytest.raises(UnknownAnalyzerError):
            get_slot("plagiarism")


class TestBinding:
    def test_register_rejects_unknown_name(self):
        with pytest.raises(UnknownAnalyzerError):
            AnalyzerRegistry().register(StubAnalyzer("plagiarism"))

    def test_missing_slot(self):
        registry = AnalyzerRegistry([ThemeAnalyzer()])
        assert isinstance(registry.get("themes"), ThemeAnalyzer)
        with pytest.raises(MissingAnalyzerError):
            registry.get("characters")
        with pytest.raises(MissingAnalyzerError):
            registry.check_complete()

    def test_default_registry_complete(self):
        default_registry().check_complete()

    def test_replace_returns_copy(self):
        registry = default_registry()
        stub = StubAnalyzer("themes")
        replaced = registry.replace("themes", stub)
        assert replaced.get("themes") is stub
        assert isinstance(registry.get("themes"), ThemeAnalyzer)

    def test_explicit_name(self):
        registry = AnalyzerRegistry()
        stub = StubAnalyzer("anything")
        registry.register(stub, name="sensory")
        assert registry.get("sensory") is stub


class TestValidation:
    def test_missing_field(self):
        registry = AnalyzerRegistry()
        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            registry.validate("themes", object())
        assert "thematic_density" in exc_info.value.missing

    def test_none_result(self):
        with pytest.raises(MalformedAnalyzerResultError, match="no result"):
            AnalyzerRegistry().validate("cliches", None)

    def test_segmenter_requires_sequence(self):
        with pytest.raises(MalformedAnalyzerResultError):
            AnalyzerRegistry().validate("segmenter", "not paragraphs")

    def test_segmenter_items_need_text_and_word_count(self):
        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("segmenter", [{"text": "a", "word_count": 1}])
        assert exc_info.value.reason == "paragraph 0"

    def test_valid_segmenter_result_passes_through(self):
        paras = (Paragraph("0", "Hello there.", 0, 12, 12, 2),)
        assert AnalyzerRegistry().validate("segmenter", paras) is paras


def _make_element(**overrides):
    fields = dict(element="Plot", score=70.0, presence="strong", details=(), insights=())
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestTypedValidation:
    def test_default_results_pass(self, sample_text):
        registry = default_registry()
        for slot in SLOTS:
            registry.run(slot.name, sample_text, "thriller")

    def test_none_where_sequence_expected(self, sample_text):
        result = replace(FictionElementsAnalyzer().analyze(sample_text), elements=None)

        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("fiction_elements", result)
        assert exc_info.value.reason == "elements: expected a sequence, got NoneType"

    def test_string_score_rejected(self, sample_text):
        result = replace(CharacterAnalyzer().analyze(sample_text), average_development="75")

        with pytest.raises(MalformedAnalyzerResultError, match="average_development"):
            AnalyzerRegistry().validate("characters", result)

    def test_bool_is_not_a_score(self):
        result = SimpleNamespace(elements=(), overall_balance=True)
        with pytest.raises(MalformedAnalyzerResultError, match="expected a number"):
            AnalyzerRegistry().validate("fiction_elements", result)

    def test_nested_element_missing_field(self):
        element = _make_element()
        del element.insights
        result = SimpleNamespace(elements=(_make_element(), element), overall_balance=80)

        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("fiction_elements", result)
        assert exc_info.value.missing == ["elements[1].insights"]

    def test_nested_element_wrong_kind(self):
        result = SimpleNamespace(elements=(_make_element(score=None),), overall_balance=80)
        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("fiction_elements", result)
        assert exc_info.value.reason == "elements[0].score: expected a number, got NoneType"

    def test_prose_sub_record_checked(self, sample_text):
        prose = ProseQualityAnalyzer().analyze(sample_text)
        result = replace(prose, readability=replace(prose.readability, flesch_kincaid="8.0"))

        with pytest.raises(MalformedAnalyzerResultError, match="readability.flesch_kincaid"):
            AnalyzerRegistry().validate("prose_quality", result)

    def test_character_records_checked(self, sample_text):
        characters = CharacterAnalyzer().analyze(sample_text)
        result = replace(characters, characters=(SimpleNamespace(name="Mara"),))

        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("characters", result)
        assert exc_info.value.missing == [
            "characters[0].arc_type",
            "characters[0].total_mentions",
        ]

    def test_optional_string_accepts_none(self, sample_text):
        themes = replace(ThemeAnalyzer().analyze(sample_text), dominant_theme=None)
        assert AnalyzerRegistry().validate("themes", themes) is themes

    def test_segmenter_item_kinds(self):
        paragraph = SimpleNamespace(text="Hello.", word_count="1")
        with pytest.raises(MalformedAnalyzerResultError) as exc_info:
            AnalyzerRegistry().validate("segmenter", [paragraph])
        assert exc_info.value.reason == "paragraph 0: word_count: expected a number, got str"


class TestRun:
    def test_genre_only_for_genre_aware_slots(self, sample_text):
        registry = default_registry()
        themes = ThemeAnalyzer()
        calls = []

        class Recorder:
            name = "themes"

            def analyze(self, text, genre=None):
                calls.append(genre)
                return themes.analyze(text)

        registry.register(Recorder())
        registry.run("themes", sample_text, "thriller")
        assert calls == [None]

    def test_analyzer_error_propagates(self):
        registry = AnalyzerRegistry([StubAnalyzer("conflict", error=ValueError("boom"))])
        with pytest.raises(ValueError, match="boom"):
            registry.run("conflict", "text")
