"""Tests for analyzers/tropes.py and the genre libraries."""

from manuscript_insight.analyzers import TropeAnalyzer
from manuscript_insight.analyzers.trope_library import get_library
from manuscript_insight.analyzers.tropes import (
    StoryBeat,
    Trope,
    convention_score,
    count_stem_matches,
    divide_into_sections,
    overuse_score,
)


def _make_trope(strength):
    return Trope("Trope", ("k",), ("p",), strength)


def _make_beat(detected):
    return StoryBeat("Beat", "early", ("k",), detected, 0)


class TestHelpers:
    def test_stem_matches(self):
        assert count_stem_matches("betrayed betrayal", ("betray",)) == 2

    def test_divide_into_sections(self):
        assert divide_into_sections("abcdef") == ("ab", "cd", "ef")

    def test_library_lookup(self):
        assert get_library("Romance") is get_library("romance")
        assert get_library("literary") is None


class TestScores:
    def test_convention_without_markers(self):
        assert convention_score([], [_make_beat(False)]) == 30

    def test_convention_blend(self):
        # tropes 10 + 15 = 25, beats 50 -> 25 * 0.6 + 50 * 0.4 = 35
        assert convention_score([_make_trope(40)], [_make_beat(True), _make_beat(False)]) == 35

    def test_overuse(self):
        assert overuse_score([]) == 0
        assert overuse_score([_make_trope(60), _make_trope(40)]) == 45


class TestTropeAnalyzer:
    def test_unsupported_genre(self):
        result = TropeAnalyzer().analyze("Some text.", "literary")

        assert result.genre == "literary"
        assert result.detected_tropes == ()
        assert (result.convention_score, result.subversion_score) == (50, 50)
        assert result.recommendations[0].startswith('Genre "literary"')

    def test_default_genre(self):
        assert TropeAnalyzer().analyze("Some text.").genre == "general"

    def test_romance_trope_strength(self):
        result = TropeAnalyzer().analyze("enemy rival hate", "romance")

        top = result.detected_tropes[0]
        assert top.name == "Enemies to Lovers"
        assert top.strength == 100

    def test_romance_empty_text(self):
        result = TropeAnalyzer().analyze("", "romance")

        assert result.detected_beats == ()
        assert result.convention_score == 30
        assert result.subversion_score == 100
        assert result.trope_overuse_score == 0
        assert result.recommendations[0].startswith(
            "Your romance story has few recognizable genre markers"
        )
