"""Tests for analyzers/backstory.py."""

import pytest

from manuscript_insight.analyzers import BackstoryAnalyzer
from manuscript_insight.analyzers.backstory import find_sections, severity_for


class TestSeverity:
    @pytest.mark.parametrize(
        "count, expected",
        [(0, "light"), (4, "light"), (5, "moderate"), (8, "moderate"), (9, "heavy")],
    )
    def test_bands(self, count, expected):
        assert severity_for(count) == expected


class TestFindSections:
    def test_needs_more_than_two_hits(self):
        assert find_sections("She remembered and recalled.") == []

    def test_section_fields(self):
        text = "She remembered. He remembered. They remembered."
        (section,) = find_sections(text)

        assert section.start == 0
        assert section.length == len(text)
        assert section.indicators == ("remembered",)
        assert section.severity == "light"

    def test_offsets_advance_by_section_length(self):
        text = "remembered remembered remembered x remembered remembered remembered"
        first, second = find_sections(text, words_per_section=4)

        assert (first.start, first.length) == (0, 34)
        assert second.start == 34


class TestBackstoryAnalyzer:
    def test_dense_backstory_warnings(self):
        text = "She remembered. He remembered. They remembered."
        result = BackstoryAnalyzer().analyze(text)

        assert result.total_backstory_length == len(text)
        assert result.percentage == pytest.approx(100.0)
        assert result.opening_chapters_backstory == pytest.approx(500.0)
        assert len(result.warnings) == 2
        assert len(result.distribution) == 10
        assert result.distribution[1:] == (0.0,) * 9

    def test_heavy_sections(self):
        result = BackstoryAnalyzer().analyze("memory " * 9)
        assert result.heavy_sections == 1

    def test_empty_text(self):
        result = BackstoryAnalyzer().analyze("")

        assert result.sections == ()
        assert result.percentage == 0.0
        assert result.distribution == (0.0,) * 10
        assert result.warnings == ()
