"""Tests for analyzers/dual_coding.py - show-vs-tell suggestions."""

import pytest

from manuscript_insight.analyzers import DualCodingAnalyzer
from manuscript_insight.analyzers.dual_coding import analyze_paragraph, technical_density

PROCESS_PARAGRAPH = (
    "First the water boils, then the steam rises, "
    "and finally the lid begins to rattle on the stove."
)
PLAIN_PARAGRAPH = "Mara walked down to the harbor and waited for the boat to come in from the sea."


class TestTechnicalDensity:
    def test_hyphenated_tokens(self):
        assert technical_density("alpha beta-gamma") == pytest.approx(0.5)

    def test_empty(self):
        assert technical_density("") == 0.0


class TestAnalyzeParagraph:
    def test_short_paragraph_skipped(self):
        assert analyze_paragraph("First, then, finally.", 0) == []

    def test_process_paragraph(self):
        (suggestion,) = analyze_paragraph(PROCESS_PARAGRAPH, 3)

        assert suggestion.visual_type == "flowchart"
        assert suggestion.priority == "high"
        assert suggestion.position == 3
        assert suggestion.paragraph == PROCESS_PARAGRAPH + "..."

    def test_plain_paragraph(self):
        assert analyze_paragraph(PLAIN_PARAGRAPH, 0) == []


class TestDualCodingAnalyzer:
    def test_counts_suggestions(self):
        result = DualCodingAnalyzer().analyze(PROCESS_PARAGRAPH + "\n\n" + PLAIN_PARAGRAPH)

        assert result.paragraphs_analyzed == 2
        assert result.suggestion_count == 1
        assert result.suggestions[0].context.endswith("..." + PLAIN_PARAGRAPH)

    def test_empty_text(self):
        result = DualCodingAnalyzer().analyze("")
        assert result.paragraphs_analyzed == 0
        assert result.suggestion_count == 0
