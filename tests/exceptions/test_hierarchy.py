"""Tests for the exception hierarchy."""

import pytest

from manuscript_insight.exceptions import (
    AnalysisError,
    ConfigurationError,
    InvalidConfigError,
    InvalidManuscriptError,
    MalformedAnalyzerResultError,
    ManuscriptInsightError,
    MissingAnalyzerError,
    NoScorablePrinciplesError,
    RegistryError,
    UnknownAnalyzerError,
)


class TestHierarchy:
    """Every package error is catchable as ManuscriptInsightError."""

    @pytest.mark.parametrize(
        "error",
        [
            NoScorablePrinciplesError(0),
            MalformedAnalyzerResultError("themes", ["thematic_density"]),
            InvalidManuscriptError("bad"),
            UnknownAnalyzerError("nope", ["themes"]),
            MissingAnalyzerError("themes"),
            InvalidConfigError("words_per_minute", "fast", "not an int"),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, ManuscriptInsightError)

    def test_families(self):
        assert issubclass(NoScorablePrinciplesError, AnalysisError)
        assert issubclass(MalformedAnalyzerResultError, AnalysisError)
        assert issubclass(MissingAnalyzerError, RegistryError)
        assert issubclass(InvalidConfigError, ConfigurationError)


class TestMessages:
    def test_details_in_str(self):
        err = MissingAnalyzerError("themes")
        assert str(err) == "No analyzer registered for slot: themes (name=themes)"

    def test_plain_message_without_details(self):
        assert str(ManuscriptInsightError("boom")) == "boom"

    def test_malformed_result_lists_missing_fields(self):
        err = MalformedAnalyzerResultError("themes", ["thematic_density", "dominant_theme"])
        assert err.missing == ["thematic_density", "dominant_theme"]
        assert "missing=thematic_density, dominant_theme" in str(err)

    def test_invalid_manuscript_carries_id(self):
        err = InvalidManuscriptError("word count must be non-negative", "ch1")
        assert err.manuscript_id == "ch1"
        assert err.details["manuscript"] == "ch1"

    def test_no_scorable_principles_count(self):
        err = NoScorablePrinciplesError(21)
        assert err.principle_count == 21
        assert "principles=21" in str(err)
