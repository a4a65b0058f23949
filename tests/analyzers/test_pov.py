"""Tests for analyzers/pov.py - point-of-view consistency."""

import pytest

from manuscript_insight.analyzers import POVAnalyzer
from manuscript_insight.analyzers.pov import classify_sentence


class TestClassifySentence:
    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("I walked home", "first"),
            ("We waited", "first"),
            ("You know the way", "second"),
            ("Thank you, she said", "third-limited"),
            ("Everyone knew the truth", "third-omniscient"),
            ("She closed the door", "third-limited"),
            ("The tide rose", None),
        ],
    )
    def test_classification(self, sentence, expected):
        assert classify_sentence(sentence) == expected

    def test_first_person_wins_over_third(self):
        assert classify_sentence("I told her") == "first"


class TestPOVAnalyzer:
    def test_dominant_and_consistency(self):
        result = POVAnalyzer().analyze("I ran. I hid. She waited.")

        assert result.dominant_pov == "first"
        assert result.consistency == pytest.approx(200 / 3)
        assert result.shift_count == 1
        assert result.pov_shifts[0].pov_type == "third-limited"
        assert result.pov_shifts[0].position == 13
        assert result.potential_head_hops == ()
        assert result.recommendations == (
            "POV consistency is low - consider sticking to one POV",
        )

    def test_close_shifts_are_head_hops(self):
        result = POVAnalyzer().analyze("I ran. She hid. I waited.")

        assert result.shift_count == 2
        assert len(result.potential_head_hops) == 1
        assert result.potential_head_hops[0].position == 15
        assert any("1 potential head-hopping" in r for r in result.recommendations)

    def test_consistent_text(self):
        result = POVAnalyzer().analyze("She ran. He followed. They hid.")

        assert result.dominant_pov == "third-limited"
        assert result.consistency == 100.0
        assert result.shift_count == 0
        assert result.recommendations == ()

    def test_no_pronouns(self):
        result = POVAnalyzer().analyze("")

        assert result.dominant_pov == "unknown"
        assert result.consistency == 0.0
        assert result.pov_shifts == ()
