"""Tests for analyzers/filtering.py - filter words per sentence."""

import pytest

from manuscript_insight.analyzers import FilteringWordsDetector, FilteringWordsResult


class TestFilteringWordsDetector:
    def test_counts_by_type(self):
        result = FilteringWordsDetector().analyze("She saw the boat. He heard a bell.")

        assert result.count == 2
        assert result.by_type == {"perception": 1, "hearing": 1}
        assert result.density == pytest.approx(250.0)

    def test_instance_fields(self):
        result = FilteringWordsDetector().analyze("She saw the boat. He heard a bell.")
        first, second = result.instances

        assert first.word == "saw"
        assert first.position == 0
        assert first.sentence == "She saw the boat"
        assert "saw" in first.suggestion
        assert second.word == "heard"
        assert second.position == 17

    def test_word_counted_once_per_sentence(self):
        result = FilteringWordsDetector().analyze("She saw it and saw it again.")
        assert result.count == 1

    def test_distinct_words_in_one_sentence(self):
        result = FilteringWordsDetector().analyze("She saw and heard it.")
        assert result.count == 2

    def test_whole_words_only(self):
        result = FilteringWordsDetector().analyze("The seesaw creaked.")
        assert result.count == 0

    def test_empty_text(self):
        result = FilteringWordsDetector().analyze("")
        assert result.count == 0
        assert result.density == 0.0
        assert result.by_type == {}


class TestTopTypes:
    def test_sorted_by_count(self):
        result = FilteringWordsResult(
            instances=(), count=6, density=0.0,
            by_type={"hearing": 1, "feeling": 3, "thought": 2},
        )
        assert result.top_types(2) == [("feeling", 3), ("thought", 2)]
