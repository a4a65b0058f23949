"""Tests for analyzers/prose_quality.py."""

import pytest

from manuscript_insight.analyzers import ProseQualityAnalyzer
from manuscript_insight.analyzers.prose_quality import (
    analyze_adverbs,
    analyze_dialogue,
    analyze_passive_voice,
    analyze_sentence_variety,
    analyze_word_frequency,
    calculate_readability,
    count_syllables,
    interpret_grade,
)


class TestWordFrequency:
    def test_counts_and_positions(self):
        stats = analyze_word_frequency("The cat and the dog.")

        assert (stats.total, stats.unique) == (5, 4)
        top = stats.top_words[0]
        assert (top.word, top.count, top.positions) == ("the", 2, (0, 12))
        assert stats.richness == pytest.approx(0.8)
        assert stats.overused_words == ()

    def test_empty_richness(self):
        assert analyze_word_frequency("").richness == 0.0


class TestDialogue:
    def test_tagged_and_untagged_lines(self):
        stats = analyze_dialogue('"Run," Mara said. "Hello there." She left.')

        assert stats.total_dialogue_lines == 2
        assert stats.tagged_lines == 1
        assert stats.untagged_lines == 1
        assert stats.speakers == {"Mara": 1}
        assert stats.tags[0].tag == "said"


class TestPassiveAndAdverbs:
    def test_passive_voice(self):
        stats = analyze_passive_voice("The door was opened. She ran.")

        assert stats.count == 1
        assert stats.instances[0].verb == "was opened"
        assert stats.instances[0].position == 0
        assert stats.percentage == pytest.approx(50.0)

    def test_adverb_severity(self):
        stats = analyze_adverbs("She really ran quickly. Unquestionably.")

        assert [i.severity for i in stats.instances] == ["weak", "strong", "moderate"]
        assert stats.weak_adverbs == 1


class TestSentenceVariety:
    def test_short_sentences(self):
        variety = analyze_sentence_variety("A b c. D e f.")

        assert variety.short_sentences == 2
        assert variety.average_length == pytest.approx(3.0)
        assert [s.position for s in variety.sentences] == [0, 7]
        assert variety.variety_score >= 0.0


class TestReadability:
    @pytest.mark.parametrize(
        "word, expected", [("cat", 1), ("table", 1), ("running", 2), ("beautiful", 3)]
    )
    def test_syllables(self, word, expected):
        assert count_syllables(word) == expected

    @pytest.mark.parametrize(
        "grade, prefix",
        [(5, "Elementary"), (8, "Middle"), (12, "High"), (15, "College"), (16, "Graduate")],
    )
    def test_interpretation(self, grade, prefix):
        assert interpret_grade(grade).startswith(prefix)

    def test_empty_text_is_clamped(self):
        readability = calculate_readability("")
        assert readability.flesch_kincaid == 0.0
        assert readability.flesch_reading == 100.0


class TestProseQualityAnalyzer:
    def test_sample(self, sample_text):
        result = ProseQualityAnalyzer().analyze(sample_text)

        assert result.word_frequency.total > 100
        assert result.dialogue.speakers.get("Tomas") == 1
        assert 0 <= result.readability.flesch_reading <= 100
