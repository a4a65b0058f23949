"""Tests for analyzers/emotion_heatmap.py."""

from manuscript_insight.analyzers import EmotionHeatmapAnalyzer, EmotionHeatmapResult
from manuscript_insight.analyzers.emotion_heatmap import score_chunk


class TestScoreChunk:
    def test_strongest_family_wins(self):
        counts = {}
        point = score_chunk("I was happy and smiled.", 0, counts)

        assert point.emotion == "joy"
        assert point.intensity == 40
        assert counts == {"joy": 2}
        assert point.context == "I was happy and smiled...."

    def test_neutral_chunk(self):
        point = score_chunk("The ferry left at noon.", 500, {})
        assert point.emotion == "neutral"
        assert point.intensity == 0
        assert point.position == 500


class TestEmotionHeatmapAnalyzer:
    def test_peaks_valleys_and_issues(self):
        text = "happy joy delight!! " + "plain words here.   " * 2
        result = EmotionHeatmapAnalyzer(chunk_size=20).analyze(text)

        assert [p.position for p in result.data_points] == [0, 20, 40]
        assert [p.intensity for p in result.data_points] == [60, 0, 0]
        assert result.average_intensity == 20
        assert [p.position for p in result.peaks] == [0]
        assert len(result.valleys) == 2
        assert result.emotion_breakdown == {"joy": 3}
        assert result.pacing_issues == (
            "Too many low-intensity sections - manuscript may feel flat",
        )

    def test_empty_text(self):
        result = EmotionHeatmapAnalyzer().analyze("")

        assert result.data_points == ()
        assert result.average_intensity == 0.0
        assert result.pacing_issues == (
            "Overall emotional intensity is low - consider adding more tension",
        )


class TestDominantEmotions:
    def test_ranked_by_count(self):
        result = EmotionHeatmapResult(
            data_points=(), average_intensity=0.0, peaks=(), valleys=(),
            emotion_breakdown={"joy": 1, "fear": 4, "love": 2}, pacing_issues=(),
        )
        assert result.dominant_emotions(2) == [("fear", 4), ("love", 2)]
