"""Default heuristic analyzers"""

from .backstory import BackstoryAnalyzer, BackstoryDensityResult
from .base import BaseAnalyzer
from .characters import CharacterAnalysisResult, CharacterAnalyzer
from .cliches import ClicheDetectionResult, ClicheDetector
from .conflict import ConflictTracker, ConflictTrackingResult
from .dialogue_ratio import DialogueNarrativeRatio, DialogueRatioAnalyzer
from .dual_coding import DualCodingAnalyzer, DualCodingResult
from .emotion_heatmap import EmotionHeatmapAnalyzer, EmotionHeatmapResult
from .fiction_elements import FictionElementsAnalyzer, FictionElementScore, FictionElementsResult
from .filtering import FilteringWordsDetector, FilteringWordsResult
from .pov import POVAnalyzer, POVConsistencyResult
from .prose_quality import ProseQualityAnalyzer, ProseQualityResult
from .scene_sequel import SceneSequelAnalyzer, SceneSequelResult
from .segmenter import ParagraphSegmenter, extract_paragraphs
from .sensory import SensoryBalanceAnalyzer, SensoryBalanceResult
from .themes import ThemeAnalysisResult, ThemeAnalyzer
from .tropes import TropeAnalysisResult, TropeAnalyzer


def default_analyzers():
    """One instance of every default analyzer, in pipeline order."""
    return [
        ParagraphSegmenter(),
        DualCodingAnalyzer(),
        CharacterAnalyzer(),
        ThemeAnalyzer(),
        TropeAnalyzer(),
        FictionElementsAnalyzer(),
        ProseQualityAnalyzer(),
        EmotionHeatmapAnalyzer(),
        POVAnalyzer(),
        ClicheDetector(),
        FilteringWordsDetector(),
        BackstoryAnalyzer(),
        DialogueRatioAnalyzer(),
        SceneSequelAnalyzer(),
        ConflictTracker(),
        SensoryBalanceAnalyzer(),
    ]


__all__ = [
    "BaseAnalyzer",
    "default_analyzers",
    "extract_paragraphs",
    "ParagraphSegmenter",
    "DualCodingAnalyzer",
    "DualCodingResult",
    "CharacterAnalyzer",
    "CharacterAnalysisResult",
    "ThemeAnalyzer",
    "ThemeAnalysisResult",
    "TropeAnalyzer",
    "TropeAnalysisResult",
    "FictionElementsAnalyzer",
    "FictionElementScore",
    "FictionElementsResult",
    "ProseQualityAnalyzer",
    "ProseQualityResult",
    "EmotionHeatmapAnalyzer",
    "EmotionHeatmapResult",
    "POVAnalyzer",
    "POVConsistencyResult",
    "ClicheDetector",
    "ClicheDetectionResult",
    "FilteringWordsDetector",
    "FilteringWordsResult",
    "BackstoryAnalyzer",
    "BackstoryDensityResult",
    "DialogueRatioAnalyzer",
    "DialogueNarrativeRatio",
    "SceneSequelAnalyzer",
    "SceneSequelResult",
    "ConflictTracker",
    "ConflictTrackingResult",
    "SensoryBalanceAnalyzer",
    "SensoryBalanceResult",
]
