"""
Manuscript Insight - Fiction Craft Analysis

Scores manuscripts against weighted craft principles (pacing, show vs tell,
character development, prose quality and more) using text heuristics, and
turns the weakest areas into prioritized suggestions.
"""

__version__ = "0.1.0"

from .api import analyze
from .engine import AnalysisEngine, AnalyzerRegistry, Stage
from .models import AnalysisReport, ManuscriptInput, PrincipleScore, report_to_dict
from .worker import AnalysisWorker, handle_request

__all__ = [
    "analyze",  # Main entry point
    "AnalysisEngine",  # Advanced usage (custom registry or observer)
    "AnalyzerRegistry",
    "Stage",
    "AnalysisReport",
    "ManuscriptInput",
    "PrincipleScore",
    "report_to_dict",
    "AnalysisWorker",
    "handle_request",
]
