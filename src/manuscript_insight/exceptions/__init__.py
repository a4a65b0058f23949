"""Exception hierarchy for Manuscript Insight."""

from .analysis import (
    AnalysisError,
    InvalidManuscriptError,
    MalformedAnalyzerResultError,
    NoScorablePrinciplesError,
)
from .base import ManuscriptInsightError
from .config import ConfigurationError, InvalidConfigError
from .registry import MissingAnalyzerError, RegistryError, UnknownAnalyzerError

__all__ = [
    "ManuscriptInsightError",
    "AnalysisError",
    "NoScorablePrinciplesError",
    "MalformedAnalyzerResultError",
    "InvalidManuscriptError",
    "RegistryError",
    "UnknownAnalyzerError",
    "MissingAnalyzerError",
    "ConfigurationError",
    "InvalidConfigError",
]
