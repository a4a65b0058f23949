"""Base formatter interface for Manuscript Insight report rendering."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models import AnalysisReport


class BaseFormatter(ABC):
    """Abstract base class for report formatters."""

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or DEFAULT_CONFIG

    @abstractmethod
    def render(self, report: AnalysisReport) -> None:
        """Render the report to the terminal."""

    @abstractmethod
    def format(self, report: AnalysisReport) -> str:
        """Return the formatted string representation of the report."""
