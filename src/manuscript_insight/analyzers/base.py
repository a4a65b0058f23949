"""Base analyzer class shared by the default heuristic analyzers"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class BaseAnalyzer(ABC):
    """Abstract base class for stateless text analyzers.

    Subclasses set ``name`` (the registry slot they fill) and implement
    ``analyze``. An analyzer never reads another analyzer's output.
    """

    name: str = ""

    @abstractmethod
    def analyze(self, text: str, genre: Optional[str] = None) -> Any:
        """Compute this analyzer's result for the given manuscript text"""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
