"""Analysis-related exceptions: scoring state, analyzer output, input shape."""

from typing import Dict, List, Optional

from .base import ManuscriptInsightError


class AnalysisError(ManuscriptInsightError):
    """Base class for analysis-related errors."""
    pass


class NoScorablePrinciplesError(AnalysisError):
    """Raised when the overall score would divide by a zero weight sum."""

    def __init__(self, principle_count: int):
        super().__init__(
            "No scorable principles: total weight is zero",
            details={"principles": str(principle_count)},
        )
        self.principle_count = principle_count


class MalformedAnalyzerResultError(AnalysisError):
    """Raised when an analyzer returns a result missing required fields."""

    def __init__(self, analyzer: str, missing: List[str], reason: Optional[str] = None):
        details: Dict[str, str] = {"analyzer": analyzer}
        if missing:
            details["missing"] = ", ".join(missing)
        if reason:
            details["reason"] = reason
        super().__init__(f"Malformed result from analyzer '{analyzer}'", details=details)
        self.analyzer = analyzer
        self.missing = missing
        self.reason = reason


class InvalidManuscriptError(AnalysisError):
    """Raised when a manuscript input violates its invariants."""

    def __init__(self, reason: str, manuscript_id: Optional[str] = None):
        details = {"reason": reason}
        if manuscript_id is not None:
            details["manuscript"] = manuscript_id
        super().__init__(f"Invalid manuscript: {reason}", details=details)
        self.reason = reason
        self.manuscript_id = manuscript_id
