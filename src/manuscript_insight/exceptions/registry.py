"""Analyzer registry exceptions: unknown and unfilled slots."""

from typing import List

from .base import ManuscriptInsightError


class RegistryError(ManuscriptInsightError):
    """Base class for analyzer registry errors."""

    pass


class UnknownAnalyzerError(RegistryError):
    """Raised when a slot name is not part of the registry."""

    def __init__(self, name: str, known: List[str]):
        super().__init__(
            f"Unknown analyzer slot: {name}",
            details={"name": name, "known": ", ".join(known)},
        )
        self.name = name
        self.known = known


class MissingAnalyzerError(RegistryError):
    """Raised when a slot has no implementation bound to it."""

    def __init__(self, name: str):
        super().__init__(f"No analyzer registered for slot: {name}", details={"name": name})
        self.name = name
