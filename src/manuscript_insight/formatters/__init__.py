"""Output formatters for Manuscript Insight."""

from typing import Optional

from ..config import EngineConfig
from .base import BaseFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter


def get_formatter(name: str, config: Optional[EngineConfig] = None) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"
        config: Rendering options (suggestion count, detail lines)

    Returns:
        Formatter instance

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(config)


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "get_formatter",
]
