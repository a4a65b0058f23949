"""Public API for Manuscript Insight.

Example:
    >>> from manuscript_insight import analyze
    >>>
    >>> report = analyze(open("chapter1.txt").read())
    >>> report.overall_score
    74
    >>>
    >>> # With customization
    >>> report = analyze(text, manuscript_id="ch1", genre="thriller", verbose=True)
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional, Sequence

from .config import load_config
from .engine import AnalysisEngine, CallbackObserver
from .logging_config import get_logger, setup_logging
from .models import AnalysisReport, ManuscriptInput, Section, detect_sections

logger = get_logger(__name__)


def analyze(
    text: str,
    manuscript_id: str = "manuscript",
    genre: Optional[str] = None,
    sections: Optional[Sequence[Section]] = None,
    on_progress: Optional[Callable[[str, str], None]] = None,
    config_file: Optional[Path] = None,
    **overrides,
) -> AnalysisReport:
    """Analyze manuscript text and return the report.

    Args:
        text: Manuscript text
        manuscript_id: Id recorded on the report
        genre: Genre label (default: config ``default_genre``)
        sections: Section bounds; detected from headings when omitted
        on_progress: Called with ``(step, detail)`` for every stage
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., verbose=True, words_per_minute=200)

    Returns:
        The analysis report

    Raises:
        ManuscriptInsightError: If configuration or input is invalid
        Exception: If an analyzer fails
    """
    setup_logging(verbose=bool(overrides.get("verbose")), quiet=bool(overrides.get("quiet")))

    config = load_config(config_file=config_file, **overrides)
    logger.debug(f"Configuration loaded: {config.verbosity} mode")

    if sections is None:
        sections = detect_sections(text)
    manuscript = ManuscriptInput.from_text(manuscript_id, text, sections=tuple(sections), genre=genre)
    logger.info(f"Starting analysis of {manuscript_id} ({manuscript.word_count} words)")

    observer = CallbackObserver(on_progress) if on_progress is not None else None
    return AnalysisEngine(config=config).analyze_manuscript(manuscript, observer=observer)
