"""Analysis engine: runs the analyzer pipeline and assembles the report.

The pipeline is strictly sequential. Stages fire in ``ENGINE_STAGES`` order;
any analyzer failure aborts the run with no partial report.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..config import DEFAULT_CONFIG, EngineConfig
from ..models import AnalysisMetrics, AnalysisReport, AnalyzerOutputs, ManuscriptInput
from ..scoring import PrincipleScoreBuilder, aggregate
from .registry import AnalyzerRegistry, default_registry, slots_for_stage
from .stages import ENGINE_STAGES, NullObserver, ProgressObserver, Stage

logger = logging.getLogger(__name__)

_ANALYZER_STAGES = ENGINE_STAGES[: ENGINE_STAGES.index(Stage.BUILDING_REPORT)]

# AnalyzerOutputs field for each registry slot that differs in name
_OUTPUT_FIELDS = {"segmenter": "paragraphs"}


class AnalysisEngine:
    """Runs every registered analyzer over a manuscript and scores the results.

    Example:
        >>> engine = AnalysisEngine()
        >>> report = engine.analyze_manuscript(ManuscriptInput.from_text("ch1", text))
        >>> report.overall_score
        71
    """

    def __init__(
        self,
        registry: Optional[AnalyzerRegistry] = None,
        config: Optional[EngineConfig] = None,
        builder: Optional[PrincipleScoreBuilder] = None,
    ):
        self.registry = registry or default_registry()
        self.config = config or DEFAULT_CONFIG
        self.builder = builder or PrincipleScoreBuilder()

    def resolve_genre(self, manuscript: ManuscriptInput, genre: Optional[str] = None) -> str:
        return genre or manuscript.genre or self.config.default_genre

    def analyze_manuscript(
        self,
        manuscript: ManuscriptInput,
        observer: Optional[ProgressObserver] = None,
        genre: Optional[str] = None,
    ) -> AnalysisReport:
        """Analyze one manuscript.

        Args:
            manuscript: The manuscript to analyze
            observer: Receives a notification per stage
            genre: Overrides the manuscript's genre label

        Returns:
            The immutable analysis report

        Raises:
            MissingAnalyzerError: If a registry slot has no analyzer
            MalformedAnalyzerResultError: If an analyzer result lacks a declared field
                or holds the wrong kind of value
            NoScorablePrinciplesError: If the principle weights sum to zero
            Exception: Whatever an analyzer raises, unchanged
        """
        observer = observer or NullObserver()
        genre = self.resolve_genre(manuscript, genre)
        text = manuscript.content
        stage = ENGINE_STAGES[0]

        try:
            self.registry.check_complete()

            results: Dict[str, Any] = {}
            for stage in _ANALYZER_STAGES:
                self._notify(observer, stage)
                for slot in slots_for_stage(stage):
                    field_name = _OUTPUT_FIELDS.get(slot.name, slot.name)
                    results[field_name] = self.registry.run(slot.name, text, genre)

            stage = Stage.BUILDING_REPORT
            self._notify(observer, stage)
            outputs = AnalyzerOutputs(**results)
            report = self._build_report(manuscript, genre, outputs)

            stage = Stage.COMPLETE
            self._notify(observer, stage)
        except Exception as e:
            logger.exception(f"Error during analysis (stage={stage.value})")
            try:
                observer.on_failure(stage, e)
            except Exception as observer_error:
                logger.debug(f"Progress observer failed in on_failure: {observer_error}")
            raise

        logger.info(f"Analysis of {manuscript.id} complete: overall score {report.overall_score}")
        return report

    def _notify(self, observer: ProgressObserver, stage: Stage) -> None:
        logger.debug(f"Stage {stage.value}: {stage.detail}")
        observer.on_stage(stage, stage.detail)

    def _build_report(
        self, manuscript: ManuscriptInput, genre: str, outputs: AnalyzerOutputs
    ) -> AnalysisReport:
        principle_scores = self.builder.build(outputs)
        summary = aggregate(principle_scores)
        timestamp = datetime.now(timezone.utc)
        words = manuscript.word_count
        metrics = AnalysisMetrics(
            total_words=words,
            reading_time=math.ceil(words / self.config.words_per_minute),
            average_section_length=words / max(1, len(manuscript.sections)),
            timestamp=timestamp,
        )
        return AnalysisReport(
            chapter_id=manuscript.id,
            genre=genre,
            overall_score=summary.overall_score,
            principle_scores=principle_scores,
            evaluation=summary.evaluation,
            visualization=summary.visualization,
            metrics=metrics,
            timestamp=timestamp,
            results=outputs,
        )


def analyze_manuscript(
    manuscript: ManuscriptInput,
    observer: Optional[ProgressObserver] = None,
    genre: Optional[str] = None,
    registry: Optional[AnalyzerRegistry] = None,
    config: Optional[EngineConfig] = None,
) -> AnalysisReport:
    """Analyze a manuscript with a one-off engine."""
    engine = AnalysisEngine(registry=registry, config=config)
    return engine.analyze_manuscript(manuscript, observer=observer, genre=genre)
