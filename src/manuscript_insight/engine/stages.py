"""Pipeline stages and the progress observer port."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple


class Stage(str, Enum):
    """Progress stages, in the order a successful run passes through them."""

    RECEIVED = "received"
    ANALYZING_PACING = "analyzing-pacing"
    ANALYZING_VISUALS = "analyzing-visuals"
    ANALYZING_CHARACTERS = "analyzing-characters"
    ANALYZING_THEMES = "analyzing-themes"
    ANALYZING_TROPES = "analyzing-tropes"
    ANALYZING_FICTION_ELEMENTS = "analyzing-fiction-elements"
    ANALYZING_PROSE_QUALITY = "analyzing-prose-quality"
    ANALYZING_VISUAL_ENHANCEMENTS = "analyzing-visual-enhancements"
    ANALYZING_ADVANCED_METRICS = "analyzing-advanced-metrics"
    BUILDING_REPORT = "building-report"
    COMPLETE = "complete"

    @property
    def detail(self) -> str:
        return STAGE_DETAILS[self]


STAGE_DETAILS: Dict[Stage, str] = {
    Stage.RECEIVED: "Chapter received by worker",
    Stage.ANALYZING_PACING: "Analyzing paragraph pacing",
    Stage.ANALYZING_VISUALS: "Analyzing show vs tell",
    Stage.ANALYZING_CHARACTERS: "Analyzing character development",
    Stage.ANALYZING_THEMES: "Detecting themes and symbols",
    Stage.ANALYZING_TROPES: "Identifying genre tropes and conventions",
    Stage.ANALYZING_FICTION_ELEMENTS: "Analyzing 12 core fiction elements",
    Stage.ANALYZING_PROSE_QUALITY: "Analyzing prose quality",
    Stage.ANALYZING_VISUAL_ENHANCEMENTS: "Analyzing emotions, POV, and style",
    Stage.ANALYZING_ADVANCED_METRICS: "Analyzing advanced metrics",
    Stage.BUILDING_REPORT: "Generating analysis report",
    Stage.COMPLETE: "Analysis complete",
}

# Stages emitted by the engine itself (RECEIVED belongs to the worker boundary)
ENGINE_STAGES: Tuple[Stage, ...] = tuple(s for s in Stage if s is not Stage.RECEIVED)


class ProgressObserver(Protocol):
    """Receives stage transitions from one analysis run.

    ``on_stage`` fires once per stage in ``ENGINE_STAGES`` order. On failure
    ``on_failure`` fires once with the stage that was running, and
    ``Stage.COMPLETE`` is never reported.
    """

    def on_stage(self, stage: Stage, detail: str) -> None:
        ...

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        ...


class NullObserver:
    """Observer that ignores every notification."""

    def on_stage(self, stage: Stage, detail: str) -> None:
        pass

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        pass


class CallbackObserver:
    """Adapts a plain ``(step, detail)`` callback to the observer port."""

    def __init__(
        self,
        on_progress: Callable[[str, str], None],
        on_error: Optional[Callable[[str, BaseException], None]] = None,
    ):
        self._on_progress = on_progress
        self._on_error = on_error

    def on_stage(self, stage: Stage, detail: str) -> None:
        self._on_progress(stage.value, detail)

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        if self._on_error is not None:
            self._on_error(stage.value, error)


class RecordingObserver:
    """Keeps every notification, for tests and diagnostics."""

    def __init__(self) -> None:
        self.events: List[Tuple[Stage, str]] = []
        self.failures: List[Tuple[Stage, BaseException]] = []

    def on_stage(self, stage: Stage, detail: str) -> None:
        self.events.append((stage, detail))

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        self.failures.append((stage, error))

    @property
    def stages(self) -> List[Stage]:
        return [stage for stage, _ in self.events]

    @property
    def completed(self) -> bool:
        return Stage.COMPLETE in self.stages
