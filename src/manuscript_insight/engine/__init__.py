"""Analysis engine: stages, analyzer registry and orchestrator."""

from .orchestrator import AnalysisEngine, analyze_manuscript
from .registry import (
    SLOTS,
    AnalyzerRegistry,
    AnalyzerSlot,
    default_registry,
    get_slot,
    slots_for_stage,
)
from .stages import (
    ENGINE_STAGES,
    STAGE_DETAILS,
    CallbackObserver,
    NullObserver,
    ProgressObserver,
    RecordingObserver,
    Stage,
)

__all__ = [
    "AnalysisEngine",
    "analyze_manuscript",
    "SLOTS",
    "AnalyzerRegistry",
    "AnalyzerSlot",
    "default_registry",
    "get_slot",
    "slots_for_stage",
    "ENGINE_STAGES",
    "STAGE_DETAILS",
    "CallbackObserver",
    "NullObserver",
    "ProgressObserver",
    "RecordingObserver",
    "Stage",
]
