"""Progress display for the Manuscript Insight CLI."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)

from ..engine import Stage


@dataclass
class Phase:
    """A stage of the analysis pipeline as shown in the progress bar."""

    stage: Stage
    weight: int  # Relative weight for progress calculation
    description: str


PHASES = [
    Phase(Stage.ANALYZING_PACING, 8, "Segmenting paragraphs"),
    Phase(Stage.ANALYZING_VISUALS, 8, "Checking show vs tell"),
    Phase(Stage.ANALYZING_CHARACTERS, 10, "Tracking characters"),
    Phase(Stage.ANALYZING_THEMES, 8, "Detecting themes"),
    Phase(Stage.ANALYZING_TROPES, 8, "Matching genre tropes"),
    Phase(Stage.ANALYZING_FICTION_ELEMENTS, 12, "Scoring fiction elements"),
    Phase(Stage.ANALYZING_PROSE_QUALITY, 14, "Measuring prose quality"),
    Phase(Stage.ANALYZING_VISUAL_ENHANCEMENTS, 14, "Emotions, POV and style"),
    Phase(Stage.ANALYZING_ADVANCED_METRICS, 14, "Structure and conflict"),
    Phase(Stage.BUILDING_REPORT, 4, "Building report"),
]

_PHASE_INDEX = {phase.stage: i for i, phase in enumerate(PHASES)}


class AnalysisProgress:
    """Progress bar driven by engine stage notifications.

    Implements the engine's progress observer interface, so it can be
    passed straight to ``AnalysisEngine.analyze_manuscript``.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console(stderr=True)
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    def start(self, title: str) -> None:
        """Start the progress display."""
        self.console.print()
        self.console.print("[bold cyan]MANUSCRIPT INSIGHT[/]")
        self.console.print(f"[dim]{title}[/]")
        self.console.print()

        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(bar_width=40, complete_style="cyan", finished_style="green"),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=False,
        )
        self._progress.start()
        self._task_id = self._progress.add_task("Initializing...", total=100)

    def on_stage(self, stage: Stage, detail: str) -> None:
        if not self._progress or self._task_id is None:
            return

        if stage is Stage.COMPLETE:
            self._progress.update(self._task_id, completed=100, description="[green]Done![/]")
            return

        phase_idx = _PHASE_INDEX.get(stage)
        if phase_idx is None:
            return
        completed = sum(PHASES[i].weight for i in range(phase_idx))
        self._progress.update(
            self._task_id, completed=completed, description=PHASES[phase_idx].description
        )

    def on_failure(self, stage: Stage, error: BaseException) -> None:
        if self._progress and self._task_id is not None:
            self._progress.update(self._task_id, description=f"[red]Failed:[/] {stage.detail}")

    def stop(self) -> None:
        """Stop the progress display."""
        if self._progress:
            self._progress.stop()
            self._progress = None
        self.console.print()
