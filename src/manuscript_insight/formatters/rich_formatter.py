"""Rich terminal formatter for Manuscript Insight."""

from typing import List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import EngineConfig
from ..models import AnalysisReport, PrincipleScore, Priority, Suggestion
from .base import BaseFormatter

_PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
_PRIORITY_STYLE = {Priority.HIGH: "red", Priority.MEDIUM: "yellow", Priority.LOW: "dim"}


def _score_color(score: float) -> str:
    if score >= 80:
        return "green"
    elif score >= 60:
        return "yellow"
    else:
        return "red"


def _score_label(score: float) -> str:
    color = _score_color(score)
    return f"[{color}]{score:.0f}[/{color}]"


def top_suggestions(report: AnalysisReport, limit: int) -> List[Tuple[PrincipleScore, Suggestion]]:
    """Highest-priority suggestions, weakest principles first."""
    ranked = sorted(report.principle_scores, key=lambda ps: ps.score)
    pairs = [(ps, s) for ps in ranked for s in ps.suggestions]
    pairs.sort(key=lambda pair: _PRIORITY_ORDER[pair[1].priority])
    return pairs[:limit]


class RichFormatter(BaseFormatter):
    """Rich terminal output: summary panel, principle table and suggestions."""

    def __init__(self, config: Optional[EngineConfig] = None, console: Optional[Console] = None):
        super().__init__(config)
        self.console = console or Console(stderr=True)

    def render(self, report: AnalysisReport) -> None:
        self._print(report, self.console)

    def format(self, report: AnalysisReport) -> str:
        console = Console(width=120, color_system=None, force_terminal=False)
        with console.capture() as capture:
            self._print(report, console)
        return capture.get()

    # -- private helpers --

    def _print(self, report: AnalysisReport, console: Console) -> None:
        self._print_summary(report, console)
        self._print_principles(report, console)
        self._print_suggestions(report, console)

    def _print_summary(self, report: AnalysisReport, console: Console) -> None:
        metrics = report.metrics
        summary_text = (
            f"Overall score [bold]{_score_label(report.overall_score)}[/bold]/100  |  "
            f"[bold]{metrics.total_words}[/bold] words  |  "
            f"~[blue]{metrics.reading_time}[/blue] min read  |  "
            f"Genre: [cyan]{report.genre}[/cyan]"
        )
        console.print(
            Panel(
                summary_text,
                title=f"[bold cyan]{report.chapter_id}[/bold cyan]",
                expand=False,
            )
        )
        console.print()

    def _print_principles(self, report: AnalysisReport, console: Console) -> None:
        table = Table(title="Principle Scores", expand=True)
        table.add_column("Principle", style="white", ratio=2)
        table.add_column("Score", justify="right", width=7)
        table.add_column("Weight", justify="right", width=7)
        if self.config.show_details:
            table.add_column("Details", style="dim", ratio=4)

        for ps in report.principle_scores:
            name = ps.display_name
            if self.config.show_details:
                name = f"{name}\n[dim]{ps.principle.description}[/dim]"
            row = [name, _score_label(ps.score), f"{ps.weight:g}"]
            if self.config.show_details:
                row.append("\n".join(ps.details) or "-")
            table.add_row(*row)

        console.print(table)
        console.print()

    def _print_suggestions(self, report: AnalysisReport, console: Console) -> None:
        pairs = top_suggestions(report, self.config.max_suggestions)
        if not pairs:
            return

        console.print("[bold]Top Suggestions:[/bold]")
        for ps, suggestion in pairs:
            style = _PRIORITY_STYLE[suggestion.priority]
            console.print(
                f"  [{style}]{suggestion.priority.value:6s}[/{style}] "
                f"[bold]{suggestion.title}[/bold] [dim]({ps.display_name})[/dim]"
            )
            console.print(f"         {suggestion.description}")
            if self.config.show_details:
                console.print(f"         [green]->[/green] {suggestion.implementation}")
        console.print()
