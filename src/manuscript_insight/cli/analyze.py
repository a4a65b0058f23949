"""Main analysis command."""

from pathlib import Path
from typing import Optional

import typer

from ..config import load_config
from ..engine import AnalysisEngine
from ..exceptions import ManuscriptInsightError
from ..formatters import get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, read_manuscript, version_callback
from .progress import AnalysisProgress


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    Score fiction manuscripts against craft principles.

    [bold cyan]Examples:[/bold cyan]

      manuscript-insight analyze chapter1.txt

      manuscript-insight analyze chapter1.md --genre thriller --json
    """


@app.command()
def analyze(
    file: Path = typer.Argument(
        ...,
        help="UTF-8 text file to analyze",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    genre: Optional[str] = typer.Option(
        None,
        "--genre",
        "-g",
        help="Genre for trope and dialogue targets (default: from config)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress progress and warnings",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
):
    """
    Analyze a manuscript and report per-principle craft scores.

    Sections are detected from Markdown-style [bold]#[/bold] headings or
    [bold]Chapter N[/bold] lines.
    """
    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(
            config_file=config,
            verbose=verbose,
            quiet=quiet,
            output_format="json" if json_output else None,
        )
        manuscript = read_manuscript(file, genre=genre)
        engine = AnalysisEngine(config=settings)

        if settings.output_format == "rich" and settings.verbosity != "quiet":
            progress = AnalysisProgress()
            progress.start(f"{file.name} ({manuscript.word_count} words)")
            try:
                report = engine.analyze_manuscript(manuscript, observer=progress)
            finally:
                progress.stop()
        else:
            report = engine.analyze_manuscript(manuscript)

        get_formatter(settings.output_format, settings).render(report)

    except typer.Exit:
        raise

    except ManuscriptInsightError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        console.print(f"[red]Unexpected error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
