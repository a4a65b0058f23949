"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..exceptions import InvalidManuscriptError
from ..models import ManuscriptInput, detect_sections

console = Console(stderr=True)


def version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        console.print(
            f"[bold cyan]Manuscript Insight[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)


def read_manuscript(path: Path, genre: Optional[str] = None) -> ManuscriptInput:
    """Load a UTF-8 text file as a manuscript named after the file stem.

    Raises:
        InvalidManuscriptError: If the file is not valid UTF-8
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidManuscriptError(f"{path.name} is not UTF-8 text ({e.reason})", path.stem)
    return ManuscriptInput.from_text(path.stem, text, sections=detect_sections(text), genre=genre)
