"""CLI entry point: registers all subcommands."""

import typer

from ._common import console  # noqa: F401

app = typer.Typer(
    name="manuscript-insight",
    help="Manuscript Insight - Fiction Craft Analyzer",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import subcommands to register them
from .analyze import main as _main_callback, analyze as _analyze  # noqa: F401, E402
