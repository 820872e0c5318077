"""CLI application bootstrap utilities."""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="pagesmith",
    help="Build a static site from markdown posts, projects and a shared HTML template",
    add_completion=False,
)

console = Console()
logger = logging.getLogger(__name__)


def configure_logging(*, debug: bool = False) -> None:
    """Route log records through rich, verbose when ``debug`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


__all__ = ["app", "configure_logging", "console", "logger"]
