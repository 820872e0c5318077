"""A module for Pagesmith's command-line interface."""

from pagesmith.cli.build import app

__all__ = ["app", "main"]


def main() -> None:
    """Entry point for the CLI."""
    app()
