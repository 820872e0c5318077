"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.markup import escape

from pagesmith.cli._app import console
from pagesmith.config.exceptions import ConfigError
from pagesmith.site.exceptions import FrontmatterParsingError, PageWriteError, TemplateLoadError


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Every failure ends the command with exit code 1.

    Args:
        debug: If True, re-raise known errors and print the full traceback of
            unexpected ones.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit):
        raise
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Invalid Configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except TemplateLoadError as e:
        if debug:
            raise
        console.print(f"[bold red]Template Missing:[/bold red] {escape(str(e))}")
        console.print("Create a [bold]template.html[/bold] containing a [cyan]{{ content }}[/cyan] placeholder.")
        raise typer.Exit(1) from e
    except FrontmatterParsingError as e:
        if debug:
            raise
        console.print(f"[bold red]Malformed Source:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except PageWriteError as e:
        if debug:
            raise
        console.print(f"[bold red]Write Failed:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
