"""The build command of the Pagesmith CLI."""

from pathlib import Path
from typing import Annotated

import typer

from pagesmith.cli._app import app, configure_logging, console
from pagesmith.cli.errorhandler import handle_cli_errors
from pagesmith.config.settings import SiteSettings
from pagesmith.site.builder import build_site


@app.command()
def build(
    site_root: Annotated[
        Path | None,
        typer.Option("--site-root", help="Site directory (defaults to the current directory)"),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Verbose logging and full tracebacks")] = False,
) -> None:
    """Build the static site into the output directory."""
    configure_logging(debug=debug)
    with handle_cli_errors(debug=debug):
        settings = SiteSettings.load(site_root)
        report = build_site(settings)

    links_note = "" if report.links_generated else " (links page skipped)"
    console.print(
        f"[bold green]Built {len(report.pages)} page(s) and {len(report.listings)} listing page(s)"
        f"{links_note}[/bold green] in {report.dist_dir}"
    )


__all__ = ["app", "build"]
