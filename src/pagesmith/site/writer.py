"""Writing of individual post and project pages."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pagesmith.markdown.rendering import render_markdown
from pagesmith.site.exceptions import PageWriteError
from pagesmith.site.pages import Page
from pagesmith.site.template import render_template

logger = logging.getLogger(__name__)


def write_html(path: Path, html: str) -> Path:
    """Write ``html`` to ``path``, which must sit in an existing directory.

    Raises:
        PageWriteError: If the file cannot be written.

    """
    try:
        path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise PageWriteError(path, str(exc)) from exc
    return path


def write_pages(pages: Iterable[Page], template: str, dist_dir: Path) -> list[Path]:
    """Render and write one HTML file per page.

    The first failing write aborts the rest; files already written stay.
    """
    written: list[Path] = []
    for page in pages:
        html = render_template(template, render_markdown(page.body), page.output_path, dist_dir)
        written.append(write_html(page.output_path, html))
        logger.info("Generated page: %s", page.output_path)
    return written
