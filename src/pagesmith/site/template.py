"""Placeholder substitution into the shared page template.

The template is a plain HTML document containing these literal tokens:

``{{ content }}``
    Replaced once with the page's HTML fragment.
``{{pathToHome}}``, ``{{pathToProjects}}``, ``{{pathToLinks}}``, ``{{pathToResume}}``
    Replaced everywhere with the path from the page being rendered to the
    post index, project grid, links page and resume page.

No templating engine is involved, so any ``template.html`` that uses these
tokens renders the same everywhere.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

CONTENT_TOKEN = "{{ content }}"

INDEX_PAGE = "index.html"
PROJECTS_PAGE = "projects.html"
LINKS_PAGE = "links.html"
RESUME_PAGE = "resume.html"

NAV_TOKENS: dict[str, str] = {
    "{{pathToHome}}": INDEX_PAGE,
    "{{pathToProjects}}": PROJECTS_PAGE,
    "{{pathToLinks}}": LINKS_PAGE,
    "{{pathToResume}}": RESUME_PAGE,
}


def relative_link(target: Path, start_dir: Path) -> str:
    """Return ``target`` relative to ``start_dir`` with forward slashes.

    An empty result (the page links to itself) falls back to the target's
    file name.
    """
    relative = os.path.relpath(target, start_dir).replace("\\", "/")
    if relative in ("", "."):
        return target.name
    return relative


def render_template(template: str, content: str, output_path: Path, dist_dir: Path) -> str:
    """Render ``content`` into ``template`` for a page written to ``output_path``."""
    if CONTENT_TOKEN not in template:
        logger.debug("Template has no %s placeholder; content for %s dropped", CONTENT_TOKEN, output_path)
    output = template.replace(CONTENT_TOKEN, content, 1)

    start_dir = output_path.parent
    for token, filename in NAV_TOKENS.items():
        output = output.replace(token, relative_link(dist_dir / filename, start_dir))
    return output
