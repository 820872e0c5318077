"""Aggregate pages: project grid, post index, links directory and resume viewer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from pagesmith.markdown.frontmatter import parse_frontmatter_file
from pagesmith.site.exceptions import FrontmatterParsingError
from pagesmith.site.fragments import FragmentLoader
from pagesmith.site.pages import LinkEntry, Page, PageKind
from pagesmith.site.template import (
    INDEX_PAGE,
    LINKS_PAGE,
    PROJECTS_PAGE,
    RESUME_PAGE,
    relative_link,
    render_template,
)
from pagesmith.site.writer import write_html

if TYPE_CHECKING:
    from pagesmith.config.settings import SiteSettings

logger = logging.getLogger(__name__)


def _linked(pages: Sequence[Page], kind: PageKind, listing_path: Path) -> list[dict[str, object]]:
    return [
        {"href": relative_link(page.output_path, listing_path.parent), "page": page}
        for page in pages
        if page.kind is kind
    ]


def write_project_listing(
    pages: Sequence[Page], template: str, dist_dir: Path, fragments: FragmentLoader | None = None
) -> Path:
    """Write ``projects.html``: one card per project page inside a grid."""
    fragments = fragments or FragmentLoader()
    output_path = dist_dir / PROJECTS_PAGE
    content = fragments.render("projects.html.jinja2", cards=_linked(pages, PageKind.PROJECT, output_path))
    write_html(output_path, render_template(template, content, output_path, dist_dir))
    logger.info("Generated projects page.")
    return output_path


def write_post_index(
    pages: Sequence[Page], template: str, dist_dir: Path, fragments: FragmentLoader | None = None
) -> Path:
    """Write ``index.html``: a link list of every post."""
    fragments = fragments or FragmentLoader()
    output_path = dist_dir / INDEX_PAGE
    content = fragments.render("index.html.jinja2", items=_linked(pages, PageKind.POST, output_path))
    write_html(output_path, render_template(template, content, output_path, dist_dir))
    logger.info("Generated main index page.")
    return output_path


def load_links(links_file: Path) -> list[LinkEntry]:
    """Read the ``links`` list from the front matter of ``links_file``.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParsingError: If its front matter is malformed.

    """
    metadata, _ = parse_frontmatter_file(links_file)
    entries = metadata.get("links") or []
    if not isinstance(entries, list):
        logger.warning("'links' in %s is not a list, ignoring it", links_file)
        return []
    return [LinkEntry.from_mapping(entry) for entry in entries if isinstance(entry, dict)]


def write_links_page(
    links_file: Path, template: str, dist_dir: Path, fragments: FragmentLoader | None = None
) -> Path | None:
    """Write ``links.html`` from ``links_file``.

    Returns ``None`` without writing anything when the source file is missing,
    unreadable or malformed.
    """
    try:
        links = load_links(links_file)
    except (OSError, FrontmatterParsingError) as exc:
        logger.info("%s not usable (%s), skipping links page generation.", links_file.name, exc)
        return None

    fragments = fragments or FragmentLoader()
    output_path = dist_dir / LINKS_PAGE
    content = fragments.render("links.html.jinja2", links=links)
    write_html(output_path, render_template(template, content, output_path, dist_dir))
    logger.info("Generated links page.")
    return output_path


def write_resume_page(
    resume_name: str, template: str, dist_dir: Path, fragments: FragmentLoader | None = None
) -> Path:
    """Write ``resume.html`` embedding ``resume_name``, whether or not that file exists."""
    fragments = fragments or FragmentLoader()
    output_path = dist_dir / RESUME_PAGE
    content = fragments.render("resume.html.jinja2", resume_name=resume_name)
    write_html(output_path, render_template(template, content, output_path, dist_dir))
    logger.info("Generated resume page.")
    return output_path


def write_listing_pages(pages: Sequence[Page], template: str, settings: SiteSettings) -> list[Path]:
    """Write every aggregate page and return the paths that were produced."""
    dist_dir = settings.abs_dist_dir
    fragments = FragmentLoader()

    written = [
        write_project_listing(pages, template, dist_dir, fragments),
        write_post_index(pages, template, dist_dir, fragments),
    ]
    links_path = write_links_page(settings.abs_links_file, template, dist_dir, fragments)
    if links_path is not None:
        written.append(links_path)
    written.append(write_resume_page(settings.abs_resume_file.name, template, dist_dir, fragments))
    return written
