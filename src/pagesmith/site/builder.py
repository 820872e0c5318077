"""Build orchestration: clean the output root, then write every page."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from pagesmith.config.settings import SiteSettings
from pagesmith.site.exceptions import TemplateLoadError
from pagesmith.site.listings import write_listing_pages
from pagesmith.site.loader import discover_pages
from pagesmith.site.template import LINKS_PAGE
from pagesmith.site.writer import write_pages

logger = logging.getLogger(__name__)


@dataclass
class BuildReport:
    """What a finished build produced."""

    dist_dir: Path
    pages: list[Path] = field(default_factory=list)
    listings: list[Path] = field(default_factory=list)
    resume_copied: bool = False

    @property
    def links_generated(self) -> bool:
        return any(path.name == LINKS_PAGE for path in self.listings)


def load_template(path: Path) -> str:
    """Read the shared page template.

    Raises:
        TemplateLoadError: If the template cannot be read.

    """
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TemplateLoadError(path, str(exc)) from exc


def prepare_output_dir(settings: SiteSettings) -> None:
    """Remove the output root and recreate it with its ``projects`` subdirectory."""
    dist_dir = settings.abs_dist_dir
    if dist_dir.exists():
        shutil.rmtree(dist_dir)
    settings.abs_projects_output_dir.mkdir(parents=True, exist_ok=True)


def copy_resume(settings: SiteSettings) -> bool:
    """Copy the resume asset into the output root if it exists."""
    source = settings.abs_resume_file
    try:
        shutil.copyfile(source, settings.abs_dist_dir / source.name)
    except OSError as exc:
        logger.info("Resume file not copied, skipping (%s).", exc)
        return False
    logger.info("Resume copied successfully.")
    return True


def build_site(settings: SiteSettings) -> BuildReport:
    """Build the whole site described by ``settings``.

    Any failure propagates to the caller. Files written before the failure
    are left in place.
    """
    logger.info("Starting static site generation...")
    template = load_template(settings.abs_template_path)
    prepare_output_dir(settings)

    report = BuildReport(dist_dir=settings.abs_dist_dir)
    report.resume_copied = copy_resume(settings)

    pages = discover_pages(settings.content_sources())
    report.pages = write_pages(pages, template, settings.abs_dist_dir)
    report.listings = write_listing_pages(pages, template, settings)

    logger.info("Static site generation complete!")
    return report
