"""Site configuration.

Settings are resolved, highest priority first, from:

1. Environment variables (``PAGESMITH_<FIELD>``, e.g. ``PAGESMITH_DIST_DIR``)
2. The ``[site]`` table of an optional ``.pagesmith.toml`` in the site root
3. Defaults, which match the conventional layout::

    site-root/
        content/*.md        blog posts
        projects/*.md       project write-ups
        links.md            front matter with a ``links`` list
        template.html       shared page template
        Resume_DhruvMaheshwari.pdf

All relative paths are resolved against ``site_root``.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pagesmith.config.exceptions import ConfigLoadError
from pagesmith.site.pages import ContentSource, PageKind

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".pagesmith.toml"
PROJECTS_SUBDIR = "projects"


class SiteSettings(BaseSettings):
    """Locations of every input and output of a site build."""

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )

    # Inputs
    content_dir: Path = Field(default=Path("content"), description="Blog post sources")
    projects_dir: Path = Field(default=Path("projects"), description="Project sources")
    template_path: Path = Field(default=Path("template.html"), description="Shared HTML template")
    links_file: Path = Field(default=Path("links.md"), description="Links directory source")
    resume_file: Path = Field(
        default=Path("Resume_DhruvMaheshwari.pdf"),
        description="Resume asset copied next to resume.html",
    )

    # Output
    dist_dir: Path = Field(default=Path("dist"), description="Output root, wiped on every build")

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="PAGESMITH_",
    )

    @property
    def abs_content_dir(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def abs_projects_dir(self) -> Path:
        return self._resolve(self.projects_dir)

    @property
    def abs_template_path(self) -> Path:
        return self._resolve(self.template_path)

    @property
    def abs_links_file(self) -> Path:
        return self._resolve(self.links_file)

    @property
    def abs_resume_file(self) -> Path:
        return self._resolve(self.resume_file)

    @property
    def abs_dist_dir(self) -> Path:
        return self._resolve(self.dist_dir)

    @property
    def abs_projects_output_dir(self) -> Path:
        return self.abs_dist_dir / PROJECTS_SUBDIR

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path

    def content_sources(self) -> list[ContentSource]:
        """Return the content directories in build order: posts, then projects."""
        return [
            ContentSource(PageKind.POST, self.abs_content_dir, self.abs_dist_dir),
            ContentSource(PageKind.PROJECT, self.abs_projects_dir, self.abs_projects_output_dir),
        ]

    @classmethod
    def load(cls, site_root: Path | None = None) -> SiteSettings:
        """Load settings for ``site_root`` (defaults to the current directory).

        Raises:
            ConfigLoadError: If ``.pagesmith.toml`` cannot be read or parsed, or the
                merged settings fail validation.

        """
        root_path = (site_root if site_root is not None else Path.cwd()).resolve()
        config_file = root_path / CONFIG_FILENAME

        file_settings: dict[str, Any] = {}
        if config_file.is_file():
            try:
                with config_file.open("rb") as f:
                    file_settings = dict(tomllib.load(f).get("site", {}))
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise ConfigLoadError(config_file, str(exc)) from exc
            logger.debug("Loaded site settings from %s", config_file)

        try:
            # Environment wins over the file
            env_settings = cls().model_dump(exclude_unset=True)
            merged = {**file_settings, **env_settings}
            merged["site_root"] = root_path
            return cls.model_validate(merged)
        except ValidationError as exc:
            raise ConfigLoadError(config_file, str(exc)) from exc
