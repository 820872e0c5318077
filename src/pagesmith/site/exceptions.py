"""Custom exceptions raised while building a site."""

from __future__ import annotations

from pathlib import Path

from pagesmith.exceptions import PagesmithError


class SiteBuildError(PagesmithError):
    """Base class for site build errors."""


class TemplateLoadError(SiteBuildError):
    """Raised when the shared page template cannot be read."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to load template at '{self.path}': {reason}")


class FrontmatterParsingError(SiteBuildError):
    """Raised when the YAML front matter of a source file is invalid."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Invalid YAML frontmatter in '{self.path}': {reason}")


class PageWriteError(SiteBuildError):
    """Raised when a generated page cannot be written to disk."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to write page '{self.path}': {reason}")
