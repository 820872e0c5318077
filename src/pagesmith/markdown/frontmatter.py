"""Helpers for parsing YAML frontmatter from Markdown content."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from pagesmith.site.exceptions import FrontmatterParsingError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def parse_frontmatter(content: str, *, source: Path | str = "<string>") -> tuple[dict[str, Any], str]:
    """Parse YAML frontmatter using python-frontmatter.

    Args:
        content: Markdown content that may include frontmatter.
        source: Where the content came from, used in error messages.

    Returns:
        Tuple of (metadata dict, body string). Metadata that is not a mapping
        is treated as empty.

    Raises:
        FrontmatterParsingError: If the frontmatter block is not valid YAML.

    """
    try:
        parsed = frontmatter.loads(content)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterParsingError(source, str(exc)) from exc

    raw_metadata = parsed.metadata or {}
    if not isinstance(raw_metadata, dict):
        logger.warning("Frontmatter metadata in %s is not a mapping: %s", source, type(raw_metadata).__name__)
        metadata: dict[str, Any] = {}
    else:
        metadata = dict(raw_metadata)

    body = parsed.content if isinstance(parsed.content, str) else str(parsed.content)
    return metadata, body


def parse_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read a Markdown file and parse its frontmatter.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParsingError: If the file is not valid text in ``encoding``
            or its frontmatter is not valid YAML.

    """
    try:
        content = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise FrontmatterParsingError(path, str(exc)) from exc
    return parse_frontmatter(content, source=path)
