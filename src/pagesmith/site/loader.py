"""Discovery of markdown sources and construction of ``Page`` records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from pagesmith.markdown.frontmatter import parse_frontmatter_file
from pagesmith.site.pages import ContentSource, Page, PageKind, PageMetadata

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"
HEADING_MARKER = "# "


def derive_title(metadata: PageMetadata, body: str, fallback: str) -> str:
    """Pick a page title.

    The front matter ``title`` wins, then the first ``# `` heading line of the
    body, then ``fallback`` (the file's base name).
    """
    if metadata.title:
        return metadata.title
    for line in body.split("\n"):
        if line.startswith(HEADING_MARKER):
            return line[len(HEADING_MARKER) :].strip() or fallback
    return fallback


def load_page(path: Path, kind: PageKind, output_dir: Path) -> Page:
    """Read one markdown source into a ``Page``.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterParsingError: If its front matter is malformed.

    """
    raw_metadata, body = parse_frontmatter_file(path)
    metadata = PageMetadata.from_mapping(raw_metadata)
    name = path.stem
    return Page(
        kind=kind,
        output_path=output_dir / f"{name}.html",
        source_path=path,
        metadata=metadata,
        body=body,
        title=derive_title(metadata, body, name),
    )


def _markdown_files(source_dir: Path) -> list[Path]:
    if not source_dir.is_dir():
        logger.debug("Source directory %s not found, no pages discovered", source_dir)
        return []
    return sorted(p for p in source_dir.iterdir() if p.suffix == MARKDOWN_SUFFIX and p.is_file())


def discover_pages(sources: Sequence[ContentSource]) -> list[Page]:
    """Load every markdown page under each source directory.

    A missing directory contributes no pages. A malformed file aborts the
    whole discovery.
    """
    pages: list[Page] = []
    for source in sources:
        files = _markdown_files(source.source_dir)
        pages.extend(load_page(path, source.kind, source.output_dir) for path in files)
        logger.debug("Discovered %d %s page(s) in %s", len(files), source.kind.value, source.source_dir)
    return pages
