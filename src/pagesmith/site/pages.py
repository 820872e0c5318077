"""Data primitives for discovered content."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any


class PageKind(str, Enum):
    """Kind of content a page was discovered as."""

    POST = "post"
    PROJECT = "project"


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(_as_text(tag) for tag in value)
    return (_as_text(value),)


@dataclass(frozen=True, slots=True)
class PageMetadata:
    """Recognised front matter keys, with defaults for anything missing.

    Keys the site does not use are kept in ``extra``.
    """

    title: str | None = None
    description: str = ""
    tags: tuple[str, ...] = ()
    code_snippet: str = ""
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> PageMetadata:
        known = {"title", "description", "tags", "codeSnippet"}
        title = data.get("title")
        return cls(
            title=_as_text(title) if title else None,
            description=_as_text(data.get("description")),
            tags=_as_tags(data.get("tags")),
            code_snippet=_as_text(data.get("codeSnippet")),
            extra=MappingProxyType({k: v for k, v in data.items() if k not in known}),
        )


@dataclass(frozen=True, slots=True)
class Page:
    """One discovered post or project."""

    kind: PageKind
    output_path: Path
    source_path: Path
    metadata: PageMetadata
    body: str
    title: str


@dataclass(frozen=True, slots=True)
class ContentSource:
    """A source directory and the output directory its pages land in."""

    kind: PageKind
    source_dir: Path
    output_dir: Path


@dataclass(frozen=True, slots=True)
class LinkEntry:
    """One card on the links page."""

    title: str = ""
    url: str = ""
    icon: str = ""
    description: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> LinkEntry:
        return cls(
            title=_as_text(data.get("title")),
            url=_as_text(data.get("url")),
            icon=_as_text(data.get("icon")),
            description=_as_text(data.get("description")),
        )
