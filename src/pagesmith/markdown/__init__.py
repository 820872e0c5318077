"""Markdown collaborators: front matter parsing and HTML rendering."""

from pagesmith.markdown.frontmatter import parse_frontmatter, parse_frontmatter_file
from pagesmith.markdown.rendering import render_markdown

__all__ = [
    "parse_frontmatter",
    "parse_frontmatter_file",
    "render_markdown",
]
