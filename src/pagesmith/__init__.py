"""Pagesmith: static HTML pages from a small tree of markdown sources."""

from pagesmith.site.builder import BuildReport, build_site

__version__ = "1.0.0"
__all__ = [
    "BuildReport",
    "build_site",
]
