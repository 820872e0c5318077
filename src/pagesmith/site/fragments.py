"""Jinja2 loader for the HTML fragments of the listing pages.

Fragments are rendered into the shared page template afterwards, so they hold
only the page body (headings, grids, cards).
"""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, Template


def escape_angle_brackets(text: str) -> str:
    """Escape ``<`` and ``>`` only; other characters pass through untouched."""
    return text.replace("<", "&lt;").replace(">", "&gt;")


class FragmentLoader:
    """Loads and renders listing fragments from the packaged templates directory."""

    def __init__(self, template_dir: Path | None = None) -> None:
        """Initialize FragmentLoader.

        Args:
            template_dir: Path to template directory. Defaults to the
                ``templates`` directory shipped with ``pagesmith.site``.

        """
        if template_dir is None:
            template_dir = Path(str(files("pagesmith.site").joinpath("templates")))

        self.template_dir = template_dir

        # Titles, descriptions and links are emitted verbatim; only code
        # snippets go through escape_angles.
        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )
        self.env.filters["escape_angles"] = escape_angle_brackets

    def load_template(self, template_name: str) -> Template:
        """Load a fragment by name (e.g. ``"projects.html.jinja2"``).

        Raises:
            TemplateNotFound: If the fragment does not exist.

        """
        return self.env.get_template(template_name)

    def render(self, template_name: str, **context: Any) -> str:
        return self.load_template(template_name).render(**context)
