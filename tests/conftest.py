from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from pagesmith.config.settings import SiteSettings

TEMPLATE = textwrap.dedent(
    """\
    <html>
    <nav>
      <a href="{{pathToHome}}">Home</a>
      <a href="{{pathToProjects}}">Projects</a>
      <a href="{{pathToLinks}}">Links</a>
      <a href="{{pathToResume}}">Resume</a>
    </nav>
    <main>{{ content }}</main>
    </html>
    """
)


@pytest.fixture
def template() -> str:
    return TEMPLATE


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """A site directory holding only the shared template."""
    root = tmp_path / "site"
    root.mkdir()
    (root / "template.html").write_text(TEMPLATE, encoding="utf-8")
    return root


@pytest.fixture
def settings(site_root: Path, monkeypatch: pytest.MonkeyPatch) -> SiteSettings:
    for name in ("CONTENT_DIR", "PROJECTS_DIR", "DIST_DIR", "TEMPLATE_PATH", "LINKS_FILE", "RESUME_FILE"):
        monkeypatch.delenv(f"PAGESMITH_{name}", raising=False)
    return SiteSettings.load(site_root)


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """An output root with its ``projects`` subdirectory already created."""
    dist = tmp_path / "dist"
    (dist / "projects").mkdir(parents=True)
    return dist
