"""Tests for placeholder substitution into the shared page template."""

from pathlib import Path, PureWindowsPath

import pytest

from pagesmith.site.template import CONTENT_TOKEN, relative_link, render_template
from tests.helpers.sources import PLACEHOLDERS

DIST = Path("/srv/site/dist")


def test_render_replaces_every_placeholder(template):
    html = render_template(template, "<p>hello</p>", DIST / "a.html", DIST)

    for token in PLACEHOLDERS:
        assert token not in html
    assert "<main><p>hello</p></main>" in html
    assert 'href="index.html"' in html
    assert 'href="projects.html"' in html
    assert 'href="links.html"' in html
    assert 'href="resume.html"' in html


def test_render_nested_page_points_up_one_level(template):
    html = render_template(template, "", DIST / "projects" / "b.html", DIST)

    assert 'href="../index.html"' in html
    assert 'href="../projects.html"' in html
    assert 'href="../links.html"' in html
    assert 'href="../resume.html"' in html


def test_render_replaces_content_placeholder_once():
    template = f"{CONTENT_TOKEN}|{CONTENT_TOKEN}"

    assert render_template(template, "X", DIST / "a.html", DIST) == f"X|{CONTENT_TOKEN}"


def test_render_replaces_every_nav_occurrence():
    template = "{{pathToHome}} {{pathToHome}}"

    assert render_template(template, "", DIST / "projects" / "p.html", DIST) == "../index.html ../index.html"


def test_render_without_content_placeholder_drops_content():
    html = render_template("<nav>{{pathToHome}}</nav>", "<p>lost</p>", DIST / "a.html", DIST)

    assert html == "<nav>index.html</nav>"


def test_render_does_not_touch_the_template(template):
    original = str(template)
    render_template(template, "<p>x</p>", DIST / "a.html", DIST)

    assert template == original


@pytest.mark.parametrize(
    ("target", "start_dir", "expected"),
    [
        (DIST / "index.html", DIST, "index.html"),
        (DIST / "index.html", DIST / "projects", "../index.html"),
        (DIST / "projects" / "b.html", DIST, "projects/b.html"),
    ],
)
def test_relative_link_uses_forward_slashes(target, start_dir, expected):
    assert relative_link(target, start_dir) == expected


def test_relative_link_normalizes_backslashes(monkeypatch):
    monkeypatch.setattr(
        "pagesmith.site.template.os.path.relpath",
        lambda target, start: str(PureWindowsPath("projects") / "b.html"),
    )

    assert relative_link(DIST / "projects" / "b.html", DIST) == "projects/b.html"


def test_relative_link_falls_back_to_file_name_when_empty(monkeypatch):
    monkeypatch.setattr("pagesmith.site.template.os.path.relpath", lambda target, start: "")

    assert relative_link(DIST / "resume.html", DIST) == "resume.html"
