"""Tests for markdown rendering."""

import pytest

from pagesmith.markdown.rendering import render_markdown


@pytest.mark.parametrize("content", ["", None])
def test_empty_content_renders_empty(content):
    assert render_markdown(content) == ""


def test_headings_and_paragraphs():
    html = render_markdown("# A\n\nbody")

    assert "<h1>A</h1>" in html
    assert "<p>body</p>" in html


def test_raw_html_passes_through():
    assert '<div class="note">hi</div>' in render_markdown('<div class="note">hi</div>')


def test_tables_are_enabled():
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert "<table>" in html
    assert "<td>1</td>" in html
