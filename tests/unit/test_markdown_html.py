"""Unit tests for the tailored CV Markdown conversion."""

import pytest

from folio.contexts.rendering import markdown_to_html, strip_npm_banner
from folio.contexts.rendering.markdown_html import convert_markdown


@pytest.mark.unit
def test_strip_npm_banner():
    """Test removal of the lines npm adds to redirected script output."""
    text = "\n> folio@1.0.0 cv:markdown\n> tsx scripts/export-markdown.ts\n\n# Ada Example\n"
    assert strip_npm_banner(text) == "# Ada Example\n"


@pytest.mark.unit
def test_strip_npm_banner_keeps_quotes():
    text = "# Ada\n\n> A quote in the summary\n"
    assert strip_npm_banner(text) == text


@pytest.mark.unit
def test_headings_and_paragraphs():
    html = convert_markdown("# Ada Example\n**Senior Engineer**\n\n## Summary\n\nBuilds things.")

    assert "<h1>Ada Example</h1>" in html
    # Lines that already start with a tag are not wrapped
    assert "<strong>Senior Engineer</strong>" in html
    assert "<p><strong>" not in html
    assert "<h2>Summary</h2>" in html
    assert "<p>Builds things.</p>" in html


@pytest.mark.unit
def test_labels_and_italics():
    html = convert_markdown("**Frontend:** React, TypeScript\n\n*Remote | Mar 2022 - Present*")

    assert '<strong class="label">Frontend:</strong> React, TypeScript' in html
    assert "<em>Remote | Mar 2022 - Present</em>" in html


@pytest.mark.unit
def test_list_items_wrapped():
    html = convert_markdown("**Key Achievements:**\n- First\n- Second\n\nAfter")

    assert "<ul><li>First</li>\n<li>Second</li>\n</ul>" in html
    assert "<p>After</p>" in html


@pytest.mark.unit
def test_escapes_html():
    html = convert_markdown("R&D <team>")
    assert html == "<p>R&amp;D &lt;team&gt;</p>"


@pytest.mark.unit
def test_collapses_blank_lines():
    assert "\n\n\n" not in convert_markdown("# A\n\n\n\n\nB")


@pytest.mark.unit
def test_full_document():
    html = markdown_to_html("# Ada Example")

    assert html.startswith("<!DOCTYPE html>")
    assert "<h1>Ada Example</h1>" in html
    assert "color: #B36B47;" in html
    assert "font-size: 9pt;" in html
