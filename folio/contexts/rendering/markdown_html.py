"""
Tailored CV Conversion

Converts a hand-edited Markdown CV (usually an edited export_markdown.py
output) into a compact, styled HTML page ready for printing.

The conversion is line-oriented and handles only what the Markdown exporter
produces: headings, bold labels, bold and italic text, and bullet lists.
"""

import re
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from markupsafe import Markup

from folio.contexts.rendering.print_layout import COLORS

TEMPLATES_PATH = Path(__file__).parent / "templates"

# Lines npm prepends when a CV export is redirected to a file
NPM_BANNER_PATTERNS = [
    re.compile(r"^>\s+\S+@[\d.]+\s+\S+\n", re.MULTILINE),
    re.compile(r"^>\s+tsx\s+\S+\n", re.MULTILINE),
]

HEADING_PATTERNS = [
    (re.compile(r"^# (.+)$", re.MULTILINE), r"<h1>\1</h1>"),
    (re.compile(r"^## (.+)$", re.MULTILINE), r"<h2>\1</h2>"),
    (re.compile(r"^### (.+)$", re.MULTILINE), r"<h3>\1</h3>"),
]

LABEL_PATTERN = re.compile(r"\*\*([^*]+):\*\*")
BOLD_PATTERN = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_PATTERN = re.compile(r"\*([^*]+)\*")
LIST_ITEM_PATTERN = re.compile(r"^- (.+)$", re.MULTILINE)
LIST_RUN_PATTERN = re.compile(r"(<li>.*?</li>\n?)+")
BLANK_RUN_PATTERN = re.compile(r"\n{3,}")


def strip_npm_banner(markdown: str) -> str:
    """Remove npm script banner lines and leading blank lines."""
    for pattern in NPM_BANNER_PATTERNS:
        markdown = pattern.sub("", markdown)
    return re.sub(r"^\n+", "", markdown)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def convert_markdown(markdown: str) -> str:
    """
    Convert Markdown CV text to an HTML fragment.

    Args:
        markdown: CV Markdown

    Returns:
        HTML body content
    """
    html = _escape(markdown)

    for pattern, replacement in HEADING_PATTERNS:
        html = pattern.sub(replacement, html)

    # Labels like **Frontend:** get the accent colour
    html = LABEL_PATTERN.sub(r'<strong class="label">\1:</strong>', html)
    html = BOLD_PATTERN.sub(r"<strong>\1</strong>", html)
    html = ITALIC_PATTERN.sub(r"<em>\1</em>", html)

    html = LIST_ITEM_PATTERN.sub(r"<li>\1</li>", html)
    html = LIST_RUN_PATTERN.sub(lambda match: f"<ul>{match.group(0)}</ul>", html)

    lines = []
    for line in html.split("\n"):
        stripped = line.strip()
        if not stripped:
            lines.append("")
        elif stripped.startswith("<"):
            lines.append(line)
        else:
            lines.append(f"<p>{stripped}</p>")

    return BLANK_RUN_PATTERN.sub("\n\n", "\n".join(lines))


def markdown_to_html(markdown: str, templates_path: Path = None) -> str:
    """
    Convert Markdown CV text to a complete, styled HTML document.

    Args:
        markdown: CV Markdown
        templates_path: Template directory (defaults to the bundled templates)

    Returns:
        HTML document
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_path or TEMPLATES_PATH)),
        undefined=StrictUndefined,
        autoescape=False,
    )
    template = env.get_template("tailored_cv.html.jinja")
    return template.render(body=Markup(convert_markdown(markdown)), colors=COLORS)
