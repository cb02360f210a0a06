"""
Rendering Context

Responsibilities:
- Locates a Chrome/Chromium executable
- Rewrites the built CV page into its compact print layout
- Converts tailored Markdown CVs into styled HTML
- Prints pages to PDF through Playwright

Owns: Browser discovery, print styling, PDF generation
Never: Builds site pages or edits CV data
"""

from folio.contexts.rendering.browser import find_chrome_path
from folio.contexts.rendering.exceptions import (
    BrowserNotFoundError,
    MarkdownSourceNotFoundError,
    RenderedPageNotFoundError,
)
from folio.contexts.rendering.markdown_html import markdown_to_html, strip_npm_banner
from folio.contexts.rendering.pdf import PDFResult, generate_markdown_pdf, generate_page_pdf
from folio.contexts.rendering.print_layout import apply_print_layout

__all__ = [
    "BrowserNotFoundError",
    "MarkdownSourceNotFoundError",
    "PDFResult",
    "RenderedPageNotFoundError",
    "apply_print_layout",
    "find_chrome_path",
    "generate_markdown_pdf",
    "generate_page_pdf",
    "markdown_to_html",
    "strip_npm_banner",
]
