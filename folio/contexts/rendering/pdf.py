"""
PDF Generation Module

Prints the built CV page, or a tailored Markdown CV, to PDF with headless
Chrome driven by Playwright.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from folio.contexts.rendering.browser import CHROME_ARGS, find_chrome_path
from folio.contexts.rendering.exceptions import MarkdownSourceNotFoundError, RenderedPageNotFoundError
from folio.contexts.rendering.logger import _log_debug, log_pdf_result, log_pdf_start
from folio.contexts.rendering.markdown_html import markdown_to_html, strip_npm_banner
from folio.contexts.rendering.print_layout import apply_print_layout

# Letter paper, tight margins to fit the CV on two pages
PDF_FORMAT = "Letter"
PDF_MARGINS = {"top": "0.3in", "right": "0.4in", "bottom": "0.3in", "left": "0.4in"}
PAGE_SCALE = 0.85
TAILORED_SCALE = 0.9

LOAD_TIMEOUT_MS = 30000
# Settle time after switching to print media
PRINT_SETTLE_MS = 500


@dataclass
class PDFResult:
    """
    Result of PDF generation.

    Attributes:
        success: Whether the PDF was written
        pdf_path: Path to generated PDF (None if failed)
        size_kb: Size of the generated PDF in KB
        errors: Browser errors raised while printing
    """

    success: bool
    pdf_path: Optional[Path] = None
    size_kb: float = 0.0
    errors: List[str] = field(default_factory=list)


def _wait_for_fonts(page: Page) -> None:
    page.evaluate("() => document.fonts.ready.then(() => true)")


def _print_to_pdf(page: Page, output_path: Path, scale: float) -> None:
    page.pdf(
        path=str(output_path),
        format=PDF_FORMAT,
        margin=PDF_MARGINS,
        print_background=True,
        display_header_footer=False,
        scale=scale,
    )


def _finish(output_path: Path, started: float, errors: List[str]) -> PDFResult:
    if errors or not output_path.exists():
        result = PDFResult(success=False, errors=errors or [f"No PDF written to {output_path}"])
    else:
        result = PDFResult(
            success=True,
            pdf_path=output_path,
            size_kb=output_path.stat().st_size / 1024,
        )
    log_pdf_result(result, time.time() - started)
    return result


def print_layout_path(html_path: Path) -> Path:
    """Path of the print-layout copy written next to the built page."""
    return html_path.with_name(f"{html_path.stem}.print{html_path.suffix}")


def generate_page_pdf(
    html_path: Path,
    output_path: Path,
    chrome_path: Optional[Path] = None,
    max_experience: int = 6,
) -> PDFResult:
    """
    Print the built CV page to PDF.

    The page is rewritten with the print layout and saved next to the
    original so relative assets still resolve, then loaded via file://.

    Args:
        html_path: Built CV page (e.g., dist/cv/index.html)
        output_path: PDF destination
        chrome_path: Browser executable (defaults to find_chrome_path())
        max_experience: Number of experience entries kept in print

    Returns:
        PDFResult with success status and output details

    Raises:
        RenderedPageNotFoundError: If html_path does not exist
        BrowserNotFoundError: If no browser is given or found
    """
    html_path = Path(html_path)
    output_path = Path(output_path)
    if not html_path.exists():
        raise RenderedPageNotFoundError(html_path)

    chrome_path = chrome_path or find_chrome_path()
    log_pdf_start(html_path, chrome_path)
    started = time.time()

    print_html = apply_print_layout(html_path.read_text(encoding="utf-8"), max_experience=max_experience)
    print_path = print_layout_path(html_path)
    print_path.write_text(print_html, encoding="utf-8")
    _log_debug(f"Print layout written to {print_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    errors = []
    browser = None
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(
                executable_path=str(chrome_path), headless=True, args=CHROME_ARGS
            )
            page = browser.new_page()
            page.goto(print_path.resolve().as_uri(), wait_until="networkidle", timeout=LOAD_TIMEOUT_MS)
            _wait_for_fonts(page)
            page.emulate_media(media="print")
            page.wait_for_timeout(PRINT_SETTLE_MS)
            _print_to_pdf(page, output_path, PAGE_SCALE)
        except PlaywrightError as e:
            errors.append(str(e))
        finally:
            if browser is not None:
                browser.close()

    return _finish(output_path, started, errors)


def default_markdown_output(markdown_path: Path) -> Path:
    """Default PDF path for a Markdown CV: same location, .pdf suffix."""
    return Path(markdown_path).with_suffix(".pdf")


def generate_markdown_pdf(
    markdown_path: Path,
    output_path: Optional[Path] = None,
    chrome_path: Optional[Path] = None,
) -> PDFResult:
    """
    Print a tailored Markdown CV to PDF.

    Args:
        markdown_path: Markdown CV
        output_path: PDF destination (defaults to markdown_path with .pdf)
        chrome_path: Browser executable (defaults to find_chrome_path())

    Returns:
        PDFResult with success status and output details

    Raises:
        MarkdownSourceNotFoundError: If markdown_path does not exist
        BrowserNotFoundError: If no browser is given or found
    """
    markdown_path = Path(markdown_path)
    if not markdown_path.exists():
        raise MarkdownSourceNotFoundError(markdown_path)
    output_path = Path(output_path) if output_path else default_markdown_output(markdown_path)

    markdown = strip_npm_banner(markdown_path.read_text(encoding="utf-8"))
    html = markdown_to_html(markdown)

    chrome_path = chrome_path or find_chrome_path()
    log_pdf_start(markdown_path, chrome_path)
    started = time.time()

    output_path.parent.mkdir(parents=True, exist_ok=True)
    errors = []
    browser = None
    with sync_playwright() as playwright:
        try:
            browser = playwright.chromium.launch(
                executable_path=str(chrome_path), headless=True, args=CHROME_ARGS
            )
            page = browser.new_page()
            page.set_content(html, wait_until="networkidle", timeout=LOAD_TIMEOUT_MS)
            _wait_for_fonts(page)
            _print_to_pdf(page, output_path, TAILORED_SCALE)
        except PlaywrightError as e:
            errors.append(str(e))
        finally:
            if browser is not None:
                browser.close()

    return _finish(output_path, started, errors)
