#!/usr/bin/env python3
"""
CV PDF Generation CLI

Prints the CV to PDF with headless Chrome (via Playwright).

Commands:
    page     - Print the built CV page (dist/cv/index.html) with the compact print layout
    tailored - Print a hand-tailored Markdown CV

Workflow for tailored CVs:\n

    1. export_markdown.py > tailored-cv.md

    2. Edit tailored-cv.md for the job (by hand or with an LLM)

    3. generate_pdf.py tailored tailored-cv.md

Examples:\n

    generate_pdf.py page                                       # dist/cv/index.html -> dist/cv.pdf

    generate_pdf.py tailored tailored-cv.md                    # -> tailored-cv.pdf

    generate_pdf.py tailored tailored-cv.md cv-for-acme.pdf    # Explicit output
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folio.contexts.rendering import (
    BrowserNotFoundError,
    MarkdownSourceNotFoundError,
    PDFResult,
    RenderedPageNotFoundError,
    generate_markdown_pdf,
    generate_page_pdf,
)
from folio.contexts.rendering.logger import setup_rendering_logger
from folio.utils.config import DIST_PATH, LOGS_PATH, PROJECT_ROOT, load_site_config
from folio.utils.logger import session_log_dir


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(path.resolve().relative_to(PROJECT_ROOT.resolve()))
    except ValueError:
        return str(path)


def report(result: PDFResult, log_file: Path) -> None:
    """Print a PDF result and exit with the matching code."""
    typer.echo("")
    if result.success:
        typer.secho("✓ PDF generated successfully", fg=typer.colors.GREEN, bold=True)
        typer.echo(f"  Output: {display_path(result.pdf_path)}")
        typer.echo(f"  Size: {result.size_kb:.1f} KB")
    else:
        typer.secho("✗ PDF generation failed", fg=typer.colors.RED, bold=True)
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)
    typer.echo(f"  Log: {display_path(log_file)}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


app = typer.Typer(
    help="Print the CV to PDF with headless Chrome",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("page")
def page_command(
    html_path: Annotated[
        Path,
        typer.Option("--html", help="Built CV page"),
    ] = DIST_PATH / "cv" / "index.html",
    output_path: Annotated[
        Path,
        typer.Option("--output", "-o", help="PDF destination"),
    ] = DIST_PATH / "cv.pdf",
    max_experience: Annotated[
        Optional[int],
        typer.Option("--max-experience", help="Experience entries kept in print (default from site config)", min=1),
    ] = None,
):
    """
    Print the built CV page to PDF.

    Build the site first (build_site.py) so the page exists.

    Examples:\n

        $ generate_pdf.py page

        $ generate_pdf.py page --output cv.pdf --max-experience 4
    """
    if max_experience is None:
        max_experience = load_site_config().cv.print_max_experience

    log_file = setup_rendering_logger(session_log_dir(LOGS_PATH, "generate_pdf"))
    typer.secho(f"\nGenerating CV PDF from {display_path(html_path)}", fg=typer.colors.BLUE, bold=True)

    try:
        result = generate_page_pdf(html_path, output_path, max_experience=max_experience)
    except (RenderedPageNotFoundError, BrowserNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report(result, log_file)


@app.command("tailored")
def tailored_command(
    markdown_path: Annotated[
        Path,
        typer.Argument(help="Tailored Markdown CV"),
    ],
    output_path: Annotated[
        Optional[Path],
        typer.Argument(help="PDF destination (defaults to the Markdown path with .pdf)"),
    ] = None,
):
    """
    Print a tailored Markdown CV to PDF.

    Examples:\n

        $ generate_pdf.py tailored tailored-cv.md

        $ generate_pdf.py tailored tailored-cv.md my-cv-for-google.pdf
    """
    log_file = setup_rendering_logger(session_log_dir(LOGS_PATH, "generate_pdf_tailored"))
    typer.secho(f"\nGenerating tailored CV PDF from {display_path(markdown_path)}", fg=typer.colors.BLUE, bold=True)

    try:
        result = generate_markdown_pdf(markdown_path.resolve(), output_path.resolve() if output_path else None)
    except (MarkdownSourceNotFoundError, BrowserNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    report(result, log_file)


if __name__ == "__main__":
    app()
