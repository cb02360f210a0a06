#!/usr/bin/env python3
"""
Export the CV to Markdown

Writes the CV as Markdown to stdout, ready to be redirected to a file,
tailored by hand or with an LLM, and printed with generate_pdf.py tailored.

Examples:\n

    export_markdown.py > cv.md                              # Public entries only

    export_markdown.py --include-hidden > full-cv.md        # Every entry

    export_markdown.py --audience fintech > fintech-cv.md   # Public + fintech entries
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folio.contexts.cv import CVNotFoundError, InvalidCVStructureError, export_to_markdown, load_cv
from folio.contexts.cv.logger import setup_cv_logger
from folio.utils.config import CV_JSON_PATH, LOGS_PATH
from folio.utils.logger import session_log_dir

app = typer.Typer(help="Export the CV to Markdown on stdout", add_completion=False)


@app.command()
def main(
    include_hidden: Annotated[
        bool,
        typer.Option("--include-hidden", help="Include entries with visibility 'hidden'"),
    ] = False,
    audience: Annotated[
        Optional[str],
        typer.Option("--audience", "-a", help="Also include entries tagged for this audience"),
    ] = None,
    cv_path: Annotated[
        Path,
        typer.Option("--cv", help="CV JSON document"),
    ] = CV_JSON_PATH,
):
    """Print the CV as Markdown."""
    setup_cv_logger(session_log_dir(LOGS_PATH, "export_markdown"), cv_path)

    try:
        cv = load_cv(cv_path)
    except (CVNotFoundError, InvalidCVStructureError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(export_to_markdown(cv, include_hidden=include_hidden, audience=audience), nl=False)


if __name__ == "__main__":
    app()
