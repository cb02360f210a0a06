#!/usr/bin/env python3
"""
Export the CV as LinkedIn profile text

Prints copy-paste ready text for each LinkedIn profile section, with
character-limit warnings on stderr.

Sections: headline, about (alias: summary), experience, skills, education

Examples:\n

    export_linkedin.py                 # All sections

    export_linkedin.py headline        # Headline only

    export_linkedin.py experience      # Experience entries only
"""

from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from folio.contexts.cv import CVNotFoundError, InvalidCVStructureError, export_to_linkedin, load_cv
from folio.contexts.cv.linkedin_exporter import SECTIONS
from folio.contexts.cv.logger import setup_cv_logger
from folio.utils.config import CV_JSON_PATH, LOGS_PATH, load_site_config
from folio.utils.logger import session_log_dir

app = typer.Typer(help="Export the CV as LinkedIn profile text", add_completion=False)


@app.command()
def main(
    section: Annotated[
        Optional[str],
        typer.Argument(help=f"Section to export ({', '.join(SECTIONS)}); all when omitted"),
    ] = None,
    cv_path: Annotated[
        Path,
        typer.Option("--cv", help="CV JSON document"),
    ] = CV_JSON_PATH,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="Site config YAML (LinkedIn headline and about layout)"),
    ] = None,
):
    """Print LinkedIn-formatted CV text."""
    section = section.lower() if section else None
    if section is not None and section not in SECTIONS:
        raise typer.BadParameter(
            f"Unknown section '{section}'. Choose from: {', '.join(SECTIONS)}",
            param_hint="SECTION",
        )

    setup_cv_logger(session_log_dir(LOGS_PATH, "export_linkedin"), cv_path)

    try:
        cv = load_cv(cv_path)
    except (CVNotFoundError, InvalidCVStructureError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(export_to_linkedin(cv, load_site_config(config_path), section=section))


if __name__ == "__main__":
    app()
