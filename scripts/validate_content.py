#!/usr/bin/env python3
"""
Validate site content

Checks every blog post's frontmatter against the blog schema and the CV JSON
against the CV document structure. Reports every problem found and exits
with code 1 if there is any.

Examples:\n

    validate_content.py

    validate_content.py --content drafts/ --cv tmp/cv.json
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from folio.contexts.content import InvalidFrontmatterError, load_post
from folio.contexts.content.posts import list_post_files
from folio.contexts.cv import CVNotFoundError, InvalidCVStructureError, load_cv
from folio.utils.config import BLOG_CONTENT_PATH, CV_JSON_PATH

app = typer.Typer(help="Validate blog frontmatter and the CV document", add_completion=False)


@app.command()
def main(
    cv_path: Annotated[
        Path,
        typer.Option("--cv", help="CV JSON document"),
    ] = CV_JSON_PATH,
    content_dir: Annotated[
        Path,
        typer.Option("--content", help="Blog content directory"),
    ] = BLOG_CONTENT_PATH,
):
    """Validate posts and the CV, listing every failure."""
    failures = 0

    post_files = list_post_files(content_dir)
    typer.secho(f"\nPosts ({len(post_files)})", fg=typer.colors.BLUE, bold=True)
    for path in post_files:
        try:
            load_post(path)
        except InvalidFrontmatterError as e:
            failures += 1
            typer.secho(f"  ✗ {path.name}", fg=typer.colors.RED)
            for problem in e.problems:
                typer.echo(f"      - {problem}")
        else:
            typer.secho(f"  ✓ {path.name}", fg=typer.colors.GREEN)

    typer.secho("\nCV", fg=typer.colors.BLUE, bold=True)
    try:
        load_cv(cv_path)
    except CVNotFoundError as e:
        failures += 1
        typer.secho(f"  ✗ {e}", fg=typer.colors.RED)
    except InvalidCVStructureError as e:
        failures += 1
        typer.secho(f"  ✗ {cv_path.name}", fg=typer.colors.RED)
        for problem in e.problems:
            typer.echo(f"      - {problem}")
    else:
        typer.secho(f"  ✓ {cv_path.name}", fg=typer.colors.GREEN)

    typer.echo("")
    if failures:
        typer.secho(f"{failures} file(s) failed validation", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(code=1)

    typer.secho("All content is valid", fg=typer.colors.GREEN, bold=True)


if __name__ == "__main__":
    app()
