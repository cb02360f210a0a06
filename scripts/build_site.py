#!/usr/bin/env python3
"""
Build the static site

Renders the CV page, blog pages and RSS feed into the dist directory.

Examples:\n

    build_site.py                       # Build into dist/

    build_site.py --dist /tmp/site      # Build elsewhere

    build_site.py --drafts              # Preview drafts too (never in the feed)
"""

from pathlib import Path

import typer
from typing_extensions import Annotated

from folio.contexts.content import InvalidFrontmatterError, load_posts
from folio.contexts.cv import CVNotFoundError, InvalidCVStructureError, load_cv
from folio.contexts.site import SiteRenderer, build_site
from folio.contexts.site.logger import setup_site_logger
from folio.utils.config import BLOG_CONTENT_PATH, CV_JSON_PATH, DIST_PATH, LOGS_PATH, load_site_config
from folio.utils.logger import session_log_dir

app = typer.Typer(help="Build the static site into the dist directory", add_completion=False)


@app.command()
def main(
    dist_dir: Annotated[
        Path,
        typer.Option("--dist", "-d", help="Output directory"),
    ] = DIST_PATH,
    cv_path: Annotated[
        Path,
        typer.Option("--cv", help="CV JSON document"),
    ] = CV_JSON_PATH,
    content_dir: Annotated[
        Path,
        typer.Option("--content", help="Blog content directory"),
    ] = BLOG_CONTENT_PATH,
    drafts: Annotated[
        bool,
        typer.Option("--drafts", help="Render draft posts as pages"),
    ] = False,
):
    """Build every page of the site."""
    log_file = setup_site_logger(session_log_dir(LOGS_PATH, "build_site"), dist_dir)
    config = load_site_config()

    try:
        cv = load_cv(cv_path)
        posts = load_posts(content_dir, include_drafts=drafts)
    except (CVNotFoundError, InvalidCVStructureError, InvalidFrontmatterError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    result = build_site(cv, posts, dist_dir, config, renderer=SiteRenderer(config))

    typer.secho(f"\n✓ Built {len(result.written)} files", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Posts: {result.post_count}")
    typer.echo(f"  Output: {dist_dir}")
    typer.echo(f"  Log: {log_file}")


if __name__ == "__main__":
    app()
