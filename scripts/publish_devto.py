#!/usr/bin/env python3
"""
Cross-post a blog post to DEV.to

Publishes src/content/blog/<slug>.md to DEV.to with a canonical link back to
the site. Posts already marked crosspost.devTo.published are skipped.

Environment:
    DEVTO_API_KEY - API key from https://dev.to/settings/extensions

Examples:\n

    publish_devto.py hello-world                        # Publish and print the frontmatter to add

    publish_devto.py hello-world --update-frontmatter   # Publish and record it in the post
"""

import os
from pathlib import Path

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.content import InvalidFrontmatterError, PostNotFoundError
from folio.contexts.crosspost import DevToAPIError, MissingCredentialError, publish_post
from folio.contexts.crosspost.logger import setup_crosspost_logger
from folio.utils.config import BLOG_CONTENT_PATH, LOGS_PATH, load_site_config, site_url
from folio.utils.logger import session_log_dir

load_dotenv()

app = typer.Typer(help="Cross-post a blog post to DEV.to", add_completion=False)


@app.command()
def main(
    slug: Annotated[
        str,
        typer.Argument(help="Post slug (file name without .md)"),
    ],
    update_frontmatter: Annotated[
        bool,
        typer.Option("--update-frontmatter", help="Write the DEV.to id and URL back into the post"),
    ] = False,
    content_dir: Annotated[
        Path,
        typer.Option("--content", help="Blog content directory"),
    ] = BLOG_CONTENT_PATH,
):
    """Publish a post to DEV.to."""
    api_key = os.getenv("DEVTO_API_KEY")
    if not api_key:
        typer.secho(
            "Error: DEVTO_API_KEY environment variable is required", fg=typer.colors.RED, err=True
        )
        typer.echo("Get your API key from https://dev.to/settings/extensions", err=True)
        raise typer.Exit(code=1)

    setup_crosspost_logger(session_log_dir(LOGS_PATH, "publish_devto"), slug)
    config = load_site_config()

    try:
        result = publish_post(
            slug,
            api_key,
            content_dir,
            site_url(config),
            update_frontmatter=update_frontmatter,
        )
    except (MissingCredentialError, PostNotFoundError, InvalidFrontmatterError, DevToAPIError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if result.skipped:
        typer.secho("This post is already published to DEV.to", fg=typer.colors.YELLOW, bold=True)
        typer.echo(f"  URL: {result.existing_url}")
        raise typer.Exit(code=0)

    article = result.article
    typer.secho("\n✓ Published to DEV.to", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  ID: {article.id}")
    typer.echo(f"  URL: {article.url}")
    typer.echo("")

    if update_frontmatter:
        typer.echo("Frontmatter updated with the DEV.to article.")
    else:
        typer.echo("Next steps:")
        typer.echo("1. Update your blog post frontmatter with:\n")
        typer.echo("crosspost:")
        typer.echo("  devTo:")
        typer.echo("    published: true")
        typer.echo(f"    id: {article.id}")
        typer.echo(f"    url: {article.url}\n")
        typer.echo("   (or rerun with --update-frontmatter next time)")

    typer.echo("\nFor Medium, import manually from:")
    typer.echo(f"  {result.canonical_url}")
    typer.echo("  Go to: https://medium.com/p/import")


if __name__ == "__main__":
    app()
