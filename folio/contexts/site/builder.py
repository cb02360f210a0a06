"""
Site Builder

Writes every rendered page of the site under the dist directory.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from omegaconf import DictConfig

from folio.contexts.content.posts import Post
from folio.contexts.cv.cv_data_structure import CVData
from folio.contexts.site.logger import _log_debug, _log_info
from folio.contexts.site.renderer import SiteRenderer
from folio.contexts.site.rss import build_rss


@dataclass
class BuildResult:
    """
    Result of a site build.

    Attributes:
        written: Files written under the dist directory
        post_count: Number of posts rendered
    """

    written: List[Path] = field(default_factory=list)
    post_count: int = 0


def _write(path: Path, content: str, result: BuildResult) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    result.written.append(path)
    _log_debug(f"Wrote {path}")


def build_site(
    cv: Optional[CVData],
    posts: List[Post],
    dist_dir: Path,
    config: DictConfig,
    renderer: SiteRenderer = None,
) -> BuildResult:
    """
    Write the CV page, blog pages and RSS feed under dist_dir.

    Layout:
        cv/index.html
        blog/index.html
        blog/<slug>/index.html
        rss.xml

    Args:
        cv: CV document, or None to skip the CV page
        posts: Posts to render, newest first (drafts are left out of the feed)
        dist_dir: Output directory
        config: Site config
        renderer: Optional pre-built renderer

    Returns:
        BuildResult listing written files
    """
    renderer = renderer or SiteRenderer(config)
    result = BuildResult(post_count=len(posts))

    if cv is not None:
        _write(dist_dir / "cv" / "index.html", renderer.render_cv_page(cv), result)

    _write(dist_dir / "blog" / "index.html", renderer.render_blog_index(posts), result)
    for post in posts:
        _write(dist_dir / "blog" / post.slug / "index.html", renderer.render_post_page(post), result)

    # Drafts may be previewed as pages but never go out in the feed
    feed_posts = [p for p in posts if not p.frontmatter.draft]
    _write(dist_dir / "rss.xml", build_rss(feed_posts, config, renderer), result)

    _log_info(f"Built {len(result.written)} files ({result.post_count} posts) in {dist_dir}")
    return result
