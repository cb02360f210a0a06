"""
RSS Feed Generation

Maps published posts into an RSS 2.0 document. Each item links to the
post's page on the site (/blog/<slug>/).
"""

from typing import Any, Dict, List

from omegaconf import DictConfig

from folio.contexts.content.posts import Post
from folio.contexts.site.renderer import SiteRenderer
from folio.utils.config import site_url
from folio.utils.timestamp import format_rfc822


def feed_items(posts: List[Post], config: DictConfig) -> List[Dict[str, Any]]:
    """Build the per-post values rendered into <item> elements."""
    base = site_url(config)
    return [
        {
            "title": post.frontmatter.title,
            "link": f"{base}/blog/{post.slug}/",
            "description": post.frontmatter.description,
            "pub_date": format_rfc822(post.frontmatter.published_at),
            "tags": post.frontmatter.tags,
        }
        for post in posts
    ]


def build_rss(posts: List[Post], config: DictConfig, renderer: SiteRenderer = None) -> str:
    """
    Render the RSS feed.

    Args:
        posts: Posts to include, in feed order
        config: Site config (site.title, site.description, site.url, site.language)
        renderer: Optional renderer whose template environment to use

    Returns:
        RSS XML document
    """
    renderer = renderer or SiteRenderer(config)
    return renderer.get_template("rss.xml.jinja").render(items=feed_items(posts, config))
