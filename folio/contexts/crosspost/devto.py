"""
DEV.to Cross-Posting

Publishes blog posts to DEV.to through its articles API, with a canonical
link back to the post on the site.

API key: https://dev.to/settings/extensions
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import requests
from dotenv import load_dotenv

from folio.contexts.content.posts import Post, find_post
from folio.contexts.content.posts import update_frontmatter as write_frontmatter
from folio.contexts.crosspost.exceptions import DevToAPIError, MissingCredentialError
from folio.contexts.crosspost.logger import _log_debug, _log_info, _log_success, _log_warning

load_dotenv()

DEVTO_API_URL = os.getenv("DEVTO_API_URL", "https://dev.to/api/articles")
DEVTO_KEY_HELP_URL = "https://dev.to/settings/extensions"

# DEV.to rejects articles with more than 4 tags
MAX_TAGS = 4
REQUEST_TIMEOUT = 30


@dataclass
class DevToArticle:
    """Article as returned by DEV.to after creation."""

    id: int
    url: str
    title: str
    published: bool


@dataclass
class PublishResult:
    """
    Outcome of publish_post.

    Attributes:
        skipped: Post was already published, nothing was sent
        canonical_url: Canonical URL sent (or that would have been sent)
        article: Created article (None when skipped)
        existing_url: DEV.to URL recorded in the frontmatter when skipped
    """

    skipped: bool
    canonical_url: str
    article: Optional[DevToArticle] = None
    existing_url: Optional[str] = None


def post_canonical_url(post: Post, site_url: str) -> str:
    return post.frontmatter.canonical_url or f"{site_url.rstrip('/')}/blog/{post.slug}"


def build_article(post: Post, site_url: str) -> Dict[str, Any]:
    """
    Build the DEV.to article payload for a post.

    Drafts are created unpublished on DEV.to as well.
    """
    fm = post.frontmatter
    return {
        "title": fm.title,
        "body_markdown": post.body,
        "published": not fm.draft,
        "tags": fm.tags[:MAX_TAGS],
        "canonical_url": post_canonical_url(post, site_url),
        "description": fm.description,
    }


class DevToClient:
    """Minimal client for the DEV.to articles endpoint."""

    def __init__(self, api_key: str, api_url: str = DEVTO_API_URL, session: requests.Session = None):
        if not api_key:
            raise MissingCredentialError("DEVTO_API_KEY", DEVTO_KEY_HELP_URL)

        self.api_url = api_url
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json", "api-key": api_key})

    def create_article(self, article: Dict[str, Any]) -> DevToArticle:
        """
        Create an article.

        Raises:
            DevToAPIError: If DEV.to answers with a non-2xx status
        """
        response = self.session.post(self.api_url, json={"article": article}, timeout=REQUEST_TIMEOUT)

        if not 200 <= response.status_code < 300:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            raise DevToAPIError(response.status_code, body)

        data = response.json()
        return DevToArticle(
            id=data["id"],
            url=data["url"],
            title=data.get("title", article["title"]),
            published=data.get("published", article["published"]),
        )


def publish_post(
    slug: str,
    api_key: Optional[str],
    content_dir: Path,
    site_url: str,
    client: DevToClient = None,
    update_frontmatter: bool = False,
) -> PublishResult:
    """
    Publish a blog post to DEV.to.

    Args:
        slug: Post slug (file stem in content_dir)
        api_key: DEV.to API key
        content_dir: Blog content directory
        site_url: Site origin used for the default canonical URL
        client: Client to use (built from api_key when omitted)
        update_frontmatter: Record the created article in the post's frontmatter

    Returns:
        PublishResult

    Raises:
        MissingCredentialError: If api_key is empty (checked before any I/O)
        PostNotFoundError: If the post does not exist
        DevToAPIError: If DEV.to rejects the article
    """
    if not api_key:
        raise MissingCredentialError("DEVTO_API_KEY", DEVTO_KEY_HELP_URL)

    post = find_post(slug, content_dir)
    canonical_url = post_canonical_url(post, site_url)

    if post.frontmatter.devto_published:
        existing = post.frontmatter.crosspost.dev_to
        _log_warning(f"'{slug}' is already published to DEV.to: {existing.url}")
        return PublishResult(skipped=True, canonical_url=canonical_url, existing_url=existing.url)

    article = build_article(post, site_url)
    _log_info(f'Publishing "{article["title"]}" to DEV.to')
    _log_info(f"  Canonical URL: {canonical_url}")
    _log_info(f"  Tags: {', '.join(article['tags']) or 'none'}")
    _log_info(f"  Status: {'Published' if article['published'] else 'Draft'}")

    client = client or DevToClient(api_key)
    created = client.create_article(article)
    _log_success(f"Published to DEV.to (id {created.id}): {created.url}")

    if update_frontmatter:
        write_frontmatter(
            post,
            {"crosspost": {"devTo": {"published": True, "id": created.id, "url": created.url}}},
        )
        _log_debug(f"Recorded DEV.to article {created.id} in {post.path.name}")

    return PublishResult(skipped=False, canonical_url=canonical_url, article=created)
