"""
Crosspost Context

Responsibilities:
- Builds DEV.to article payloads from blog posts
- Publishes posts through the DEV.to REST API
- Records the published article back into the post's frontmatter (on request)

Owns: Platform API clients, credentials
Never: Renders pages or validates the blog schema itself
"""

from folio.contexts.crosspost.devto import (
    DEVTO_API_URL,
    DevToArticle,
    DevToClient,
    PublishResult,
    build_article,
    publish_post,
)
from folio.contexts.crosspost.exceptions import DevToAPIError, MissingCredentialError

__all__ = [
    "DEVTO_API_URL",
    "DevToArticle",
    "DevToClient",
    "PublishResult",
    "build_article",
    "publish_post",
    "DevToAPIError",
    "MissingCredentialError",
]
