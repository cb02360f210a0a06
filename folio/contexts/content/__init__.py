"""
Content Context

Responsibilities:
- Reads blog posts from the content directory
- Parses and validates frontmatter against the blog schema
- Writes frontmatter changes back (e.g., cross-posting records)

Owns: Post files, frontmatter schema
Never: Renders HTML or talks to external platforms
"""

from folio.contexts.content.exceptions import InvalidFrontmatterError, PostNotFoundError
from folio.contexts.content.frontmatter import (
    Crosspost,
    DevToCrosspost,
    MediumCrosspost,
    PostFrontmatter,
    split_frontmatter,
    validate_frontmatter,
)
from folio.contexts.content.posts import Post, find_post, load_post, load_posts, update_frontmatter

__all__ = [
    # Schema
    "PostFrontmatter",
    "Crosspost",
    "DevToCrosspost",
    "MediumCrosspost",
    "split_frontmatter",
    "validate_frontmatter",
    # Posts
    "Post",
    "load_post",
    "load_posts",
    "find_post",
    "update_frontmatter",
    # Errors
    "InvalidFrontmatterError",
    "PostNotFoundError",
]
