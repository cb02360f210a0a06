"""
Blog Post Loading

Reads Markdown posts from the content directory. A post's slug is its file
stem, so src/content/blog/hello-world.md is served at /blog/hello-world/.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from folio.contexts.content.exceptions import InvalidFrontmatterError, PostNotFoundError
from folio.contexts.content.frontmatter import (
    PostFrontmatter,
    join_frontmatter,
    split_frontmatter,
    validate_frontmatter,
)
from folio.contexts.content.logger import _log_debug, _log_info

POST_SUFFIXES = (".md", ".mdx")


@dataclass
class Post:
    """
    A blog post read from disk.

    Attributes:
        slug: URL slug (file stem)
        frontmatter: Validated metadata
        body: Markdown content after the frontmatter block
        path: Source file
        raw_frontmatter: Frontmatter mapping exactly as parsed, used for write-back
    """

    slug: str
    frontmatter: PostFrontmatter
    body: str
    path: Path
    raw_frontmatter: Dict[str, Any]


def load_post(path: Path) -> Post:
    """
    Load and validate a single post file.

    Raises:
        InvalidFrontmatterError: If the frontmatter fails validation
    """
    text = path.read_text(encoding="utf-8")
    try:
        raw, body = split_frontmatter(text)
    except InvalidFrontmatterError as e:
        raise InvalidFrontmatterError(e.problems, path) from e

    frontmatter = validate_frontmatter(raw, source=path)
    return Post(slug=path.stem, frontmatter=frontmatter, body=body, path=path, raw_frontmatter=raw)


def find_post(slug: str, content_dir: Path) -> Post:
    """
    Load the post with the given slug.

    Raises:
        PostNotFoundError: If neither <slug>.md nor <slug>.mdx exists
    """
    for suffix in POST_SUFFIXES:
        candidate = content_dir / f"{slug}{suffix}"
        if candidate.exists():
            return load_post(candidate)

    raise PostNotFoundError(slug, content_dir / f"{slug}.md")


def list_post_files(content_dir: Path) -> List[Path]:
    """All post files in the content directory, sorted by name."""
    if not content_dir.exists():
        return []
    return sorted(p for p in content_dir.iterdir() if p.is_file() and p.suffix in POST_SUFFIXES)


def load_posts(content_dir: Path, include_drafts: bool = False) -> List[Post]:
    """
    Load every post in the content directory, newest first.

    Args:
        content_dir: Directory containing post files
        include_drafts: Keep posts marked draft: true

    Raises:
        InvalidFrontmatterError: On the first post that fails validation
    """
    posts = [load_post(path) for path in list_post_files(content_dir)]
    if not include_drafts:
        drafts = [p.slug for p in posts if p.frontmatter.draft]
        if drafts:
            _log_debug(f"Skipping drafts: {', '.join(drafts)}")
        posts = [p for p in posts if not p.frontmatter.draft]

    posts.sort(key=_published_sort_key, reverse=True)
    return posts


def _published_sort_key(post: Post) -> datetime:
    """Naive UTC publish time, so posts with different offsets compare correctly."""
    published = post.frontmatter.published_at
    if published.tzinfo is not None:
        published = published.astimezone(timezone.utc).replace(tzinfo=None)
    return published


def _deep_merge(base: Dict[str, Any], updates: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def update_frontmatter(post: Post, updates: Dict[str, Any]) -> Post:
    """
    Merge updates into a post's frontmatter and rewrite the file.

    Nested mappings are merged key by key, so updating crosspost.devTo leaves
    crosspost.medium alone. The body is written back untouched.

    Args:
        post: Post to update
        updates: camelCase keys to set

    Returns:
        The reloaded post
    """
    merged = _deep_merge(post.raw_frontmatter, updates)
    # Validate before touching the file
    validate_frontmatter(merged, source=post.path)

    post.path.write_text(join_frontmatter(merged, post.body), encoding="utf-8")
    _log_info(f"Updated frontmatter of {post.path.name}")
    return load_post(post.path)
