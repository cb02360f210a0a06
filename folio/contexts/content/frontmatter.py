"""
Blog Post Frontmatter

Schema and validation for the YAML block at the top of each blog post, plus
the helpers that split a post file into frontmatter and body and write the
block back after it changes.

Schema (on-disk keys are camelCase):
    title: str
    description: str
    publishedAt: date
    updatedAt: date (optional)
    tags: list of str (optional)
    draft: bool (default false)
    canonicalUrl: http(s) URL (optional)
    crosspost:
      devTo: {published: bool = false, id: int, url: URL}
      medium: {published: bool = false, url: URL}
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlparse

import yaml

from folio.contexts.content.exceptions import InvalidFrontmatterError

# Opening fence, YAML block, closing fence on its own line
FRONTMATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


@dataclass
class DevToCrosspost:
    """DEV.to cross-posting record."""

    published: bool = False
    id: Optional[int] = None
    url: Optional[str] = None


@dataclass
class MediumCrosspost:
    """Medium cross-posting record (imports are done by hand)."""

    published: bool = False
    url: Optional[str] = None


@dataclass
class Crosspost:
    dev_to: Optional[DevToCrosspost] = None
    medium: Optional[MediumCrosspost] = None


@dataclass
class PostFrontmatter:
    """
    Validated blog post metadata.

    Attributes:
        title: Post title
        description: One-line summary used in listings, feeds and cross-posts
        published_at: Publication timestamp (midnight for date-only values)
        updated_at: Last significant update, if any
        tags: Topic tags
        draft: Drafts are left out of listings and feeds
        canonical_url: Canonical location when it is not the post's own page
        crosspost: Where the post has been republished
    """

    title: str
    description: str
    published_at: datetime
    updated_at: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    draft: bool = False
    canonical_url: Optional[str] = None
    crosspost: Optional[Crosspost] = None

    @property
    def devto_published(self) -> bool:
        return bool(self.crosspost and self.crosspost.dev_to and self.crosspost.dev_to.published)

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase on-disk shape, omitting unset optional fields."""
        data: Dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "publishedAt": _date_to_yaml(self.published_at),
        }
        if self.updated_at is not None:
            data["updatedAt"] = _date_to_yaml(self.updated_at)
        if self.tags:
            data["tags"] = list(self.tags)
        data["draft"] = self.draft
        if self.canonical_url:
            data["canonicalUrl"] = self.canonical_url

        if self.crosspost is not None:
            crosspost = {}
            if self.crosspost.dev_to is not None:
                crosspost["devTo"] = _drop_none(vars(self.crosspost.dev_to))
            if self.crosspost.medium is not None:
                crosspost["medium"] = _drop_none(vars(self.crosspost.medium))
            data["crosspost"] = crosspost

        return data


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def _date_to_yaml(value: datetime):
    if value.hour == value.minute == value.second == value.microsecond == 0 and value.tzinfo is None:
        return value.date()
    return value


def split_frontmatter(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a post file into its frontmatter mapping and Markdown body.

    Args:
        text: Full file content

    Returns:
        Tuple of (frontmatter dict, body). Files without a frontmatter block
        return an empty dict and the text unchanged.

    Raises:
        InvalidFrontmatterError: If the block is not valid YAML or not a mapping
    """
    match = FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text

    try:
        data = yaml.safe_load(match.group(1))
    except yaml.YAMLError as e:
        raise InvalidFrontmatterError([f"YAML parse error: {e}"]) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontmatterError(["frontmatter must be a mapping"])

    return data, text[match.end():]


def join_frontmatter(data: Dict[str, Any], body: str) -> str:
    """Serialize frontmatter and body back into post file content."""
    block = yaml.safe_dump(data, sort_keys=False, allow_unicode=True, default_flow_style=False)
    return f"---\n{block}---\n{body}"


def validate_frontmatter(data: Dict[str, Any], source: Path = None) -> PostFrontmatter:
    """
    Validate a raw frontmatter mapping against the blog schema.

    All problems are collected before raising, so one run reports every bad
    field. Unknown keys are ignored.

    Args:
        data: Parsed YAML mapping
        source: Optional file path for error messages

    Returns:
        Validated PostFrontmatter

    Raises:
        InvalidFrontmatterError: If any field is missing or malformed
    """
    problems: List[str] = []

    title = _require_string(data, "title", problems)
    description = _require_string(data, "description", problems)

    published_at = None
    if data.get("publishedAt") is None:
        problems.append("publishedAt: required field is missing")
    else:
        published_at = _coerce_datetime(data["publishedAt"], "publishedAt", problems)

    updated_at = None
    if data.get("updatedAt") is not None:
        updated_at = _coerce_datetime(data["updatedAt"], "updatedAt", problems)

    tags = []
    if data.get("tags") is not None:
        if not isinstance(data["tags"], list):
            problems.append("tags: expected a list of strings")
        else:
            for i, tag in enumerate(data["tags"]):
                if isinstance(tag, str):
                    tags.append(tag)
                else:
                    problems.append(f"tags[{i}]: expected a string, got {type(tag).__name__}")

    draft = _optional_bool(data, "draft", problems, "draft")

    canonical_url = None
    if data.get("canonicalUrl") is not None:
        canonical_url = _validate_url(data["canonicalUrl"], "canonicalUrl", problems)

    crosspost = None
    if data.get("crosspost") is not None:
        crosspost = _validate_crosspost(data["crosspost"], problems)

    if problems:
        raise InvalidFrontmatterError(problems, source)

    return PostFrontmatter(
        title=title,
        description=description,
        published_at=published_at,
        updated_at=updated_at,
        tags=tags,
        draft=draft,
        canonical_url=canonical_url,
        crosspost=crosspost,
    )


def _require_string(data: Dict[str, Any], key: str, problems: List[str]) -> Optional[str]:
    value = data.get(key)
    if value is None:
        problems.append(f"{key}: required field is missing")
        return None
    if not isinstance(value, str):
        problems.append(f"{key}: expected a string, got {type(value).__name__}")
        return None
    return value


def _optional_bool(data: Dict[str, Any], key: str, problems: List[str], label: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        problems.append(f"{label}: expected true or false, got {value!r}")
        return False
    return value


def _coerce_datetime(value: Any, label: str, problems: List[str]) -> Optional[datetime]:
    """Accept YAML dates, datetimes and ISO 8601 strings."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            pass
    problems.append(f"{label}: expected a date, got {value!r}")
    return None


def _validate_url(value: Any, label: str, problems: List[str]) -> Optional[str]:
    if isinstance(value, str):
        parsed = urlparse(value)
        if parsed.scheme in ("http", "https") and parsed.netloc:
            return value
    problems.append(f"{label}: expected an http(s) URL, got {value!r}")
    return None


def _validate_crosspost(value: Any, problems: List[str]) -> Optional[Crosspost]:
    if not isinstance(value, dict):
        problems.append("crosspost: expected a mapping")
        return None

    crosspost = Crosspost()

    dev_to = value.get("devTo")
    if dev_to is not None:
        if not isinstance(dev_to, dict):
            problems.append("crosspost.devTo: expected a mapping")
        else:
            article_id = dev_to.get("id")
            if article_id is not None and (isinstance(article_id, bool) or not isinstance(article_id, int)):
                problems.append(f"crosspost.devTo.id: expected an integer, got {article_id!r}")
                article_id = None
            url = dev_to.get("url")
            if url is not None:
                url = _validate_url(url, "crosspost.devTo.url", problems)
            crosspost.dev_to = DevToCrosspost(
                published=_optional_bool(dev_to, "published", problems, "crosspost.devTo.published"),
                id=article_id,
                url=url,
            )

    medium = value.get("medium")
    if medium is not None:
        if not isinstance(medium, dict):
            problems.append("crosspost.medium: expected a mapping")
        else:
            url = medium.get("url")
            if url is not None:
                url = _validate_url(url, "crosspost.medium.url", problems)
            crosspost.medium = MediumCrosspost(
                published=_optional_bool(medium, "published", problems, "crosspost.medium.published"),
                url=url,
            )

    return crosspost
