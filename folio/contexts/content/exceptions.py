"""Custom exceptions for the content context."""

from pathlib import Path
from typing import List, Optional


class PostNotFoundError(FileNotFoundError):
    """Raised when no post file exists for a slug."""

    def __init__(self, slug: str, expected_path: Path):
        self.slug = slug
        self.expected_path = expected_path
        super().__init__(f"Post not found at {expected_path}")


class InvalidFrontmatterError(ValueError):
    """
    Raised when a post's frontmatter does not match the blog schema.

    Attributes:
        problems: One message per offending field
        source: File the frontmatter came from, when known
    """

    def __init__(self, problems: List[str], source: Optional[Path] = None):
        self.problems = problems
        self.source = source

        header = "Invalid frontmatter"
        if source is not None:
            header += f" in {source}"
        super().__init__(header + ":\n" + "\n".join(f"  - {p}" for p in problems))
