"""Custom exceptions for the CV context."""

from pathlib import Path
from typing import List, Optional


class CVNotFoundError(FileNotFoundError):
    """Raised when the CV JSON document does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"CV JSON not found at {path}")


class InvalidCVStructureError(ValueError):
    """
    Raised when the CV JSON document is missing required fields or has malformed values.

    Attributes:
        problems: One message per offending field, addressed by JSON path
        source: File the document came from, when known
    """

    def __init__(self, problems: List[str], source: Optional[Path] = None):
        self.problems = problems
        self.source = source

        header = "Invalid CV document"
        if source is not None:
            header += f" {source}"
        super().__init__(header + ":\n" + "\n".join(f"  - {p}" for p in problems))
