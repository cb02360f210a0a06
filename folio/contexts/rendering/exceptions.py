"""Custom exceptions for the rendering context."""

from pathlib import Path


class BrowserNotFoundError(RuntimeError):
    """Raised when no Chrome/Chromium executable can be located."""

    def __init__(self, chrome_path: Path = None):
        self.chrome_path = chrome_path
        if chrome_path is not None:
            message = f"CHROME_PATH points to {chrome_path}, which does not exist."
        else:
            message = "Chrome/Chromium not found. Please install Chrome or set CHROME_PATH environment variable."
        super().__init__(message)


class RenderedPageNotFoundError(FileNotFoundError):
    """Raised when the built HTML page to print does not exist."""

    def __init__(self, html_path: Path):
        self.html_path = html_path
        super().__init__(f"Rendered page not found at {html_path}. Build the site first.")


class MarkdownSourceNotFoundError(FileNotFoundError):
    """Raised when the Markdown CV to print does not exist."""

    def __init__(self, markdown_path: Path):
        self.markdown_path = markdown_path
        super().__init__(f"File not found: {markdown_path}")
