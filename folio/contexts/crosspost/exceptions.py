"""Custom exceptions for the crosspost context."""

from typing import Any


class MissingCredentialError(RuntimeError):
    """Raised when a platform API key is not configured."""

    def __init__(self, variable: str, help_url: str = None):
        self.variable = variable
        self.help_url = help_url

        message = f"{variable} environment variable is required"
        if help_url:
            message += f". Get your API key from {help_url}"
        super().__init__(message)


class DevToAPIError(RuntimeError):
    """
    Raised when DEV.to answers with a non-success status.

    Attributes:
        status: HTTP status code
        body: Parsed JSON error body, or the raw text when it is not JSON
    """

    def __init__(self, status: int, body: Any):
        self.status = status
        self.body = body
        super().__init__(f"DEV.to API error ({status}): {body}")
