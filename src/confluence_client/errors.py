"""Typed exception hierarchy for Confluence export errors.

This module defines all custom exceptions raised while loading configuration
and downloading pages. Fetch failures carry a flat context (URL, HTTP status,
raw body) so the caller can log them and abort.
"""

from typing import Optional


class ExportError(Exception):
    """Base exception for all confluence-space-export errors.

    Use this to catch any application-level error from the export tool.
    """
    pass


class ConfigurationError(ExportError):
    """Raised when a required environment variable is missing."""

    def __init__(self, variable: str):
        super().__init__(f"Missing required environment variable {variable}")
        self.variable = variable


class ConfluenceError(ExportError):
    """Base exception for all Confluence-related errors."""
    pass


class PageFetchError(ConfluenceError):
    """Raised when a single page request fails.

    Attributes:
        url: The request URL
        status: HTTP status code, or None when no response was received
        body: Raw response body, or the transport error description
    """

    def __init__(self, url: str, status: Optional[int], body: str):
        status_text = str(status) if status is not None else "none"
        super().__init__(
            f"Error downloading page from Confluence: URL: {url}, "
            f"status: {status_text}, body: {body}"
        )
        self.url = url
        self.status = status
        self.body = body


class TransportError(PageFetchError):
    """Raised when the request could not be completed (no response)."""

    def __init__(self, url: str, body: str):
        super().__init__(url, None, body)


class APIStatusError(PageFetchError):
    """Raised when the API answers with a non-success HTTP status."""

    def __init__(self, url: str, status: int, body: str):
        super().__init__(url, status, body)


class MalformedResponseError(PageFetchError):
    """Raised when a success response body does not match the page schema."""

    def __init__(self, url: str, status: int, body: str):
        super().__init__(url, status, body)
