"""Confluence client library for space export.

This package wraps the Confluence content REST API, enabling paginated
download of every page in a space with typed failure reporting.
"""

from .errors import (
    ExportError,
    ConfigurationError,
    ConfluenceError,
    PageFetchError,
    TransportError,
    APIStatusError,
    MalformedResponseError,
)

__all__ = [
    "ExportError",
    "ConfigurationError",
    "ConfluenceError",
    "PageFetchError",
    "TransportError",
    "APIStatusError",
    "MalformedResponseError",
]
