"""Single-page fetcher for the Confluence content REST API.

This module issues one bounded ``GET /rest/api/content`` request per call and
classifies the outcome: decoded pages on success, or a typed PageFetchError
carrying the URL, HTTP status (None if no response arrived) and raw body.
"""

import logging
from typing import Callable, List, Optional
from urllib.parse import urlencode

import requests

from src.models.confluence_page import ConfluencePage, parse_page_response

from .auth import Credentials
from .errors import APIStatusError, MalformedResponseError, TransportError

logger = logging.getLogger(__name__)

# Number of pages requested per call
PAGE_SIZE = 25

CONTENT_PATH = "/rest/api/content"
EXPAND = "body.view"


def _log_request(url: str) -> None:
    logger.info(f"Downloading page from Confluence: {url}")


class PageFetcher:
    """Fetches one page of space content at a time.

    One requests.Session is created lazily on first use and reused for every
    subsequent request, so sequential page fetches share connections.

    Example:
        >>> creds = Authenticator().get_credentials()
        >>> with PageFetcher(creds) as fetcher:
        ...     pages = fetcher.fetch_page(start=0, limit=25)
    """

    def __init__(
        self,
        credentials: Credentials,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        trace: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the fetcher.

        Args:
            credentials: Base URL, space key and Basic credential
            session: Optional pre-built session (created lazily otherwise)
            timeout: Optional per-request timeout in seconds (None = no timeout)
            trace: Called with each request URL before it is sent
                   (defaults to an INFO log record)
        """
        self._credentials = credentials
        self._session = session
        self._timeout = timeout
        self._trace = trace or _log_request

    def _get_session(self) -> requests.Session:
        """Get or create the HTTP session."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        """Release the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "PageFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def build_url(self, start: int, limit: int) -> str:
        """Build the request URL for one page.

        Args:
            start: Zero-based offset of the first page requested
            limit: Maximum number of pages in the response

        Returns:
            Full request URL, e.g.
            ``https://x/wiki/rest/api/content?spaceKey=TEAM&limit=25&start=0&expand=body.view``
        """
        base_url = self._credentials.base_url.rstrip('/')
        query = urlencode(
            [
                ('spaceKey', self._credentials.space_key),
                ('limit', limit),
                ('start', start),
                ('expand', EXPAND),
            ]
        )
        return f"{base_url}{CONTENT_PATH}?{query}"

    def fetch_page(self, start: int, limit: int = PAGE_SIZE) -> List[ConfluencePage]:
        """Fetch one page of results.

        Args:
            start: Zero-based offset (must be >= 0)
            limit: Page size (must be > 0)

        Returns:
            Pages in API order; an empty list means no more data

        Raises:
            ValueError: If start or limit is out of range
            TransportError: If no response could be obtained
            APIStatusError: If the response status is not 2xx
            MalformedResponseError: If a 2xx body does not match the page schema
        """
        if start < 0:
            raise ValueError(f"start must be >= 0, got {start}")
        if limit <= 0:
            raise ValueError(f"limit must be > 0, got {limit}")

        url = self.build_url(start, limit)
        self._trace(url)

        try:
            response = self._get_session().get(
                url,
                headers={"Authorization": f"Basic {self._credentials.auth}"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.debug(f"Request to {url} failed: {e}")
            raise TransportError(url, str(e)) from e

        status = response.status_code
        try:
            body = response.text
        except Exception as e:
            logger.debug(f"Could not read response body from {url}: {e}")
            body = ""

        if not 200 <= status < 300:
            raise APIStatusError(url, status, body)

        try:
            pages = parse_page_response(body)
        except ValueError as e:
            logger.debug(f"Malformed response from {url}: {e}")
            raise MalformedResponseError(url, status, body) from e

        logger.debug(f"Received {len(pages)} page(s) from {url}")
        return pages
