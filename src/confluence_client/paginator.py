"""Pagination driver that downloads every page of a Confluence space."""

import logging
from typing import List

from src.models.confluence_page import ConfluencePage

from .page_fetcher import PAGE_SIZE, PageFetcher

logger = logging.getLogger(__name__)


def download_all_pages(
    fetcher: PageFetcher,
    page_size: int = PAGE_SIZE,
) -> List[ConfluencePage]:
    """Download all pages of the space, one request at a time.

    Requests offsets 0, page_size, 2 * page_size, ... until a request returns
    no pages. A short but non-empty response is followed by one more request;
    only an empty response ends the download.

    Args:
        fetcher: PageFetcher bound to the space to export
        page_size: Number of pages requested per call

    Returns:
        All pages in API order

    Raises:
        ValueError: If page_size is not positive
        PageFetchError: The first fetch failure; no partial result is returned
    """
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")

    all_pages: List[ConfluencePage] = []
    start = 0

    while True:
        pages = fetcher.fetch_page(start, page_size)
        if not pages:
            break

        all_pages.extend(pages)
        logger.debug(f"Collected {len(pages)} page(s) at offset {start} ({len(all_pages)} total)")
        start += page_size

    return all_pages
