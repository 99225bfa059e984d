"""Unit tests for confluence_client.paginator module."""

import json

import pytest
from unittest.mock import Mock, call

from src.confluence_client.auth import Credentials
from src.confluence_client.errors import (
    APIStatusError,
    MalformedResponseError,
    TransportError,
)
from src.confluence_client.page_fetcher import PageFetcher
from src.confluence_client.paginator import download_all_pages
from src.models.confluence_page import ConfluencePage


def make_pages(first_id, count):
    return [
        ConfluencePage(str(i), f"Page {i}", f"<p>{i}</p>")
        for i in range(first_id, first_id + count)
    ]


def create_fetcher(*pages_or_errors):
    """Create a mock fetcher returning (or raising) each item in turn."""
    fetcher = Mock(spec=PageFetcher)
    fetcher.fetch_page.side_effect = list(pages_or_errors)
    return fetcher


class TestDownloadAllPages:
    """Test cases for download_all_pages."""

    def test_concatenates_pages_until_empty(self):
        """25 + 5 + empty -> 30 pages in order, 3 requests at 0/25/50."""
        first = make_pages(0, 25)
        second = make_pages(25, 5)
        fetcher = create_fetcher(first, second, [])

        result = download_all_pages(fetcher)

        assert result == first + second
        assert fetcher.fetch_page.call_args_list == [
            call(0, 25),
            call(25, 25),
            call(50, 25),
        ]

    def test_first_page_empty_returns_empty_list(self):
        fetcher = create_fetcher([])

        assert download_all_pages(fetcher) == []
        fetcher.fetch_page.assert_called_once_with(0, 25)

    def test_short_page_does_not_end_download(self):
        """Only an empty page stops the loop."""
        fetcher = create_fetcher(make_pages(0, 3), make_pages(3, 2), [])

        result = download_all_pages(fetcher)

        assert [p.page_id for p in result] == ["0", "1", "2", "3", "4"]
        assert fetcher.fetch_page.call_count == 3

    def test_offsets_are_multiples_of_page_size(self):
        pages = [make_pages(i * 10, 10) for i in range(5)]
        fetcher = create_fetcher(*pages, [])

        download_all_pages(fetcher, page_size=10)

        offsets = [c.args[0] for c in fetcher.fetch_page.call_args_list]
        assert offsets == [0, 10, 20, 30, 40, 50]
        assert len(set(offsets)) == len(offsets)

    def test_preserves_order_and_duplicates(self):
        """Items are appended exactly as received, without reordering or dedup."""
        page_a = [ConfluencePage("b", "B", ""), ConfluencePage("a", "A", "")]
        page_b = [ConfluencePage("a", "A", "")]
        fetcher = create_fetcher(page_a, page_b, [])

        assert download_all_pages(fetcher) == page_a + page_b

    @pytest.mark.parametrize("error", [
        TransportError("https://x", "Connection refused"),
        APIStatusError("https://x", 500, "oops"),
        MalformedResponseError("https://x", 200, "not json"),
    ])
    def test_failure_after_pages_propagates(self, error):
        """A failure on a later page raises; no partial result is returned."""
        fetcher = create_fetcher(make_pages(0, 25), make_pages(25, 25), error)

        with pytest.raises(type(error)) as exc_info:
            download_all_pages(fetcher)

        assert exc_info.value is error
        assert fetcher.fetch_page.call_count == 3

    def test_failure_on_first_page(self):
        error = APIStatusError("https://x", 401, '{"message":"unauthorized"}')
        fetcher = create_fetcher(error)

        with pytest.raises(APIStatusError) as exc_info:
            download_all_pages(fetcher)

        assert exc_info.value.status == 401
        assert exc_info.value.body == '{"message":"unauthorized"}'

    @pytest.mark.parametrize("page_size", [0, -25])
    def test_rejects_non_positive_page_size(self, page_size):
        fetcher = create_fetcher()

        with pytest.raises(ValueError):
            download_all_pages(fetcher, page_size=page_size)

        fetcher.fetch_page.assert_not_called()


class TestDownloadAllPagesOverHttp:
    """End-to-end scenarios through a real PageFetcher with a mocked session."""

    CREDS = Credentials("https://test.atlassian.net/wiki", "TEAM", "abc")

    @staticmethod
    def _response(status_code, text):
        response = Mock()
        response.status_code = status_code
        response.text = text
        return response

    def _body(self, pages):
        return json.dumps({"results": [p.to_dict() for p in pages]})

    def test_thirty_items_in_three_requests(self):
        first, second = make_pages(0, 25), make_pages(25, 5)
        session = Mock()
        session.get.side_effect = [
            self._response(200, self._body(first)),
            self._response(200, self._body(second)),
            self._response(200, '{"results": []}'),
        ]

        fetcher = PageFetcher(self.CREDS, session=session, trace=Mock())
        result = download_all_pages(fetcher)

        assert result == first + second
        urls = [c.args[0] for c in session.get.call_args_list]
        assert [u.split("start=")[1].split("&")[0] for u in urls] == ["0", "25", "50"]

    def test_malformed_first_response(self):
        session = Mock()
        session.get.return_value = self._response(200, "not json")

        fetcher = PageFetcher(self.CREDS, session=session, trace=Mock())

        with pytest.raises(MalformedResponseError) as exc_info:
            download_all_pages(fetcher)

        assert exc_info.value.status == 200
        assert exc_info.value.body == "not json"
