"""Confluence page data model."""

import json
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class ConfluencePage:
    """Confluence page with rendered view content.

    Represents one element of the ``results`` list returned by
    ``/rest/api/content?expand=body.view``.

    Attributes:
        page_id: Unique identifier for the page
        title: Page title
        body_view: Rendered page content (HTML) from body.view.value
    """
    page_id: str
    title: str
    body_view: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ConfluencePage":
        """Build a page from one API result entry.

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected page object, got {type(data).__name__}")
        try:
            page_id = data['id']
            title = data['title']
            value = data['body']['view']['value']
        except (KeyError, TypeError) as e:
            raise ValueError(f"Page entry is missing field {e}") from e

        for field_name, field_value in (('id', page_id), ('title', title), ('body.view.value', value)):
            if not isinstance(field_value, str):
                raise ValueError(f"Field '{field_name}' must be a string")

        return cls(page_id=page_id, title=title, body_view=value)

    def to_dict(self) -> Dict[str, Any]:
        """Return the page in the same shape the API delivers it."""
        return {
            'id': self.page_id,
            'title': self.title,
            'body': {'view': {'value': self.body_view}},
        }


def parse_page_response(body: str) -> List[ConfluencePage]:
    """Decode one ``/rest/api/content`` response body.

    Args:
        body: Raw response text

    Returns:
        Pages in the order the API returned them (possibly empty)

    Raises:
        ValueError: If the body is not JSON or does not match the page schema
    """
    data = json.loads(body)  # JSONDecodeError is a ValueError
    if not isinstance(data, dict) or 'results' not in data:
        raise ValueError("Response has no 'results' field")

    results = data['results']
    if not isinstance(results, list):
        raise ValueError("'results' must be a list")

    return [ConfluencePage.from_api(entry) for entry in results]
