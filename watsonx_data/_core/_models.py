"""Simple data models shared across the package."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional

import requests
from requests.structures import CaseInsensitiveDict

from .._utils import get_query_param
from ..exceptions import WatsonxDataError


@dataclass(frozen=True)
class DetailedResponse:
    """Result of a service call: parsed body, status code and headers.

    ``headers`` keeps the case-insensitive lookup of ``requests``.
    """

    result: Any
    status_code: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)

    def get_result(self) -> Any:
        return self.result

    @classmethod
    def from_response(cls, response: requests.Response) -> "DetailedResponse":
        result: Any = None
        if response.content:
            try:
                result = response.json()
            except ValueError:
                result = response.text
        return cls(
            result=result,
            status_code=response.status_code,
            headers=CaseInsensitiveDict(response.headers),
        )


def _href(page: Any) -> Optional[str]:
    if isinstance(page, Mapping):
        return page.get("href") or None
    return None


@dataclass(frozen=True)
class PageEnvelope:
    """One page of a paginated collection response."""

    items: List[Any]
    next_href: str | None = None

    @classmethod
    def from_json(cls, payload: Any, items_key: str) -> "PageEnvelope":
        """Parse a page from its decoded JSON body.

        Raises:
            WatsonxDataError: if *payload* is neither ``None`` nor a JSON object.
        """
        if payload is None:
            payload = {}
        elif not isinstance(payload, Mapping):
            raise WatsonxDataError(
                f"expected a JSON object for page, got {type(payload).__name__}"
            )
        return cls(
            items=list(payload.get(items_key) or []),
            next_href=_href(payload.get("next")),
        )

    def next_cursor(self, cursor_param: str = "start") -> str | None:
        """Return the cursor for the following page, or None on the last page."""
        if not self.next_href:
            return None
        return get_query_param(self.next_href, cursor_param)
