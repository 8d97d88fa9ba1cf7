"""Cursor-based pagination over the list operations of the service.

A pager wraps one list operation and hides the continuation-token
bookkeeping: each response carries an optional ``next`` link whose ``start``
query parameter is the cursor for the following page.

Example:
    >>> pager = IngestionJobsPager(client, {"auth_instance_id": crn})  # doctest: +SKIP
    >>> while pager.has_next():  # doctest: +SKIP
    ...     for job in pager.get_next():
    ...         print(job["job_id"])
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from ._core._models import PageEnvelope
from .exceptions import PagerConfigurationError, PagerExhaustedError

logger = logging.getLogger(__name__)

ListFunction = Callable[..., Optional[Mapping[str, Any]]]


class CursorPager:
    """Forward-only iteration over a paginated list operation.

    The pager starts out active and becomes exhausted once a response comes
    back without a continuation cursor; it never becomes active again.
    Calls on one instance must not overlap, since every fetch advances the
    cursor. Failures raised by ``list_fn`` propagate unchanged and leave the
    pager as it was before the call.
    """

    def __init__(
        self,
        list_fn: ListFunction,
        params: Optional[Mapping[str, Any]] = None,
        *,
        items_key: str,
        cursor_param: str = "start",
    ) -> None:
        """Initialize the pager.

        Parameters:
            list_fn: Called as ``list_fn(**params)`` once per page; returns the
                response envelope.
            params: Filter and query options applied to every page.
            items_key: Envelope field holding the page's items.
            cursor_param: Request parameter carrying the continuation cursor.

        Raises:
            PagerConfigurationError: if *params* already sets *cursor_param*.
        """
        if params and params.get(cursor_param) not in (None, ""):
            raise PagerConfigurationError(cursor_param)

        self._list_fn = list_fn
        self._params: Dict[str, Any] = copy.deepcopy(dict(params or {}))
        self._items_key = items_key
        self._cursor_param = cursor_param
        self._next_cursor: Optional[str] = None
        self._has_next = True

    def has_next(self) -> bool:
        """Return True if there are potentially more results to retrieve."""
        return self._has_next

    def get_next(self) -> List[Any]:
        """Fetch and return the next page of results.

        Returns:
            The items of the next page, possibly an empty list.

        Raises:
            PagerExhaustedError: if the last page was already returned.
        """
        if not self.has_next():
            raise PagerExhaustedError()

        params = dict(self._params)
        if self._next_cursor:
            params[self._cursor_param] = self._next_cursor

        envelope = PageEnvelope.from_json(self._list_fn(**params), self._items_key)

        self._params = params
        self._next_cursor = envelope.next_cursor(self._cursor_param)
        if not self._next_cursor:
            self._has_next = False
            logger.debug("Pager exhausted after a page of %d items", len(envelope.items))
        else:
            logger.debug(
                "Fetched %d items, more results available", len(envelope.items)
            )
        return envelope.items

    def get_all(self) -> List[Any]:
        """Fetch every remaining page and return their items in order."""
        results: List[Any] = []
        while self.has_next():
            results.extend(self.get_next())
        return results

    def pages(self) -> Iterator[List[Any]]:
        """Iterate through the remaining results page by page."""
        while self.has_next():
            yield self.get_next()

    def __iter__(self) -> Iterator[Any]:
        for page in self.pages():
            yield from page

    def __repr__(self) -> str:
        state = "active" if self._has_next else "exhausted"
        return f"{self.__class__.__name__}({state})"


class IngestionJobsPager(CursorPager):
    """Pager for ``WatsonxDataV2.list_ingestion_jobs``.

    Parameters:
        client: The service client used to invoke ``list_ingestion_jobs()``.
        params: Keyword arguments for ``list_ingestion_jobs()``, typically
            ``auth_instance_id`` and ``jobs_per_page``; ``start`` must not be set.
    """

    def __init__(self, client: Any, params: Optional[Mapping[str, Any]] = None) -> None:
        self._client = client
        super().__init__(self._list_ingestion_jobs, params, items_key="ingestion_jobs")

    def _list_ingestion_jobs(self, **params: Any) -> Optional[Mapping[str, Any]]:
        return self._client.list_ingestion_jobs(**params).result
