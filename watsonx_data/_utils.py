"""Internal URL helpers."""

from typing import Optional
from urllib.parse import parse_qs, urlsplit


def get_query_param(url: str, param: str) -> Optional[str]:
    """Return the first value of query parameter *param* in *url*.

    Parameters:
        url: An absolute or relative URL, e.g. a ``next.href`` page link.
        param: Name of the query parameter to extract.

    Returns:
        The decoded parameter value, or None if the URL has no such
        parameter or its value is empty.
    """
    values = parse_qs(urlsplit(url).query).get(param)
    if not values:
        return None
    return values[0] or None
