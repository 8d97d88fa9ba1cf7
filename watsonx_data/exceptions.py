"""Exceptions raised by the watsonx.data client."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any, Mapping, Optional

import requests


class WatsonxDataError(Exception):
    """Base exception for all watsonx.data client errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ConfigurationError(WatsonxDataError, ValueError):
    """Raised when the client or one of its helpers is configured incorrectly."""


class PagerConfigurationError(ConfigurationError):
    """Raised when a pager is constructed with its cursor parameter already set."""

    def __init__(self, param: str) -> None:
        super().__init__(f"the params.{param} field should not be set")
        self.param = param


class PagerExhaustedError(WatsonxDataError):
    """Raised when ``get_next()`` is called on a pager with no more results."""

    def __init__(self, message: str = "No more results available") -> None:
        super().__init__(message)


class ApiException(WatsonxDataError):
    """Raised when the service answers with a non-successful HTTP status.

    Attributes:
        status_code: HTTP status code of the response.
        headers: Response headers, useful for trace ids.
    """

    def __init__(
        self,
        status_code: int,
        message: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message or f"Request failed with status code {status_code}",
            original_error,
        )
        self.status_code = status_code
        self.headers = dict(headers or {})

    def __str__(self) -> str:
        return f"Error: {self.message}, Status code: {self.status_code}"

    @classmethod
    def from_response(
        cls,
        response: requests.Response,
        original_error: Optional[Exception] = None,
    ) -> "ApiException":
        return cls(
            status_code=response.status_code,
            message=_error_message(response),
            headers=response.headers,
            original_error=original_error,
        )


def _error_message(response: requests.Response) -> str:
    """Pull a human readable message out of an error response body."""
    try:
        payload: Any = response.json()
    except ValueError:
        return response.reason or response.text

    if isinstance(payload, dict):
        errors = payload.get("errors")
        if isinstance(errors, list) and errors and isinstance(errors[0], dict):
            if errors[0].get("message"):
                return str(errors[0]["message"])
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if isinstance(error, str) and error:
            return error
        for key in ("message", "errorMessage"):
            if payload.get(key):
                return str(payload[key])

    return response.reason or response.text


@contextmanager
def handle_http_errors() -> Generator[None, None, None]:
    """
    Context manager that catches ``requests.HTTPError`` and raises
    ``ApiException`` in its place.

    Usage:
        with handle_http_errors():
            response.raise_for_status()
    """
    try:
        yield
    except requests.HTTPError as e:
        if e.response is None:
            raise WatsonxDataError(str(e), original_error=e) from e
        raise ApiException.from_response(e.response, original_error=e) from e
