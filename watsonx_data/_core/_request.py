"""Core HTTP request wrapper used by the service client."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping, Optional

import requests
from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..exceptions import ApiException, handle_http_errors

log = logging.getLogger(__name__)

RETRY_STATUS_CODES = frozenset({429, 500, 502, 503, 504})
MAX_BACKOFF_SECONDS = 30


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    method: str = "GET"
    url: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: MutableMapping[str, str] = field(default_factory=dict)
    json: Optional[Any] = None
    timeout: int = 60
    max_retries: int = 0
    backoff_factor: float = 1.0
    verify: bool = True


def _should_retry(exc: BaseException) -> bool:
    """Return True for failures that merit a retry."""
    if isinstance(exc, ApiException):
        return exc.status_code in RETRY_STATUS_CODES
    return isinstance(exc, (requests.ConnectionError, requests.Timeout))


def _log_retry(retry_state: RetryCallState) -> None:
    exc = retry_state.outcome.exception() if retry_state.outcome else None
    log.warning(
        "Retrying request (attempt %s): %s", retry_state.attempt_number, exc
    )


def _compact(mapping: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Drop ``None`` values so optional parameters are not sent."""
    return {k: v for k, v in (mapping or {}).items() if v is not None}


def request(
    config: RequestConfig,
    session: Optional[requests.Session] = None,
    auth_token: Optional[str] = None,
) -> requests.Response:
    """Perform an HTTP request with retry and error handling.

    Args:
        config: Fully populated ``RequestConfig`` instance.
        session: Session used to send the request; a new one is created
            for this call when omitted.
        auth_token: Optional bearer token; if supplied it is added to the
            ``Authorization`` header.

    Returns:
        The successful ``requests.Response`` object.

    Raises:
        ApiException: if the service answers with an error status, after
            retries for throttling and server errors are used up.
        requests.RequestException: if the service cannot be reached.
    """
    headers = _compact(config.headers)  # copy to avoid mutating caller data
    if auth_token:
        headers["Authorization"] = f"Bearer {auth_token}"
    params = _compact(config.params)
    http = session or requests.Session()

    def send() -> requests.Response:
        log.debug("%s %s", config.method, config.url)
        resp = http.request(
            method=config.method,
            url=config.url,
            params=params,
            headers=headers,
            json=config.json,
            timeout=config.timeout,
            verify=config.verify,
        )
        with handle_http_errors():
            resp.raise_for_status()
        return resp

    retrying = Retrying(
        reraise=True,
        stop=stop_after_attempt(config.max_retries + 1),
        wait=wait_exponential(multiplier=config.backoff_factor, max=MAX_BACKOFF_SECONDS),
        retry=retry_if_exception(_should_retry),
        before_sleep=_log_retry,
    )
    try:
        return retrying(send)
    finally:
        if session is None:
            http.close()
