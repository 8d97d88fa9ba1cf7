"""Service configuration and defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional

from typing_extensions import Self

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SERVICE_URL = "https://region.lakehouse.cloud.ibm.com/lakehouse/api/v2"
DEFAULT_SERVICE_NAME = "watsonx_data"
SERVICE_VERSION = "v2"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


@dataclass(frozen=True)
class ServiceConfig:
    """Settings shared by every request a client issues.

    Attributes:
        service_url: Base URL of the watsonx.data API.
        service_name: Name used to look up settings in the environment.
        bearer_token: Static bearer token sent in the ``Authorization`` header.
        headers: Default headers included with every request.
        timeout: Request timeout in seconds.
        max_retries: Number of retries for throttled or failed requests.
        backoff_factor: Multiplier for the exponential wait between retries.
        disable_ssl_verification: Skip TLS certificate verification.
    """

    service_url: str = DEFAULT_SERVICE_URL
    service_name: str = DEFAULT_SERVICE_NAME
    bearer_token: Optional[str] = field(default=None, repr=False)
    headers: Mapping[str, str] = field(default_factory=dict)
    timeout: int = 60
    max_retries: int = 0
    backoff_factor: float = 1.0
    disable_ssl_verification: bool = False

    def __post_init__(self) -> None:
        if not self.service_url:
            raise ConfigurationError("The service URL is required")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must not be negative")

    def with_overrides(self, **changes) -> Self:
        """Return a copy of this configuration with *changes* applied."""
        return replace(self, **changes)

    @classmethod
    def from_environment(
        cls,
        service_name: str = DEFAULT_SERVICE_NAME,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Self:
        """Build a configuration from ``<SERVICE_NAME>_*`` environment variables.

        Recognized variables, for the default service name:
        ``WATSONX_DATA_URL``, ``WATSONX_DATA_BEARER_TOKEN``,
        ``WATSONX_DATA_TIMEOUT``, ``WATSONX_DATA_MAX_RETRIES`` and
        ``WATSONX_DATA_DISABLE_SSL``. Unset variables keep their defaults.

        Raises:
            ConfigurationError: if a numeric or boolean variable cannot be parsed.
        """
        env = os.environ if environ is None else environ
        prefix = service_name.upper().replace("-", "_")

        settings: dict = {"service_name": service_name}
        if url := env.get(f"{prefix}_URL"):
            settings["service_url"] = url
        if token := env.get(f"{prefix}_BEARER_TOKEN"):
            settings["bearer_token"] = token
        if (timeout := env.get(f"{prefix}_TIMEOUT")) is not None:
            settings["timeout"] = _parse_int(f"{prefix}_TIMEOUT", timeout)
        if (retries := env.get(f"{prefix}_MAX_RETRIES")) is not None:
            settings["max_retries"] = _parse_int(f"{prefix}_MAX_RETRIES", retries)
        if (disable_ssl := env.get(f"{prefix}_DISABLE_SSL")) is not None:
            settings["disable_ssl_verification"] = _parse_bool(
                f"{prefix}_DISABLE_SSL", disable_ssl
            )

        logger.debug(
            "Loaded configuration for %s from environment: %s",
            service_name,
            sorted(k for k in settings if k != "bearer_token"),
        )
        return cls(**settings)


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be an integer, got {value!r}", original_error=e
        ) from e


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")
