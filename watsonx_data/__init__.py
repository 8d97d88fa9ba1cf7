"""watsonx_data: a Python client for the IBM watsonx.data lakehouse API.

Quick Start:
    ```python
    from watsonx_data import IngestionJobsPager, WatsonxDataV2

    # Reads WATSONX_DATA_URL and WATSONX_DATA_BEARER_TOKEN
    client = WatsonxDataV2.new_instance()

    buckets = client.list_bucket_registrations(auth_instance_id=crn).result

    # Walk through every page of ingestion jobs
    pager = IngestionJobsPager(client, {"auth_instance_id": crn, "jobs_per_page": 50})
    jobs = pager.get_all()
    ```
"""

import logging

from ._core._models import DetailedResponse
from .client import WatsonxDataV2
from .common import SDK_VERSION
from .config import DEFAULT_SERVICE_NAME, DEFAULT_SERVICE_URL, ServiceConfig
from .exceptions import (
    ApiException,
    ConfigurationError,
    PagerConfigurationError,
    PagerExhaustedError,
    WatsonxDataError,
)
from .pagers import CursorPager, IngestionJobsPager

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = [
    # client.py
    "WatsonxDataV2",
    "DetailedResponse",
    # config.py
    "ServiceConfig",
    "DEFAULT_SERVICE_URL",
    "DEFAULT_SERVICE_NAME",
    # pagers.py
    "CursorPager",
    "IngestionJobsPager",
    # exceptions.py
    "WatsonxDataError",
    "ConfigurationError",
    "PagerConfigurationError",
    "PagerExhaustedError",
    "ApiException",
]

__version__ = SDK_VERSION
