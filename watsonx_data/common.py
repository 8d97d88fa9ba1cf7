"""Headers identifying this SDK on every outgoing request."""

import platform
from importlib.metadata import PackageNotFoundError, version

from .config import SERVICE_VERSION

try:
    SDK_VERSION = version("watsonx-data")
except PackageNotFoundError:
    SDK_VERSION = "0.0.0"

SDK_NAME = "watsonx-data-python-sdk"


def get_user_agent() -> str:
    return (
        f"{SDK_NAME}/{SDK_VERSION} "
        f"(lang=python; os.name={platform.system()}; "
        f"python.version={platform.python_version()})"
    )


def get_sdk_headers(
    service_name: str, operation_id: str, service_version: str = SERVICE_VERSION
) -> dict[str, str]:
    """Return the SDK analytics headers for one operation.

    Parameters:
        service_name: Name of the service the request is sent to.
        operation_id: Name of the client method issuing the request.
        service_version: API version of the service.

    Returns:
        A dictionary with the ``User-Agent`` and
        ``X-IBMCloud-SDK-Analytics`` headers.
    """
    return {
        "User-Agent": get_user_agent(),
        "X-IBMCloud-SDK-Analytics": (
            f"service_name={service_name};"
            f"service_version={service_version};"
            f"operation_id={operation_id}"
        ),
    }
