import os

import pytest
from watsonx_data import WatsonxDataV2

REQUIRED_VARIABLES = ("WATSONX_DATA_URL", "WATSONX_DATA_BEARER_TOKEN", "WATSONX_DATA_AUTH_INSTANCE_ID")


def pytest_collection_modifyitems(config, items):
    missing = [name for name in REQUIRED_VARIABLES if not os.environ.get(name)]
    if not missing:
        return
    skip = pytest.mark.skip(reason=f"missing environment variables: {', '.join(missing)}")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture(scope="module")
def client():
    with WatsonxDataV2.new_instance() as service:
        service.enable_retries()
        yield service


@pytest.fixture(scope="module")
def auth_instance_id() -> str:
    return os.environ["WATSONX_DATA_AUTH_INSTANCE_ID"]
