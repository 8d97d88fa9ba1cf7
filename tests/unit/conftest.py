"""Pytest configuration and shared fixtures for unit tests."""

from unittest.mock import Mock

import pytest
import responses as responses_lib
from watsonx_data import ServiceConfig, WatsonxDataV2

from fixtures import SERVICE_URL


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(service_url=SERVICE_URL, bearer_token="test-token")


@pytest.fixture
def client(config):
    with WatsonxDataV2(config) as service:
        yield service


@pytest.fixture
def mocked_responses():
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def list_fn() -> Mock:
    """A list operation double; set ``side_effect`` to the pages to serve."""
    return Mock(name="list_fn")
