"""Tests for IngestionJobsPager against a mocked ingestion jobs endpoint."""

from unittest.mock import Mock

import pytest
from fixtures import AUTH_INSTANCE_ID, SERVICE_URL, envelope
from responses import matchers
from watsonx_data import (
    ApiException,
    DetailedResponse,
    IngestionJobsPager,
    WatsonxDataError,
)

JOBS_URL = f"{SERVICE_URL}/ingestion_jobs"


def test_pager_walks_every_page(client, mocked_responses):
    mocked_responses.get(
        JOBS_URL,
        json=envelope(["A", "B"], next_start="tok123"),
        match=[matchers.query_param_matcher({"jobs_per_page": "2"})],
    )
    mocked_responses.get(
        JOBS_URL,
        json=envelope(["C"]),
        match=[matchers.query_param_matcher({"jobs_per_page": "2", "start": "tok123"})],
    )

    pager = IngestionJobsPager(
        client, {"auth_instance_id": AUTH_INSTANCE_ID, "jobs_per_page": 2}
    )
    jobs = pager.get_all()

    assert [job["job_id"] for job in jobs] == ["A", "B", "C"]
    assert pager.has_next() is False
    assert len(mocked_responses.calls) == 2
    for sent in mocked_responses.calls:
        assert sent.request.headers["AuthInstanceId"] == AUTH_INSTANCE_ID


def test_pager_and_get_next_loop_agree(client, mocked_responses):
    for _ in range(2):
        mocked_responses.get(
            JOBS_URL,
            json=envelope(["A"], next_start="tok1"),
            match=[matchers.query_param_matcher({})],
        )
        mocked_responses.get(
            JOBS_URL,
            json=envelope(["B", "C"]),
            match=[matchers.query_param_matcher({"start": "tok1"})],
        )

    params = {"auth_instance_id": AUTH_INSTANCE_ID}
    pager = IngestionJobsPager(client, params)
    all_results = []
    while pager.has_next():
        all_results.extend(pager.get_next())

    assert IngestionJobsPager(client, params).get_all() == all_results


def test_pager_rejects_start(client):
    with pytest.raises(ValueError, match="the params.start field should not be set"):
        IngestionJobsPager(client, {"auth_instance_id": AUTH_INSTANCE_ID, "start": "tok"})


def test_pager_propagates_api_errors(client, mocked_responses):
    mocked_responses.get(JOBS_URL, json={"message": "Forbidden"}, status=403)

    pager = IngestionJobsPager(client, {"auth_instance_id": AUTH_INSTANCE_ID})

    with pytest.raises(ApiException) as excinfo:
        pager.get_next()

    assert excinfo.value.status_code == 403
    assert pager.has_next() is True


def test_pager_unwraps_detailed_response():
    fake_client = Mock()
    fake_client.list_ingestion_jobs.return_value = DetailedResponse(
        result=envelope(["A"]), status_code=200
    )

    pager = IngestionJobsPager(fake_client, {"auth_instance_id": "crn", "jobs_per_page": 5})

    assert [job["job_id"] for job in pager.get_next()] == ["A"]
    fake_client.list_ingestion_jobs.assert_called_once_with(
        auth_instance_id="crn", jobs_per_page=5
    )


def test_pager_rejects_non_json_page(client, mocked_responses):
    mocked_responses.get(
        JOBS_URL, body="<html>gateway</html>", status=200, content_type="text/html"
    )

    pager = IngestionJobsPager(client, {"auth_instance_id": AUTH_INSTANCE_ID})

    with pytest.raises(WatsonxDataError, match="expected a JSON object for page, got str"):
        pager.get_next()

    assert pager.has_next() is True
