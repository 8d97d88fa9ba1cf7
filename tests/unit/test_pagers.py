"""Tests for the cursor pager.

The list operation is a Mock serving canned pages, so these tests exercise
the pager's state machine without any HTTP traffic.
"""

from unittest.mock import Mock, call

import pytest
from fixtures import envelope
from watsonx_data import (
    ConfigurationError,
    CursorPager,
    PagerConfigurationError,
    PagerExhaustedError,
    WatsonxDataError,
)


def make_pager(list_fn: Mock, params=None) -> CursorPager:
    return CursorPager(list_fn, params, items_key="ingestion_jobs")


def job_ids(items) -> list:
    return [item["job_id"] for item in items]


class TestPagerConstruction:
    """Test pager instantiation."""

    @pytest.mark.parametrize("start", ["tok123", "0", "x" * 64])
    def test_rejects_preset_cursor(self, list_fn: Mock, start: str) -> None:
        with pytest.raises(PagerConfigurationError, match="params.start"):
            make_pager(list_fn, {"auth_instance_id": "crn", "start": start})

        list_fn.assert_not_called()

    def test_configuration_error_is_a_value_error(self, list_fn: Mock) -> None:
        with pytest.raises(ValueError) as excinfo:
            make_pager(list_fn, {"start": "tok"})

        assert isinstance(excinfo.value, ConfigurationError)
        assert excinfo.value.param == "start"

    def test_custom_cursor_param_is_guarded(self, list_fn: Mock) -> None:
        with pytest.raises(PagerConfigurationError, match="params.offset"):
            CursorPager(list_fn, {"offset": "10"}, items_key="items", cursor_param="offset")

    @pytest.mark.parametrize("start", [None, ""])
    def test_unset_cursor_is_accepted(self, list_fn: Mock, start) -> None:
        pager = make_pager(list_fn, {"start": start})

        assert pager.has_next()

    def test_starts_active_without_fetching(self, list_fn: Mock) -> None:
        pager = make_pager(list_fn, {"auth_instance_id": "crn"})

        assert pager.has_next() is True
        assert pager.has_next() is True
        list_fn.assert_not_called()

    def test_params_are_deep_copied(self, list_fn: Mock) -> None:
        params = {"auth_instance_id": "crn", "headers": {"X-Trace": "a"}}
        list_fn.return_value = envelope(["j1"])
        pager = make_pager(list_fn, params)

        params["auth_instance_id"] = "other"
        params["headers"]["X-Trace"] = "b"
        pager.get_next()

        list_fn.assert_called_once_with(auth_instance_id="crn", headers={"X-Trace": "a"})

    def test_params_default_to_empty(self, list_fn: Mock) -> None:
        list_fn.return_value = envelope([])
        pager = make_pager(list_fn)

        assert pager.get_next() == []
        list_fn.assert_called_once_with()


class TestGetNext:
    """Test page-by-page fetching."""

    def test_single_page(self, list_fn: Mock) -> None:
        list_fn.return_value = envelope(["j1", "j2"])
        pager = make_pager(list_fn, {"auth_instance_id": "crn"})

        assert job_ids(pager.get_next()) == ["j1", "j2"]
        assert pager.has_next() is False

    def test_cursor_is_propagated(self, list_fn: Mock) -> None:
        list_fn.side_effect = [
            envelope(["j1", "j2"], next_start="tok1"),
            envelope(["j3", "j4"], next_start="tok2"),
            envelope(["j5"]),
        ]
        pager = make_pager(list_fn, {"auth_instance_id": "crn", "jobs_per_page": 2})

        pages = []
        while pager.has_next():
            pages.append(job_ids(pager.get_next()))

        assert pages == [["j1", "j2"], ["j3", "j4"], ["j5"]]
        assert list_fn.call_args_list == [
            call(auth_instance_id="crn", jobs_per_page=2),
            call(auth_instance_id="crn", jobs_per_page=2, start="tok1"),
            call(auth_instance_id="crn", jobs_per_page=2, start="tok2"),
        ]

    def test_empty_page_with_next_is_not_terminal(self, list_fn: Mock) -> None:
        list_fn.side_effect = [envelope([], next_start="tok1"), envelope(["j1"])]
        pager = make_pager(list_fn)

        assert pager.get_next() == []
        assert pager.has_next() is True
        assert job_ids(pager.get_next()) == ["j1"]
        assert pager.has_next() is False

    def test_next_without_start_param_ends_sequence(self, list_fn: Mock) -> None:
        page = envelope(["j1"])
        page["next"] = {"href": "https://lakehouse.test/ingestion_jobs?jobs_per_page=2"}
        list_fn.return_value = page
        pager = make_pager(list_fn)

        pager.get_next()

        assert pager.has_next() is False

    @pytest.mark.parametrize("next_page", [None, {}, {"href": ""}])
    def test_missing_href_ends_sequence(self, list_fn: Mock, next_page) -> None:
        list_fn.return_value = {"ingestion_jobs": [], "next": next_page}
        pager = make_pager(list_fn)

        pager.get_next()

        assert pager.has_next() is False

    def test_missing_items_returns_empty_list(self, list_fn: Mock) -> None:
        list_fn.return_value = None
        pager = make_pager(list_fn)

        assert pager.get_next() == []
        assert pager.has_next() is False

    def test_exhausted_pager_raises_without_fetching(self, list_fn: Mock) -> None:
        list_fn.return_value = envelope(["j1"])
        pager = make_pager(list_fn)
        pager.get_next()

        with pytest.raises(PagerExhaustedError, match="No more results available"):
            pager.get_next()
        with pytest.raises(PagerExhaustedError):
            pager.get_next()

        assert list_fn.call_count == 1
        assert pager.has_next() is False

    def test_upstream_error_propagates_unchanged(self, list_fn: Mock) -> None:
        failure = ConnectionError("connection reset")
        list_fn.side_effect = [envelope(["j1"], next_start="tok1"), failure]
        pager = make_pager(list_fn)
        pager.get_next()

        with pytest.raises(ConnectionError) as excinfo:
            pager.get_next()

        assert excinfo.value is failure
        assert pager.has_next() is True

    def test_failed_fetch_leaves_cursor_in_place(self, list_fn: Mock) -> None:
        list_fn.side_effect = [
            envelope(["j1"], next_start="tok1"),
            TimeoutError("timed out"),
            envelope(["j2"]),
        ]
        pager = make_pager(list_fn)
        pager.get_next()

        with pytest.raises(TimeoutError):
            pager.get_next()
        assert job_ids(pager.get_next()) == ["j2"]

        assert list_fn.call_args_list[1] == list_fn.call_args_list[2]
        assert list_fn.call_args_list[2] == call(start="tok1")

    def test_non_object_page_is_an_error(self, list_fn: Mock) -> None:
        list_fn.side_effect = [["j1", "j2"], envelope(["j1"])]
        pager = make_pager(list_fn)

        with pytest.raises(WatsonxDataError, match="got list"):
            pager.get_next()

        assert pager.has_next() is True
        assert job_ids(pager.get_next()) == ["j1"]


class TestGetAll:
    """Test materializing every page."""

    PAGES = [
        envelope(["j1", "j2"], next_start="tok1"),
        envelope([], next_start="tok2"),
        envelope(["j3"]),
    ]

    def test_get_all_concatenates_pages(self, list_fn: Mock) -> None:
        list_fn.side_effect = self.PAGES
        pager = make_pager(list_fn, {"auth_instance_id": "crn"})

        assert job_ids(pager.get_all()) == ["j1", "j2", "j3"]
        assert pager.has_next() is False
        assert list_fn.call_count == 3

    def test_get_all_matches_manual_get_next(self) -> None:
        manual = make_pager(Mock(side_effect=self.PAGES))
        collected = []
        while manual.has_next():
            collected.extend(manual.get_next())

        assert make_pager(Mock(side_effect=self.PAGES)).get_all() == collected

    def test_get_all_after_get_next_returns_remaining(self, list_fn: Mock) -> None:
        list_fn.side_effect = self.PAGES
        pager = make_pager(list_fn)
        pager.get_next()

        assert job_ids(pager.get_all()) == ["j3"]

    def test_get_all_on_exhausted_pager_is_empty(self, list_fn: Mock) -> None:
        list_fn.return_value = envelope(["j1"])
        pager = make_pager(list_fn)
        pager.get_all()

        assert pager.get_all() == []
        assert list_fn.call_count == 1


class TestIteration:
    """Test the lazy iteration helpers."""

    def test_pages_yields_each_page(self, list_fn: Mock) -> None:
        list_fn.side_effect = [envelope(["j1"], next_start="tok1"), envelope(["j2", "j3"])]
        pager = make_pager(list_fn)

        assert [job_ids(page) for page in pager.pages()] == [["j1"], ["j2", "j3"]]

    def test_iter_is_lazy(self, list_fn: Mock) -> None:
        list_fn.side_effect = [envelope(["j1"], next_start="tok1"), envelope(["j2"])]
        pager = make_pager(list_fn)

        items = iter(pager)
        assert next(items)["job_id"] == "j1"
        assert list_fn.call_count == 1
        assert [item["job_id"] for item in items] == ["j2"]
        assert list_fn.call_count == 2

    def test_repr_reflects_state(self, list_fn: Mock) -> None:
        list_fn.return_value = envelope([])
        pager = make_pager(list_fn)

        assert repr(pager) == "CursorPager(active)"
        pager.get_next()
        assert repr(pager) == "CursorPager(exhausted)"
