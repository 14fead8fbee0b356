"""Unit tests for the continuation predicate."""

from __future__ import annotations

import pytest

from webapi.capability import CursorPagination, TimelinePagination, TraditionalPaging
from webapi.core import MalformedResponse, TimelineDirection
from webapi.runtime.pagination import extract_items, has_more, next_cursor

CURSOR = CursorPagination("members")
TIMELINE = TimelinePagination()
TRADITIONAL = TraditionalPaging(items_field="files")
SEARCH = TraditionalPaging(items_field="messages.matches", paging_field="messages.paging")


def _messages(*stamps: str) -> dict:
    return {"ok": True, "messages": [{"ts": ts, "text": "hi"} for ts in stamps]}


class TestCursorPredicate:
    """Test cursor end-of-data detection."""

    def test_more_when_cursor_present(self):
        """A non-empty next_cursor means more pages."""
        response = {"members": ["U1"], "response_metadata": {"next_cursor": "abc"}}
        assert has_more(CURSOR, response, request_args={}) is True
        assert next_cursor(response) == "abc"

    @pytest.mark.parametrize(
        "response",
        [
            {"members": []},
            {"members": [], "response_metadata": {}},
            {"members": [], "response_metadata": {"next_cursor": ""}},
            {"members": [], "response_metadata": {"next_cursor": None}},
        ],
    )
    def test_no_more_when_cursor_absent_or_empty(self, response):
        """Absent or empty cursors end the session."""
        assert has_more(CURSOR, response, request_args={}) is False

    def test_items_from_registered_field(self):
        """Items are read from the registered field."""
        assert extract_items(CURSOR, {"members": ["U1", "U2"]}) == ["U1", "U2"]

    def test_missing_items_field_is_malformed(self):
        """A missing items field is reported, not treated as empty."""
        with pytest.raises(MalformedResponse) as exc_info:
            extract_items(CURSOR, {"ok": True, "channels": []}, op_id="users.list")
        assert exc_info.value.field == "members"
        assert exc_info.value.op_id == "users.list"

    def test_non_list_items_field_is_malformed(self):
        """The items field must be a list."""
        with pytest.raises(MalformedResponse):
            extract_items(CURSOR, {"members": {"U1": {}}})


class TestTimelinePredicate:
    """Test timeline end-of-data detection."""

    def test_full_page_has_more(self):
        """A page as large as the requested count suggests more data."""
        assert has_more(TIMELINE, _messages("3.0", "2.0"), request_args={"count": 2}) is True

    def test_short_page_ends(self):
        """A page smaller than the requested count ends the session."""
        assert has_more(TIMELINE, _messages("3.0"), request_args={"count": 2}) is False

    def test_empty_page_ends(self):
        """An empty page ends the session."""
        assert has_more(TIMELINE, _messages(), request_args={"count": 2}) is False

    def test_default_page_size(self):
        """Without count the default page size of 100 applies."""
        stamps = [f"{i}.0" for i in range(100, 0, -1)]
        assert has_more(TIMELINE, _messages(*stamps), request_args={}) is True
        assert has_more(TIMELINE, _messages(*stamps[:99]), request_args={}) is False

    def test_backward_stops_at_oldest_bound(self):
        """Walking backward stops once the caller's oldest bound is reached."""
        response = _messages("12.0", "10.0")
        assert has_more(TIMELINE, response, request_args={"count": 2, "oldest": "10.0"}) is False
        assert has_more(TIMELINE, response, request_args={"count": 2, "oldest": "9.5"}) is True

    def test_forward_stops_at_latest_bound(self):
        """Walking forward stops once the caller's latest bound is reached."""
        response = _messages("10.0", "12.0")
        kwargs = {"direction": TimelineDirection.FORWARD}
        assert (
            has_more(TIMELINE, response, request_args={"count": 2, "latest": "12.0"}, **kwargs)
            is False
        )
        assert (
            has_more(TIMELINE, response, request_args={"count": 2, "latest": "20"}, **kwargs)
            is True
        )

    def test_numeric_bound(self):
        """A numeric caller bound compares the same as its string form."""
        response = _messages("12.0", "10.0")
        assert has_more(TIMELINE, response, request_args={"count": 2, "oldest": 10}) is False
        assert has_more(TIMELINE, response, request_args={"count": 2, "oldest": 9}) is True

    def test_item_without_timestamp_is_malformed(self):
        """Timeline items must carry their timestamp."""
        response = {"messages": [{"ts": "2.0"}, {"text": "no ts"}]}
        with pytest.raises(MalformedResponse):
            has_more(TIMELINE, response, request_args={"count": 2})


class TestTraditionalPredicate:
    """Test page-number end-of-data detection."""

    @pytest.mark.parametrize(
        ("page", "expected"),
        [(1, True), (2, True), (3, False)],
    )
    def test_total_count_boundary(self, page, expected):
        """page * count < total decides whether another page exists."""
        response = {"files": [], "paging": {"count": 100, "page": page, "total_count": 250}}
        assert has_more(TRADITIONAL, response, request_args={"page": page}) is expected

    def test_page_and_count_fall_back_to_request(self):
        """Request args fill in page and count the server omits."""
        response = {"files": [], "paging": {"total": 30}}
        assert has_more(TRADITIONAL, response, request_args={"page": 2, "count": 10}) is True
        assert has_more(TRADITIONAL, response, request_args={"page": 3, "count": 10}) is False

    def test_nested_paging_block(self):
        """Search operations nest paging under the result container."""
        response = {
            "messages": {
                "matches": [{"ts": "1.0"}],
                "paging": {"count": 20, "page": 1, "total": 21},
            }
        }
        assert has_more(SEARCH, response, request_args={}) is True
        assert extract_items(SEARCH, response) == [{"ts": "1.0"}]

    def test_missing_paging_is_malformed(self):
        """Paging metadata is required."""
        with pytest.raises(MalformedResponse) as exc_info:
            has_more(TRADITIONAL, {"files": []}, request_args={})
        assert exc_info.value.field == "paging"

    def test_missing_total_is_malformed(self):
        """The paging block must report a total."""
        with pytest.raises(MalformedResponse):
            has_more(TRADITIONAL, {"files": [], "paging": {"page": 1}}, request_args={})

    def test_no_items_field_extracts_nothing(self):
        """Without an items field nothing is extracted."""
        assert extract_items(TraditionalPaging(), {"paging": {"total": 0}}) == []
