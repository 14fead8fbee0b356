"""Unit tests for pagination argument models."""

from __future__ import annotations

from decimal import Decimal

import pytest

from webapi.core import PaginationKind, ValidationError
from webapi.methods import (
    CursorPaginationArgs,
    TimelinePaginationArgs,
    TraditionalPagingArgs,
    validate_pagination_args,
)


class TestCursorPaginationArgs:
    """Test cursor argument validation."""

    def test_limit_bounds(self):
        """limit must be a natural number no greater than 1000."""
        assert CursorPaginationArgs(limit=1000).limit == 1000
        with pytest.raises(ValueError):
            CursorPaginationArgs(limit=1001)
        with pytest.raises(ValueError):
            CursorPaginationArgs(limit=0)

    def test_other_keys_ignored(self):
        """Non-pagination arguments are left alone."""
        args = CursorPaginationArgs.model_validate({"types": "im", "cursor": "abc"})
        assert args.cursor == "abc"
        assert args.limit is None


class TestTimelinePaginationArgs:
    """Test timeline argument validation."""

    def test_numeric_timestamps_coerced(self):
        """Numeric bounds become strings and parse back to Decimal."""
        args = TimelinePaginationArgs(oldest=1512085950, latest="1512085960.000200")
        assert args.oldest == "1512085950"
        assert args.bounds() == (Decimal("1512085950"), Decimal("1512085960.000200"))

    def test_invalid_timestamp_rejected(self):
        """Non-numeric timestamps are rejected."""
        with pytest.raises(ValueError):
            TimelinePaginationArgs(latest="yesterday")

    def test_count_bounds(self):
        """count is optional but must be a natural number when given."""
        assert TimelinePaginationArgs().count is None
        assert TimelinePaginationArgs(count="50").count == 50
        with pytest.raises(ValueError):
            TimelinePaginationArgs(count=0)
        with pytest.raises(ValueError):
            TimelinePaginationArgs(count=-1)


class TestTraditionalPagingArgs:
    """Test traditional argument defaults and bounds."""

    def test_defaults(self):
        """page defaults to 1 and count to 100."""
        args = TraditionalPagingArgs()
        assert (args.page, args.count) == (1, 100)

    def test_page_is_one_based(self):
        """page 0 is invalid."""
        with pytest.raises(ValueError):
            TraditionalPagingArgs(page=0)


class TestValidatePaginationArgs:
    """Test validate_pagination_args dispatch."""

    def test_dispatch_by_kind(self):
        """Each kind validates with its own model."""
        assert isinstance(
            validate_pagination_args(PaginationKind.CURSOR, {"limit": 10}), CursorPaginationArgs
        )
        assert isinstance(
            validate_pagination_args(PaginationKind.TIMELINE, {}), TimelinePaginationArgs
        )
        assert isinstance(
            validate_pagination_args(PaginationKind.TRADITIONAL, {"page": 2}),
            TraditionalPagingArgs,
        )

    def test_invalid_args_raise_library_error(self):
        """pydantic errors surface as the library ValidationError."""
        with pytest.raises(ValidationError, match="cursor pagination arguments"):
            validate_pagination_args(PaginationKind.CURSOR, {"limit": 5000})

    def test_none_kind_rejected(self):
        """There is no argument group for unpaginated operations."""
        with pytest.raises(ValueError):
            validate_pagination_args(PaginationKind.NONE, {})
