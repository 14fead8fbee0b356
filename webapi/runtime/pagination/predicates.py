"""Continuation predicate: does a response have more pages, and what is on it.

Each strategy signals the end of data differently:
    - Cursor: `response_metadata.next_cursor` is absent or empty
    - Timeline: the page is smaller than the requested page size, or the
      caller's bound was reached
    - Traditional: `page * count >= total` in the server's paging block
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal, InvalidOperation
from typing import Any

from ...capability.definitions import (
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
)
from ...config import DEFAULT_COUNT, DEFAULT_PAGE
from ...core.enums import TimelineDirection
from ...core.exceptions import MalformedResponse
from ...methods.arguments import TimelinePaginationArgs

_MISSING = object()


def lookup_field(record: Any, path: str) -> Any:
    """Follow a dotted path through nested mappings.

    Returns:
        The value, or the module's missing sentinel if any segment is absent
    """
    value = record
    for segment in path.split("."):
        if not isinstance(value, Mapping) or segment not in value:
            return _MISSING
        value = value[segment]
    return value


def is_missing(value: Any) -> bool:
    return value is _MISSING


def next_cursor(response: Mapping[str, Any]) -> str | None:
    """The non-empty `response_metadata.next_cursor`, or None."""
    cursor = lookup_field(response, "response_metadata.next_cursor")
    if is_missing(cursor) or not cursor:
        return None
    return str(cursor)


def extract_items(
    capability: PaginationCapability,
    response: Mapping[str, Any],
    op_id: str | None = None,
) -> list[Any]:
    """Extract the page of items from a response.

    Args:
        capability: Capability the operation is registered with
        response: Raw response record
        op_id: Operation identifier (for error context)

    Returns:
        Items in response order; empty when the capability names no items field

    Raises:
        MalformedResponse: If the items field is missing or not a list
    """
    items_field = capability.items_field
    if items_field is None:
        return []

    items = lookup_field(response, items_field)
    if is_missing(items):
        raise MalformedResponse(
            f"Response for {op_id or 'operation'} is missing items field {items_field!r}",
            op_id=op_id,
            field=items_field,
        )
    if not isinstance(items, list):
        raise MalformedResponse(
            f"Items field {items_field!r} for {op_id or 'operation'} is not a list",
            op_id=op_id,
            field=items_field,
        )
    return items


def item_timestamps(
    capability: TimelinePagination,
    items: list[Any],
    op_id: str | None = None,
) -> list[tuple[Decimal, str]]:
    """Parse the timestamps of timeline items.

    Returns:
        (numeric value, original string) pairs in item order

    Raises:
        MalformedResponse: If an item lacks a parseable timestamp
    """
    key = capability.timestamp_key
    stamps: list[tuple[Decimal, str]] = []
    for item in items:
        raw = item.get(key) if isinstance(item, Mapping) else None
        if raw is None:
            raise MalformedResponse(
                f"Timeline item for {op_id or 'operation'} has no {key!r}",
                op_id=op_id,
                field=key,
            )
        try:
            stamps.append((Decimal(str(raw)), str(raw)))
        except InvalidOperation:
            raise MalformedResponse(
                f"Timeline item for {op_id or 'operation'} has invalid {key!r}: {raw!r}",
                op_id=op_id,
                field=key,
            ) from None
    return stamps


def page_size(capability: TimelinePagination, request_args: Mapping[str, Any]) -> int:
    value = request_args.get(capability.page_size_key)
    if value is None:
        return capability.default_page_size
    return int(value)


def has_more(
    capability: PaginationCapability,
    response: Mapping[str, Any],
    *,
    request_args: Mapping[str, Any],
    direction: TimelineDirection = TimelineDirection.BACKWARD,
    op_id: str | None = None,
) -> bool:
    """Decide whether another page should be requested.

    Args:
        capability: Capability the operation is registered with
        response: Raw response of the last call
        request_args: Arguments the last call was made with
        direction: Timeline walking direction
        op_id: Operation identifier (for error context)

    Returns:
        True if the next page should be fetched

    Raises:
        MalformedResponse: If the paging metadata the strategy needs is missing
    """
    if isinstance(capability, CursorPagination):
        return next_cursor(response) is not None

    if isinstance(capability, TimelinePagination):
        return _timeline_has_more(capability, response, request_args, direction, op_id)

    if isinstance(capability, TraditionalPaging):
        return _traditional_has_more(capability, response, request_args, op_id)

    raise TypeError(f"Unknown pagination capability: {capability!r}")


def _timeline_has_more(
    capability: TimelinePagination,
    response: Mapping[str, Any],
    request_args: Mapping[str, Any],
    direction: TimelineDirection,
    op_id: str | None,
) -> bool:
    items = extract_items(capability, response, op_id)
    # A short page is the server's end-of-data signal
    if not items or len(items) < page_size(capability, request_args):
        return False

    stamps = [value for value, _ in item_timestamps(capability, items, op_id)]
    oldest, latest = TimelinePaginationArgs.model_validate(request_args).bounds()
    if direction is TimelineDirection.BACKWARD:
        return oldest is None or min(stamps) > oldest
    return latest is None or max(stamps) < latest


def _traditional_has_more(
    capability: TraditionalPaging,
    response: Mapping[str, Any],
    request_args: Mapping[str, Any],
    op_id: str | None,
) -> bool:
    paging = lookup_field(response, capability.paging_field)
    if not isinstance(paging, Mapping):
        raise MalformedResponse(
            f"Response for {op_id or 'operation'} is missing paging field "
            f"{capability.paging_field!r}",
            op_id=op_id,
            field=capability.paging_field,
        )

    total = paging.get("total", paging.get("total_count"))
    if total is None:
        raise MalformedResponse(
            f"Paging block for {op_id or 'operation'} has no total",
            op_id=op_id,
            field=f"{capability.paging_field}.total",
        )

    page = paging.get("page") or request_args.get("page") or DEFAULT_PAGE
    count = paging.get("count") or request_args.get("count") or DEFAULT_COUNT
    return int(page) * int(count) < int(total)
