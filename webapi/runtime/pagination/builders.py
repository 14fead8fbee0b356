"""Page request builder.

Computes the arguments of the next call from the caller's base arguments
and the previous page. Base arguments are never mutated; every call gets a
fresh dict.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ...capability.definitions import (
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
)
from ...config import DEFAULT_PAGE
from ...core.enums import TimelineDirection
from .definitions import ContinuationState, CursorState, PagingState, TimelineState
from .predicates import extract_items, item_timestamps, next_cursor


def continuation_state(
    capability: PaginationCapability,
    prior_response: Mapping[str, Any],
    prior_args: Mapping[str, Any],
    *,
    direction: TimelineDirection = TimelineDirection.BACKWARD,
    op_id: str | None = None,
) -> ContinuationState:
    """Derive the continuation state carried into the next call.

    Raises:
        ValueError: If the prior page offers nothing to continue from
    """
    if isinstance(capability, CursorPagination):
        cursor = next_cursor(prior_response)
        if cursor is None:
            raise ValueError("Prior response has no next_cursor to continue from")
        return CursorState(cursor=cursor)

    if isinstance(capability, TimelinePagination):
        stamps = item_timestamps(
            capability, extract_items(capability, prior_response, op_id), op_id
        )
        if not stamps:
            raise ValueError("Prior page has no items to continue from")
        if direction is TimelineDirection.BACKWARD:
            return TimelineState(latest=min(stamps)[1])
        return TimelineState(oldest=max(stamps)[1])

    if isinstance(capability, TraditionalPaging):
        return PagingState(page=int(prior_args.get("page") or DEFAULT_PAGE) + 1)

    raise TypeError(f"Unknown pagination capability: {capability!r}")


def apply_state(base_args: Mapping[str, Any], state: ContinuationState | None) -> dict[str, Any]:
    """Merge continuation state into a copy of the base arguments."""
    args = dict(base_args)
    if state is None:
        return args

    if isinstance(state, CursorState):
        args["cursor"] = state.cursor
    elif isinstance(state, TimelineState):
        if state.latest is not None:
            args["latest"] = state.latest
        if state.oldest is not None:
            args["oldest"] = state.oldest
        # The boundary item was already produced
        args["inclusive"] = False
    elif isinstance(state, PagingState):
        args["page"] = state.page
    return args


def build_next_request(
    capability: PaginationCapability,
    base_args: Mapping[str, Any],
    prior_response: Mapping[str, Any] | None = None,
    *,
    prior_args: Mapping[str, Any] | None = None,
    direction: TimelineDirection = TimelineDirection.BACKWARD,
    op_id: str | None = None,
) -> dict[str, Any]:
    """Compute the arguments for the next call.

    Args:
        capability: Capability the operation is registered with
        base_args: Caller-supplied arguments
        prior_response: Response of the previous call (None for the first call)
        prior_args: Arguments of the previous call (defaults to base_args)
        direction: Timeline walking direction
        op_id: Operation identifier (for error context)

    Returns:
        Arguments for the next call; for the first call a copy of base_args
    """
    if prior_response is None:
        return dict(base_args)

    state = continuation_state(
        capability,
        prior_response,
        prior_args if prior_args is not None else base_args,
        direction=direction,
        op_id=op_id,
    )
    return apply_state(base_args, state)
