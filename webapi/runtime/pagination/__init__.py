"""Generic auto-pagination layer.

This module drives any registered operation through its pagination strategy
using an externally supplied invocation capability.

Architecture:
    The pagination layer consists of:
    - definitions.py: Session options, pages and continuation state
    - builders.py: Next-request computation (Page Request Builder)
    - predicates.py: End-of-data detection and item extraction
    - driver.py: Paginator and PaginationSession (the control loop)
    - telemetry.py: Structured logging

Usage:
    The driver reads the operation's capability from the registry, so callers
    only name the operation:

        session = Paginator().paginate("conversations.list", {"limit": 200}, call)
        async for page in session:
            ...
"""

from __future__ import annotations

from .builders import apply_state, build_next_request, continuation_state
from .definitions import (
    CallOperation,
    ContinuationState,
    CursorState,
    Page,
    PaginationOptions,
    PagingState,
    TimelineState,
)
from .driver import PaginationSession, Paginator, paginate
from .predicates import extract_items, has_more, next_cursor

__all__ = [
    "CallOperation",
    "ContinuationState",
    "CursorState",
    "TimelineState",
    "PagingState",
    "Page",
    "PaginationOptions",
    "PaginationSession",
    "Paginator",
    "paginate",
    "build_next_request",
    "continuation_state",
    "apply_state",
    "extract_items",
    "has_more",
    "next_cursor",
]
