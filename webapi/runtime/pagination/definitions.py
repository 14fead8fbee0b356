"""Pagination session data structures.

This module defines the options a caller tunes a session with, the pages a
session yields, and the continuation state carried between calls.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from ...core.enums import PaginationKind, TimelineDirection

# Invocation capability supplied by the transport layer
CallOperation = Callable[[str, dict[str, Any]], Awaitable[Mapping[str, Any]]]


@dataclass(frozen=True)
class PaginationOptions:
    """Caller controls for one pagination session.

    Attributes:
        direction: Timeline walking direction (default: newest to oldest)
        max_pages: Stop after this many pages (None = unlimited)
        max_items: Stop once this many items were produced (None = unlimited)
        stop_when: Predicate on each page; True ends the session after that page
    """

    direction: TimelineDirection = TimelineDirection.BACKWARD
    max_pages: int | None = None
    max_items: int | None = None
    stop_when: Callable[[Page], bool] | None = None

    def __post_init__(self) -> None:
        if self.max_pages is not None and self.max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        if self.max_items is not None and self.max_items < 1:
            raise ValueError("max_items must be >= 1")


@dataclass(frozen=True)
class Page:
    """One response produced by a pagination session.

    Attributes:
        op_id: Operation identifier
        index: Zero-based position of this page in the session
        request_args: Arguments the call was made with
        response: Raw response record
        items: Items extracted from the response
        has_more: Whether the server indicated more pages
    """

    op_id: str
    index: int
    request_args: dict[str, Any]
    response: Mapping[str, Any]
    items: list[Any] = field(default_factory=list)
    has_more: bool = False


@dataclass(frozen=True)
class CursorState:
    kind: ClassVar[PaginationKind] = PaginationKind.CURSOR

    cursor: str


@dataclass(frozen=True)
class TimelineState:
    kind: ClassVar[PaginationKind] = PaginationKind.TIMELINE

    oldest: str | None = None
    latest: str | None = None


@dataclass(frozen=True)
class PagingState:
    kind: ClassVar[PaginationKind] = PaginationKind.TRADITIONAL

    page: int


ContinuationState = Union[CursorState, TimelineState, PagingState]
