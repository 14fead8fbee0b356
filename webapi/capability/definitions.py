"""Pagination capability variants.

Each remote operation that supports auto-pagination is described by exactly
one of the capability variants below. Together they form a closed tagged
union: the `kind` class attribute identifies the strategy and the instance
fields carry the per-operation metadata the driver needs.

Design Decisions:
    - Frozen dataclasses: Capabilities are static configuration, never mutated
    - Dotted field paths: Some operations nest their items or paging block
      inside a result container (e.g. "messages.matches")
    - No "none" variant instance: Absence from the registry means unsupported
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from ..config import DEFAULT_TIMELINE_PAGE_SIZE
from ..core.enums import PaginationKind


@dataclass(frozen=True)
class CursorPagination:
    """Continuation via the server's `response_metadata.next_cursor` token.

    Attributes:
        items_field: Response field holding the page of items (e.g. "channels")
    """

    kind: ClassVar[PaginationKind] = PaginationKind.CURSOR

    items_field: str

    def __post_init__(self) -> None:
        if not self.items_field:
            raise ValueError("CursorPagination requires an items_field")


@dataclass(frozen=True)
class TimelinePagination:
    """Continuation by moving the `oldest`/`latest` bound past the last seen item.

    Attributes:
        items_field: Response field holding the page of items
        timestamp_key: Item field holding the item timestamp
        page_size_key: Request argument carrying the page size
        default_page_size: Page size the server applies when none is sent
    """

    kind: ClassVar[PaginationKind] = PaginationKind.TIMELINE

    items_field: str = "messages"
    timestamp_key: str = "ts"
    page_size_key: str = "count"
    default_page_size: int = DEFAULT_TIMELINE_PAGE_SIZE


@dataclass(frozen=True)
class TraditionalPaging:
    """Continuation by incrementing a 1-based `page` with a fixed `count`.

    Attributes:
        items_field: Response field holding the page of items (None = not extracted)
        paging_field: Response field holding the server paging block
    """

    kind: ClassVar[PaginationKind] = PaginationKind.TRADITIONAL

    items_field: str | None = None
    paging_field: str = "paging"


PaginationCapability = Union[CursorPagination, TimelinePagination, TraditionalPaging]
