"""Declarative pagination table for the known operation catalog.

Every paginated operation is listed exactly once with the strategy the
generic driver should use. Operations the server accepts both cursor and
timeline (or cursor and page) arguments for are declared under cursor
pagination; their timeline arguments still work as plain filters.
"""

from __future__ import annotations

from .definitions import (
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
)
from .registry import CapabilityRegistry

PAGINATION_TABLE: tuple[tuple[str, PaginationCapability], ...] = (
    # Cursor: op -> response field holding the items
    ("apps.permissions.resources.list", CursorPagination("resources")),
    ("channels.list", CursorPagination("channels")),
    ("conversations.history", CursorPagination("messages")),
    ("conversations.list", CursorPagination("channels")),
    ("conversations.members", CursorPagination("members")),
    ("conversations.replies", CursorPagination("messages")),
    ("files.info", CursorPagination("comments")),
    ("groups.list", CursorPagination("groups")),
    ("im.list", CursorPagination("ims")),
    ("mpim.list", CursorPagination("groups")),
    ("reactions.list", CursorPagination("items")),
    ("stars.list", CursorPagination("items")),
    ("users.conversations", CursorPagination("channels")),
    ("users.list", CursorPagination("members")),
    # Timeline
    ("channels.history", TimelinePagination()),
    ("groups.history", TimelinePagination()),
    ("im.history", TimelinePagination()),
    ("mpim.history", TimelinePagination()),
    # Traditional
    ("files.list", TraditionalPaging(items_field="files")),
    ("search.all", TraditionalPaging(items_field="messages.matches", paging_field="messages.paging")),
    ("search.files", TraditionalPaging(items_field="files.matches", paging_field="files.paging")),
    (
        "search.messages",
        TraditionalPaging(items_field="messages.matches", paging_field="messages.paging"),
    ),
)

_DEFAULT_REGISTRY: CapabilityRegistry | None = None


def default_registry() -> CapabilityRegistry:
    """Registry built from PAGINATION_TABLE, created on first access."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = CapabilityRegistry(PAGINATION_TABLE)
    return _DEFAULT_REGISTRY
