"""Request argument shapes: pagination groups and item targets."""

from .arguments import (
    CursorPaginationArgs,
    TimelinePaginationArgs,
    TraditionalPagingArgs,
    validate_pagination_args,
)
from .targets import (
    TARGET_OPERATIONS,
    FileCommentTarget,
    FileTarget,
    ItemTarget,
    MessageTarget,
    requires_target,
    resolve_target,
)

__all__ = [
    "CursorPaginationArgs",
    "TimelinePaginationArgs",
    "TraditionalPagingArgs",
    "validate_pagination_args",
    "TARGET_OPERATIONS",
    "MessageTarget",
    "FileTarget",
    "FileCommentTarget",
    "ItemTarget",
    "requires_target",
    "resolve_target",
]
