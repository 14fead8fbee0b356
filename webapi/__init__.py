"""webapi - Typed operation registry and auto-pagination for web API clients."""

from .capability import (
    PAGINATION_TABLE,
    CapabilityClassifier,
    CapabilityRegistry,
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
    classify,
    default_registry,
)
from .clients import WebClient
from .core import (
    CapabilityError,
    ConfigurationError,
    MalformedResponse,
    PaginationKind,
    TimelineDirection,
    TransportFailure,
    UnsupportedOperation,
    ValidationError,
    WebAPIError,
)
from .methods import (
    FileCommentTarget,
    FileTarget,
    ItemTarget,
    MessageTarget,
    resolve_target,
)
from .runtime import (
    HTTPClient,
    Page,
    PaginationOptions,
    PaginationSession,
    Paginator,
    RESTTransport,
    paginate,
)

__version__ = "0.1.0"

__all__ = [
    # Capability model
    "CursorPagination",
    "TimelinePagination",
    "TraditionalPaging",
    "PaginationCapability",
    "CapabilityRegistry",
    "CapabilityClassifier",
    "classify",
    "PAGINATION_TABLE",
    "default_registry",
    # Pagination
    "Page",
    "PaginationOptions",
    "PaginationSession",
    "Paginator",
    "paginate",
    # Transport & client
    "HTTPClient",
    "RESTTransport",
    "WebClient",
    # Arguments
    "MessageTarget",
    "FileTarget",
    "FileCommentTarget",
    "ItemTarget",
    "resolve_target",
    # Enums & errors
    "PaginationKind",
    "TimelineDirection",
    "WebAPIError",
    "CapabilityError",
    "UnsupportedOperation",
    "ConfigurationError",
    "TransportFailure",
    "MalformedResponse",
    "ValidationError",
]
