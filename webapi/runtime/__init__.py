"""Runtime orchestration components."""

from .pagination import Page, PaginationOptions, PaginationSession, Paginator, paginate
from .rest import HTTPClient, RESTTransport

__all__ = [
    "Page",
    "PaginationOptions",
    "PaginationSession",
    "Paginator",
    "paginate",
    "HTTPClient",
    "RESTTransport",
]
