"""REST runtime abstractions."""

from .http_client import HTTPClient
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
]
