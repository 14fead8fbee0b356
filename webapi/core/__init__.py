"""Core components."""

from .enums import PaginationKind, TimelineDirection
from .exceptions import (
    CapabilityError,
    ConfigurationError,
    MalformedResponse,
    TransportFailure,
    UnsupportedOperation,
    ValidationError,
    WebAPIError,
)

__all__ = [
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
