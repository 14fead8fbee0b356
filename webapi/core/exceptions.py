"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Iterable


class WebAPIError(Exception):
    """Base exception for all library errors."""

    pass


class CapabilityError(WebAPIError):
    """Capability is unsupported or unavailable."""

    pass


class UnsupportedOperation(CapabilityError):
    """Auto-pagination requested for an operation with no registered strategy."""

    def __init__(self, message: str, op_id: str | None = None) -> None:
        super().__init__(message)
        self.op_id = op_id


class ConfigurationError(WebAPIError):
    """Capability table is inconsistent (duplicate or conflicting registrations)."""

    def __init__(self, message: str, op_ids: Iterable[str] | None = None) -> None:
        super().__init__(message)
        self.op_ids = sorted(op_ids or [])


class TransportFailure(WebAPIError):
    """The invocation capability failed or the server reported an error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error: str | None = None,
        op_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.op_id = op_id


class MalformedResponse(WebAPIError):
    """Response is missing a field the pagination strategy depends on."""

    def __init__(
        self,
        message: str,
        op_id: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.op_id = op_id
        self.field = field


class ValidationError(WebAPIError):
    """Request arguments failed validation."""

    pass
