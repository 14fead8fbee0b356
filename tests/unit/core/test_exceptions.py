"""Unit tests for the exception hierarchy."""

from webapi.core import (
    CapabilityError,
    ConfigurationError,
    MalformedResponse,
    TransportFailure,
    UnsupportedOperation,
    ValidationError,
    WebAPIError,
)


def test_unsupported_operation_is_capability_error():
    """UnsupportedOperation carries the operation and is a CapabilityError."""
    error = UnsupportedOperation("not paginated", op_id="chat.postMessage")
    assert error.op_id == "chat.postMessage"
    assert isinstance(error, CapabilityError)
    assert isinstance(error, WebAPIError)


def test_transport_failure_context():
    """TransportFailure keeps status code, server error and operation."""
    error = TransportFailure("boom", status_code=503, error="service_unavailable", op_id="users.list")
    assert str(error) == "boom"
    assert error.status_code == 503
    assert error.error == "service_unavailable"
    assert error.op_id == "users.list"


def test_malformed_response_field():
    """MalformedResponse names the missing field."""
    error = MalformedResponse("missing", op_id="users.list", field="members")
    assert error.field == "members"
    assert isinstance(error, WebAPIError)


def test_configuration_error_sorts_op_ids():
    """ConfigurationError reports offending operations sorted."""
    error = ConfigurationError("dup", op_ids={"stars.list", "reactions.list"})
    assert error.op_ids == ["reactions.list", "stars.list"]


def test_validation_error_is_library_error():
    """ValidationError derives from the library base class."""
    assert issubclass(ValidationError, WebAPIError)
    assert not issubclass(ValidationError, ValueError)
