"""Structured logging for pagination sessions.

This module provides telemetry hooks for pagination sessions, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from ...core.enums import PaginationKind

logger = logging.getLogger(__name__)


def log_session_started(*, op_id: str, kind: PaginationKind) -> None:
    logger.debug("pagination_session_started", extra={"op_id": op_id, "kind": kind.value})


def log_page_fetched(
    *,
    op_id: str,
    page_index: int,
    items: int,
    has_more: bool,
    latency_ms: float | None = None,
) -> None:
    """Log one fetched page.

    Args:
        op_id: Operation identifier
        page_index: Zero-based index of the page
        items: Number of items extracted from the page
        has_more: Whether the server indicated another page
        latency_ms: Call latency in milliseconds (optional)
    """
    logger.info(
        "pagination_page_fetched",
        extra={
            "op_id": op_id,
            "page_index": page_index,
            "items": items,
            "has_more": has_more,
            "latency_ms": latency_ms,
        },
    )


def log_session_complete(*, op_id: str, pages: int, items: int, reason: str) -> None:
    """Log the end of a session.

    Args:
        op_id: Operation identifier
        pages: Pages produced
        items: Items produced
        reason: Why the session ended (e.g. "exhausted", "max_pages", "stop_when")
    """
    logger.info(
        "pagination_session_complete",
        extra={"op_id": op_id, "pages": pages, "items": items, "reason": reason},
    )


def log_session_cancelled(*, op_id: str, pages: int) -> None:
    logger.info("pagination_session_cancelled", extra={"op_id": op_id, "pages": pages})


def log_session_error(
    *,
    op_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a session terminated by an error.

    Args:
        op_id: Operation identifier
        page_index: Zero-based index of the page being fetched
        error_type: Exception class name (e.g. "TransportFailure")
        error_message: Error message
    """
    logger.error(
        "pagination_session_error",
        extra={
            "op_id": op_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
