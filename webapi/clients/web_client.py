"""WebClient facade over the transport and the pagination driver.

Architecture:
    WebClient ties together:
    - A transport providing the `(op_id, args) -> response` capability
    - Argument checks that run before any call (item targets)
    - The Paginator for operations registered with a pagination strategy
    - Convenience wrappers for common "fetch everything" calls

Design Decisions:
    - Transport injection allows testing with in-memory fakes
    - The client owns (and closes) only a transport it created itself
    - Context manager pattern ensures proper resource cleanup
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Protocol

from ..capability.registry import CapabilityRegistry
from ..config import BASE_URL, DEFAULT_TIMEOUT
from ..methods.targets import requires_target, resolve_target
from ..runtime.pagination import PaginationOptions, PaginationSession, Paginator
from ..runtime.rest import RESTTransport

logger = logging.getLogger(__name__)


class Transport(Protocol):
    async def call(self, op_id: str, args: dict[str, Any]) -> dict[str, Any]: ...

    async def close(self) -> None: ...


class WebClient:
    """High-level client for calling and auto-paginating remote operations.

    Example:
        >>> async with WebClient(headers={"Authorization": "Bearer ..."}) as client:
        ...     async for channel in client.fetch_all_conversations(types="public_channel"):
        ...         print(channel["name"])
    """

    def __init__(
        self,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
        registry: CapabilityRegistry | None = None,
        transport: Transport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API root; operation ids are appended to it
            timeout: Per-call timeout in seconds
            headers: Headers sent with every call
            registry: Capability registry (default: the built-in catalog)
            transport: Custom transport (default: RESTTransport)
        """
        self._owns_transport = transport is None
        self._transport: Transport = transport or RESTTransport(
            base_url=base_url, timeout=timeout, headers=headers
        )
        self._paginator = Paginator(registry)
        self._closed = False

    @property
    def paginator(self) -> Paginator:
        return self._paginator

    async def api_call(self, op_id: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
        """Invoke a single operation.

        Raises:
            ValidationError: If the arguments name an illegal item target
            TransportFailure: If the call fails
        """
        args = dict(args or {})
        if requires_target(op_id):
            resolve_target(op_id, args)
        return await self._transport.call(op_id, args)

    def paginate(
        self,
        op_id: str,
        args: dict[str, Any] | None = None,
        *,
        options: PaginationOptions | None = None,
    ) -> PaginationSession:
        """Start an auto-pagination session for an operation.

        Raises:
            UnsupportedOperation: If no pagination strategy is registered
            ValidationError: If the pagination arguments are invalid
        """
        return self._paginator.paginate(op_id, args, self._transport.call, options=options)

    def items(
        self,
        op_id: str,
        args: dict[str, Any] | None = None,
        *,
        options: PaginationOptions | None = None,
    ) -> AsyncIterator[Any]:
        """Flattened items of every page of an operation."""
        return self.paginate(op_id, args, options=options).items()

    # --- Convenience wrappers ----------------------------------------------

    def fetch_all_conversations(self, **args: Any) -> AsyncIterator[Any]:
        """Every conversation visible to the caller (`conversations.list`)."""
        return self.items("conversations.list", args)

    def fetch_all_users(self, **args: Any) -> AsyncIterator[Any]:
        """Every member of the workspace (`users.list`)."""
        return self.items("users.list", args)

    def fetch_all_channel_members(self, channel: str, **args: Any) -> AsyncIterator[Any]:
        """Every member id of a conversation (`conversations.members`)."""
        return self.items("conversations.members", {"channel": channel, **args})

    async def close(self) -> None:
        """Close the client and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing WebClient")
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> WebClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()
