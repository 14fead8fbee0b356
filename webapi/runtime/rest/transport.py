"""REST transport: the default invocation capability for the pagination driver."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from ...config import BASE_URL, DEFAULT_TIMEOUT
from ...core.exceptions import TransportFailure
from .http_client import HTTPClient, ResponseHook

logger = logging.getLogger(__name__)


class RESTTransport:
    """Invoke remote operations by name over HTTP.

    Each operation is a POST of the call arguments as JSON to
    `{base_url}{op_id}`. Authentication is not handled here; pass whatever
    headers the server expects.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout, headers=headers)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def call(self, op_id: str, args: dict[str, Any]) -> dict[str, Any]:
        """Invoke an operation.

        Args:
            op_id: Operation identifier, used as the URL path
            args: Call arguments

        Returns:
            Decoded response body

        Raises:
            TransportFailure: On HTTP errors, connection errors or a non-object body
        """
        try:
            data = await self._http.post(op_id, json=args)
        except aiohttp.ClientResponseError as e:
            raise TransportFailure(
                f"{op_id} failed with HTTP {e.status}: {e.message}",
                status_code=e.status,
                op_id=op_id,
            ) from e
        except aiohttp.ClientError as e:
            raise TransportFailure(f"{op_id} failed: {e}", op_id=op_id) from e

        if not isinstance(data, dict):
            raise TransportFailure(
                f"{op_id} returned a non-object body: {type(data).__name__}", op_id=op_id
            )
        logger.debug("operation_called", extra={"op_id": op_id, "ok": data.get("ok")})
        return data

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
