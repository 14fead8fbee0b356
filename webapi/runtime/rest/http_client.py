"""HTTP client helper."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT

ResponseHook = Callable[[aiohttp.ClientResponse], None]


class HTTPClient:
    """Async HTTP client wrapper around one lazily created aiohttp session."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.headers = dict(headers or {})
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callback invoked with every response before it is decoded."""
        self._response_hooks.append(hook)

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        async with self.session.post(self._url(url), json=json, headers=headers) as response:
            return await self._handle(response)

    async def _handle(self, response: aiohttp.ClientResponse) -> Any:
        for hook in self._response_hooks:
            hook(response)
        response.raise_for_status()
        return await response.json()

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
