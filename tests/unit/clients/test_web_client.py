"""Unit tests for the WebClient facade."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock

import pytest

from webapi import WebClient
from webapi.core import UnsupportedOperation, ValidationError


class FakeTransport:
    """Transport answering each operation from a queue of responses."""

    def __init__(self, responses: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._responses = {op: list(pages) for op, pages in (responses or {}).items()}
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.close = AsyncMock()

    async def call(self, op_id: str, args: dict[str, Any]) -> dict[str, Any]:
        self.calls.append((op_id, dict(args)))
        return self._responses[op_id].pop(0)


def _page(field: str, items: list[Any], cursor: str = "") -> dict[str, Any]:
    return {"ok": True, field: items, "response_metadata": {"next_cursor": cursor}}


class TestWebClientCalls:
    """Test single calls."""

    @pytest.mark.asyncio
    async def test_api_call_delegates(self):
        """api_call passes arguments straight to the transport."""
        transport = FakeTransport({"chat.postMessage": [{"ok": True, "ts": "1.0"}]})
        client = WebClient(transport=transport)

        result = await client.api_call("chat.postMessage", {"channel": "C1", "text": "hi"})

        assert result == {"ok": True, "ts": "1.0"}
        assert transport.calls == [("chat.postMessage", {"channel": "C1", "text": "hi"})]

    @pytest.mark.asyncio
    async def test_api_call_validates_item_target(self):
        """Illegal target combinations are rejected before calling."""
        transport = FakeTransport()
        client = WebClient(transport=transport)

        with pytest.raises(ValidationError):
            await client.api_call("reactions.add", {"name": "x", "file": "F1", "timestamp": "1"})

        assert transport.calls == []


class TestWebClientPagination:
    """Test pagination through the facade."""

    @pytest.mark.asyncio
    async def test_fetch_all_conversations(self):
        """conversations.list is paged until the cursor runs out."""
        transport = FakeTransport(
            {
                "conversations.list": [
                    _page("channels", [{"id": "C1"}], "next"),
                    _page("channels", [{"id": "C2"}]),
                ]
            }
        )
        client = WebClient(transport=transport)

        ids = [c["id"] async for c in client.fetch_all_conversations(types="public_channel")]

        assert ids == ["C1", "C2"]
        assert transport.calls[1] == (
            "conversations.list",
            {"types": "public_channel", "cursor": "next"},
        )

    @pytest.mark.asyncio
    async def test_fetch_all_users_and_members(self):
        """Convenience wrappers read the registered items field."""
        transport = FakeTransport(
            {
                "users.list": [_page("members", [{"id": "U1"}])],
                "conversations.members": [_page("members", ["U1", "U2"])],
            }
        )
        client = WebClient(transport=transport)

        users = [u["id"] async for u in client.fetch_all_users()]
        members = [m async for m in client.fetch_all_channel_members("C1", limit=200)]

        assert users == ["U1"]
        assert members == ["U1", "U2"]
        assert transport.calls[-1] == ("conversations.members", {"channel": "C1", "limit": 200})

    def test_paginate_unsupported(self):
        """Unpaginated operations raise before any call."""
        transport = FakeTransport()
        client = WebClient(transport=transport)

        with pytest.raises(UnsupportedOperation):
            client.paginate("chat.postMessage")
        assert transport.calls == []


class TestWebClientLifecycle:
    """Test resource ownership."""

    @pytest.mark.asyncio
    async def test_injected_transport_not_closed(self):
        """The client does not close a transport it did not create."""
        transport = FakeTransport()
        async with WebClient(transport=transport):
            pass
        transport.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_owned_transport_closed_once(self):
        """The default transport is closed once on exit."""
        client = WebClient()
        client._transport.close = AsyncMock()

        await client.close()
        await client.close()

        client._transport.close.assert_called_once()
