"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest


class ScriptedCall:
    """In-memory invocation capability returning canned responses in order.

    A response that is an Exception instance is raised instead of returned.
    """

    def __init__(self, responses: list[Any]) -> None:
        self._responses = list(responses)
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def __call__(self, op_id: str, args: dict[str, Any]) -> Any:
        self.calls.append((op_id, dict(args)))
        if not self._responses:
            raise AssertionError(f"Unexpected call #{len(self.calls)} to {op_id}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def call_args(self) -> list[dict[str, Any]]:
        return [args for _, args in self.calls]


@pytest.fixture
def scripted_call() -> Callable[[list[Any]], ScriptedCall]:
    """Factory for ScriptedCall capabilities."""
    return ScriptedCall

