"""Auto-pagination driver.

This module provides the Paginator that turns an operation identifier, the
caller's base arguments and an invocation capability into a lazy,
single-pass sequence of pages.

Architecture:
    Paginator.paginate() resolves the strategy and validates the pagination
    arguments up front, then hands back a PaginationSession. Iterating the
    session runs the loop:
        build request -> call -> check success -> extract items ->
        decide continuation -> yield page -> (cancel check) -> next request

Design Decisions:
    - Strictly sequential: each request depends on the previous response
    - Lazy: no call is made until the session is iterated
    - Single pass: a session cannot be iterated twice; call paginate() again
    - Cooperative cancellation: checked before every call, never mid-flight
    - No retries: call failures end the session with TransportFailure
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Callable, Mapping
from time import perf_counter
from types import MappingProxyType
from typing import Any

from ...capability.catalog import default_registry
from ...capability.classifier import CapabilityClassifier
from ...capability.definitions import PaginationCapability
from ...capability.registry import CapabilityRegistry
from ...core.enums import PaginationKind
from ...core.exceptions import MalformedResponse, TransportFailure, WebAPIError
from ...methods.arguments import validate_pagination_args
from .builders import apply_state, build_next_request, continuation_state
from .definitions import CallOperation, ContinuationState, Page, PaginationOptions
from .predicates import extract_items, has_more
from .telemetry import (
    log_page_fetched,
    log_session_cancelled,
    log_session_complete,
    log_session_error,
    log_session_started,
)


class PaginationSession:
    """One auto-pagination run for one operation.

    Iterate it with `async for` to receive Page objects as they arrive, or
    use items() for a flattened stream of items.
    """

    def __init__(
        self,
        *,
        op_id: str,
        capability: PaginationCapability,
        base_args: Mapping[str, Any],
        call: CallOperation,
        options: PaginationOptions | None = None,
    ) -> None:
        self._op_id = op_id
        self._capability = capability
        self._base_args: Mapping[str, Any] = MappingProxyType(dict(base_args))
        self._call = call
        self._options = options or PaginationOptions()
        self._state: ContinuationState | None = None
        self._started = False
        self._cancelled = False
        self._done = False
        self._pages = 0
        self._items = 0

    @property
    def op_id(self) -> str:
        return self._op_id

    @property
    def kind(self) -> PaginationKind:
        return self._capability.kind

    @property
    def capability(self) -> PaginationCapability:
        return self._capability

    @property
    def base_args(self) -> Mapping[str, Any]:
        return self._base_args

    @property
    def state(self) -> ContinuationState | None:
        """Continuation state for the next call (None before the second call)."""
        return self._state

    @property
    def pages_fetched(self) -> int:
        return self._pages

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        return self._done

    def cancel(self) -> None:
        """Request that no further calls are made.

        A call already in flight completes and its page is still produced.
        """
        self._cancelled = True

    def __aiter__(self) -> AsyncIterator[Page]:
        if self._started:
            raise RuntimeError(
                f"Pagination session for {self._op_id!r} was already iterated; "
                "call paginate() again for a new pass"
            )
        self._started = True
        return self._run()

    async def items(self) -> AsyncIterator[Any]:
        """Yield items from every page in order.

        Stops at exactly max_items when that option is set.
        """
        limit = self._options.max_items
        produced = 0
        async for page in self:
            for item in page.items:
                if limit is not None and produced >= limit:
                    return
                produced += 1
                yield item

    async def collect(
        self,
        reducer: Callable[[Any, Page, int], Any] | None = None,
        initial: Any = None,
    ) -> Any:
        """Drain the session.

        Args:
            reducer: Optional fold `(accumulator, page, index) -> accumulator`
            initial: Starting accumulator for the reducer

        Returns:
            List of pages without a reducer, otherwise the final accumulator
        """
        if reducer is None:
            return [page async for page in self]
        accumulator = initial
        async for page in self:
            accumulator = reducer(accumulator, page, page.index)
        return accumulator

    async def _run(self) -> AsyncIterator[Page]:
        options = self._options
        log_session_started(op_id=self._op_id, kind=self.kind)

        request_args = build_next_request(self._capability, self._base_args)
        index = 0
        reason = "exhausted"
        try:
            while True:
                if self._cancelled:
                    log_session_cancelled(op_id=self._op_id, pages=self._pages)
                    return

                call_start = perf_counter()
                response = await self._invoke(request_args)
                latency_ms = (perf_counter() - call_start) * 1000.0

                items = extract_items(self._capability, response, self._op_id)
                more = has_more(
                    self._capability,
                    response,
                    request_args=request_args,
                    direction=options.direction,
                    op_id=self._op_id,
                )
                page = Page(
                    op_id=self._op_id,
                    index=index,
                    request_args=request_args,
                    response=response,
                    items=items,
                    has_more=more,
                )
                self._pages += 1
                self._items += len(items)
                log_page_fetched(
                    op_id=self._op_id,
                    page_index=index,
                    items=len(items),
                    has_more=more,
                    latency_ms=latency_ms,
                )

                yield page

                if not more:
                    break
                if options.max_pages is not None and self._pages >= options.max_pages:
                    reason = "max_pages"
                    break
                if options.max_items is not None and self._items >= options.max_items:
                    reason = "max_items"
                    break
                if options.stop_when is not None and options.stop_when(page):
                    reason = "stop_when"
                    break

                self._state = continuation_state(
                    self._capability,
                    response,
                    request_args,
                    direction=options.direction,
                    op_id=self._op_id,
                )
                request_args = apply_state(self._base_args, self._state)
                index += 1
        except WebAPIError as e:
            log_session_error(
                op_id=self._op_id,
                page_index=index,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        finally:
            self._done = True

        log_session_complete(
            op_id=self._op_id, pages=self._pages, items=self._items, reason=reason
        )

    async def _invoke(self, request_args: dict[str, Any]) -> Mapping[str, Any]:
        try:
            response = await self._call(self._op_id, dict(request_args))
        except WebAPIError:
            raise
        except Exception as e:
            raise TransportFailure(f"Call to {self._op_id} failed: {e}", op_id=self._op_id) from e

        if not isinstance(response, Mapping):
            raise MalformedResponse(
                f"Response for {self._op_id} is not a mapping: {type(response).__name__}",
                op_id=self._op_id,
            )
        if response.get("ok") is False:
            error = response.get("error")
            raise TransportFailure(
                f"Call to {self._op_id} returned an error: {error}",
                error=error,
                op_id=self._op_id,
            )
        return response


class Paginator:
    """Creates pagination sessions against a capability registry."""

    def __init__(self, registry: CapabilityRegistry | None = None) -> None:
        """Initialize paginator.

        Args:
            registry: Capability registry (default: the built-in catalog)
        """
        self._classifier = CapabilityClassifier(registry or default_registry())

    @property
    def registry(self) -> CapabilityRegistry:
        return self._classifier.registry

    def supports(self, op_id: str) -> bool:
        return self._classifier.resolve(op_id).paginated

    def paginate(
        self,
        op_id: str,
        base_args: Mapping[str, Any] | None,
        call: CallOperation,
        *,
        options: PaginationOptions | None = None,
    ) -> PaginationSession:
        """Start a pagination session.

        No call is made until the returned session is iterated.

        Args:
            op_id: Operation identifier (e.g. "conversations.list")
            base_args: Arguments sent with every call
            call: Async invocation capability `(op_id, args) -> response`
            options: Session options

        Returns:
            PaginationSession

        Raises:
            UnsupportedOperation: If no strategy is registered for op_id
            ValidationError: If the pagination arguments are invalid
        """
        capability = self._classifier.require(op_id)
        base_args = dict(base_args or {})
        validate_pagination_args(capability.kind, base_args)
        return PaginationSession(
            op_id=op_id,
            capability=capability,
            base_args=base_args,
            call=call,
            options=options,
        )


def paginate(
    op_id: str,
    base_args: Mapping[str, Any] | None,
    call: CallOperation,
    *,
    registry: CapabilityRegistry | None = None,
    options: PaginationOptions | None = None,
) -> PaginationSession:
    """Start a pagination session with a one-off Paginator."""
    return Paginator(registry).paginate(op_id, base_args, call, options=options)
