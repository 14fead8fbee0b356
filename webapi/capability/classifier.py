"""Resolve which pagination strategy applies to an operation.

The classifier checks the cursor registry first, then timeline, then
traditional. Cursor pagination is preferred where available since it is
stable under concurrent changes to the underlying collection.
"""

from __future__ import annotations

from ..core.enums import PaginationKind
from ..core.exceptions import UnsupportedOperation
from .definitions import PaginationCapability
from .registry import CapabilityRegistry


def classify(op_id: str, registry: CapabilityRegistry) -> PaginationKind:
    """Resolve the pagination strategy for an operation.

    Args:
        op_id: Operation identifier (e.g. "conversations.list")
        registry: Capability registry to consult

    Returns:
        PaginationKind, NONE when no strategy is registered
    """
    if registry.cursor_field_for(op_id) is not None:
        return PaginationKind.CURSOR
    if registry.supports_timeline(op_id):
        return PaginationKind.TIMELINE
    if registry.supports_traditional(op_id):
        return PaginationKind.TRADITIONAL
    return PaginationKind.NONE


class CapabilityClassifier:
    """Classifier bound to one registry."""

    def __init__(self, registry: CapabilityRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> CapabilityRegistry:
        return self._registry

    def resolve(self, op_id: str) -> PaginationKind:
        return classify(op_id, self._registry)

    def require(self, op_id: str) -> PaginationCapability:
        """Return the capability for an operation that must be paginated.

        Raises:
            UnsupportedOperation: If no strategy is registered for op_id
        """
        capability = self._registry.capability_for(op_id)
        if capability is None or self.resolve(op_id) is PaginationKind.NONE:
            raise UnsupportedOperation(
                f"Auto-pagination is not supported for {op_id!r}", op_id=op_id
            )
        return capability
