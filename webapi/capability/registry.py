"""Immutable registry mapping operation identifiers to pagination capabilities.

Architecture:
    The registry is the single source of truth the classifier, the request
    builder and the driver consult. It is built once from a declarative list
    of `(op_id, capability)` pairs and is read-only afterwards, so sessions
    running concurrently can share it without locking.

Design Decisions:
    - One variant per operation: duplicates are rejected at construction
    - Read-only view: entries are exposed through MappingProxyType
    - Legacy loader: `from_registries` accepts the three per-strategy
      collections (cursor map, timeline set, traditional set) and detects
      operations registered under more than one strategy

See Also:
    - classifier: First-match strategy resolution on top of the accessors
    - catalog: Declarative table for the known operation catalog
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from ..core.enums import PaginationKind
from ..core.exceptions import ConfigurationError
from .definitions import (
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
)

logger = logging.getLogger(__name__)


class CapabilityRegistry:
    """Read-only lookup table of pagination capabilities."""

    def __init__(self, entries: Iterable[tuple[str, PaginationCapability]] = ()) -> None:
        """Build the registry.

        Args:
            entries: `(op_id, capability)` pairs; each op_id may appear once

        Raises:
            ConfigurationError: If an op_id is declared more than once
            TypeError: If a capability is not one of the known variants
        """
        table: dict[str, PaginationCapability] = {}
        duplicates: set[str] = set()
        for op_id, capability in entries:
            if not isinstance(
                capability, (CursorPagination, TimelinePagination, TraditionalPaging)
            ):
                raise TypeError(f"Unknown pagination capability for {op_id!r}: {capability!r}")
            if op_id in table:
                duplicates.add(op_id)
                continue
            table[op_id] = capability

        if duplicates:
            raise ConfigurationError(
                f"Operations declared more than once: {', '.join(sorted(duplicates))}",
                op_ids=duplicates,
            )

        self._entries: Mapping[str, PaginationCapability] = MappingProxyType(table)

    @classmethod
    def from_registries(
        cls,
        cursor: Mapping[str, str] | None = None,
        timeline: Iterable[str] = (),
        traditional: Iterable[str] = (),
        *,
        strict: bool = __debug__,
    ) -> CapabilityRegistry:
        """Build a registry from three independent per-strategy collections.

        Args:
            cursor: op_id -> name of the response field holding the items
            timeline: op_ids supporting timeline pagination
            traditional: op_ids supporting traditional paging
            strict: Fail on operations present in more than one collection.
                Defaults to on unless Python runs with -O.

        Returns:
            CapabilityRegistry with one capability per operation

        Raises:
            ConfigurationError: If strict and an operation is registered twice
        """
        cursor = dict(cursor or {})
        timeline_ops = set(timeline)
        traditional_ops = set(traditional)

        conflicts = (
            (set(cursor) & timeline_ops)
            | (set(cursor) & traditional_ops)
            | (timeline_ops & traditional_ops)
        )
        if conflicts:
            if strict:
                raise ConfigurationError(
                    "Operations registered under more than one pagination strategy: "
                    + ", ".join(sorted(conflicts)),
                    op_ids=conflicts,
                )
            logger.warning(
                "capability_registry_conflict",
                extra={"op_ids": sorted(conflicts), "resolution": "cursor>timeline>traditional"},
            )

        # First match wins: cursor, then timeline, then traditional
        entries: dict[str, PaginationCapability] = {}
        for op_id in sorted(traditional_ops):
            entries[op_id] = TraditionalPaging()
        for op_id in sorted(timeline_ops):
            entries[op_id] = TimelinePagination()
        for op_id, field_name in cursor.items():
            entries[op_id] = CursorPagination(items_field=field_name)
        return cls(entries.items())

    # --- Accessors ---------------------------------------------------------

    def cursor_field_for(self, op_id: str) -> str | None:
        """Name of the items field for a cursor-paginated operation, or None."""
        capability = self._entries.get(op_id)
        if isinstance(capability, CursorPagination):
            return capability.items_field
        return None

    def supports_timeline(self, op_id: str) -> bool:
        return isinstance(self._entries.get(op_id), TimelinePagination)

    def supports_traditional(self, op_id: str) -> bool:
        return isinstance(self._entries.get(op_id), TraditionalPaging)

    def capability_for(self, op_id: str) -> PaginationCapability | None:
        """Capability declared for an operation, or None if not paginated."""
        return self._entries.get(op_id)

    def kind_for(self, op_id: str) -> PaginationKind:
        capability = self._entries.get(op_id)
        return capability.kind if capability is not None else PaginationKind.NONE

    def operations(self, kind: PaginationKind | None = None) -> list[str]:
        """List registered operations, optionally filtered by strategy."""
        return sorted(
            op_id
            for op_id, capability in self._entries.items()
            if kind is None or capability.kind is kind
        )

    def as_mapping(self) -> Mapping[str, PaginationCapability]:
        return self._entries

    def __contains__(self, op_id: object) -> bool:
        return op_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"CapabilityRegistry({len(self._entries)} operations)"
