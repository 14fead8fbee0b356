"""Pagination capability model: variants, registry, classifier and catalog."""

from .catalog import PAGINATION_TABLE, default_registry
from .classifier import CapabilityClassifier, classify
from .definitions import (
    CursorPagination,
    PaginationCapability,
    TimelinePagination,
    TraditionalPaging,
)
from .registry import CapabilityRegistry

__all__ = [
    "CursorPagination",
    "TimelinePagination",
    "TraditionalPaging",
    "PaginationCapability",
    "CapabilityRegistry",
    "CapabilityClassifier",
    "classify",
    "PAGINATION_TABLE",
    "default_registry",
]
