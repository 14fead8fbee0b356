"""Pagination argument groups.

Operations that support a pagination strategy accept the matching group of
request arguments alongside their own. These models validate just that
group out of a caller's base arguments; every other key is left to the
server.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..config import DEFAULT_COUNT, DEFAULT_PAGE, MAX_CURSOR_LIMIT
from ..core.enums import PaginationKind
from ..core.exceptions import ValidationError


class CursorPaginationArgs(BaseModel):
    """`limit` / `cursor` arguments of cursor-paginated operations."""

    limit: int | None = Field(None, ge=1, le=MAX_CURSOR_LIMIT)
    cursor: str | None = None

    model_config = ConfigDict(frozen=True, extra="ignore")


class TimelinePaginationArgs(BaseModel):
    """`oldest` / `latest` / `inclusive` / `count` arguments of timeline operations."""

    oldest: str | None = None
    latest: str | None = None
    inclusive: bool | None = None
    count: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("oldest", "latest", mode="before")
    @classmethod
    def validate_timestamp(cls, v: Any) -> Any:
        """Accept numeric timestamps and require a parseable value."""
        if v is None:
            return v
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            v = str(v)
        if isinstance(v, str):
            try:
                Decimal(v)
            except InvalidOperation:
                raise ValueError(f"not a timestamp: {v!r}") from None
        return v

    def bounds(self) -> tuple[Decimal | None, Decimal | None]:
        """The (oldest, latest) range as Decimals."""
        return (
            Decimal(self.oldest) if self.oldest is not None else None,
            Decimal(self.latest) if self.latest is not None else None,
        )


class TraditionalPagingArgs(BaseModel):
    """`page` / `count` arguments of page-numbered operations."""

    page: int = Field(DEFAULT_PAGE, ge=1)
    count: int = Field(DEFAULT_COUNT, ge=1)

    model_config = ConfigDict(frozen=True, extra="ignore")


_MODELS: dict[PaginationKind, type[BaseModel]] = {
    PaginationKind.CURSOR: CursorPaginationArgs,
    PaginationKind.TIMELINE: TimelinePaginationArgs,
    PaginationKind.TRADITIONAL: TraditionalPagingArgs,
}


def validate_pagination_args(kind: PaginationKind, args: dict[str, Any]) -> BaseModel:
    """Validate the pagination argument group for a strategy.

    Args:
        kind: Strategy the arguments will be driven with
        args: Caller's base arguments (other keys are ignored)

    Returns:
        The validated argument model

    Raises:
        ValidationError: If the group is invalid
        ValueError: If kind is PaginationKind.NONE
    """
    model = _MODELS.get(kind)
    if model is None:
        raise ValueError(f"No pagination arguments for {kind.value!r}")
    try:
        return model.model_validate(args)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid {kind.value} pagination arguments: {e}") from e
