"""Validated listing parameters (page/limit and enum filters) and pagination metadata."""

import math
from typing import Annotated, TypeVar

from fastapi import Depends, Query
from pydantic import BaseModel, Field

from jobboard.core.config import Settings, get_settings
from jobboard.core.errors import ValidationError
from jobboard.models.enums import CanonicalEnum

E = TypeVar("E", bound=CanonicalEnum)


class ListParams(BaseModel):
    """Page and limit after bounds checks; offset derived for the store query."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Pagination(BaseModel):
    """Pagination block returned alongside list payloads."""

    total: int
    page: int
    limit: int
    total_pages: int

    @classmethod
    def build(cls, total: int, params: ListParams) -> "Pagination":
        return cls(
            total=total,
            page=params.page,
            limit=params.limit,
            total_pages=math.ceil(total / params.limit) if total else 0,
        )


def list_params(
    settings: Annotated[Settings, Depends(get_settings)],
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    limit: Annotated[int | None, Query(ge=1, description="Items per page")] = None,
) -> ListParams:
    """Dependency: page/limit from the query string, limit capped by PAGINATION_MAX_LIMIT."""
    if limit is None:
        limit = settings.PAGINATION_DEFAULT_LIMIT
    if limit > settings.PAGINATION_MAX_LIMIT:
        raise ValidationError(
            f"limit must be between 1 and {settings.PAGINATION_MAX_LIMIT}"
        )
    return ListParams(page=page, limit=limit)


def parse_filter(enum_cls: type[E], value: str | None, field: str) -> E | None:
    """Normalize an optional filter value into enum_cls; unknown values raise ValidationError."""
    if value is None or not value.strip():
        return None
    try:
        return enum_cls.parse(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {field} filter") from e
