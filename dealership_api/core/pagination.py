"""Pagination helpers for list endpoints."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Protocol, TypeVar

from pydantic import BaseModel, Field

from dealership_api.core.exceptions import InvalidQueryParamValueError, MissingQueryParamError
from dealership_api.schemas.common import CamelModel

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# LIMIT and OFFSET are 64-bit signed integers in every supported store
MAX_WINDOW_VALUE = 2**63 - 1


class PaginationParams(BaseModel):
    """Query model for `?per-page=10&page-no=2`; both or neither must be given."""

    per_page: int | None = Field(default=None, alias="per-page", description="Items per page")
    page_no: int | None = Field(default=None, alias="page-no", description="Page number (1-based)")

    model_config = {"extra": "forbid"}

    def window(self) -> tuple[int, int] | None:
        """Return `(per_page, page_no)`, or None when listing everything."""
        if self.per_page is not None and self.page_no is None:
            raise MissingQueryParamError("page-no")
        if self.per_page is None and self.page_no is not None:
            raise MissingQueryParamError("per-page")
        if self.per_page is None or self.page_no is None:
            return None
        if self.page_no <= 0:
            raise InvalidQueryParamValueError("Query param page-no must be greater than 0")
        if self.per_page <= 0:
            raise InvalidQueryParamValueError("Query param per-page must be greater than 0")
        if self.per_page > MAX_WINDOW_VALUE:
            raise InvalidQueryParamValueError("Query param per-page is too large")
        if (self.page_no - 1) * self.per_page > MAX_WINDOW_VALUE:
            raise InvalidQueryParamValueError("Query param page-no is too large")
        return self.per_page, self.page_no


class PageSource(Protocol[T_co]):
    """Anything that can return a window of rows in a stable order."""

    async def fetch_window(self, offset: int, limit: int) -> list[T_co]: ...


@dataclass(frozen=True)
class Page(Generic[T]):
    per_page: int
    page_no: int
    items: list[T] = field(default_factory=list)


@dataclass(frozen=True)
class Pages(Generic[T]):
    per_page: int

    def offset(self, page_no: int) -> int:
        return (page_no - 1) * self.per_page

    async def get_page(self, page_no: int, source: PageSource[T]) -> Page[T]:
        items = await source.fetch_window(self.offset(page_no), self.per_page)
        return Page(per_page=self.per_page, page_no=page_no, items=list(items))


def paginate(per_page: int) -> Pages:
    return Pages(per_page=per_page)


class PageMeta(CamelModel):
    total: int
    page: int
    pages: int
    per_page: int

    @classmethod
    def build(cls, total: int, page: int, per_page: int) -> PageMeta:
        return cls(
            total=total,
            page=page,
            pages=math.ceil(total / per_page),
            per_page=per_page,
        )
