"""Standardized JSON response envelope helpers."""


from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from dealership_api.core.pagination import PageMeta

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Non-paginated response envelope: `{ data: ... }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class ListResponse(BaseModel, Generic[T]):
    """Paginated list response envelope: `{ data: [...], pagination: {...} }`"""

    data: list[T]
    pagination: PageMeta

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


def envelope(items: Sequence[Any], pagination: PageMeta | None) -> DataResponse | ListResponse:
    """Wrap list results, adding pagination metadata only for paginated requests."""
    if pagination is None:
        return DataResponse(data=list(items))
    return ListResponse(data=list(items), pagination=pagination)
