"""CRUD router factory — one router per registered resource.

Pattern (same for every resource):
  GET    /<path>              list; `?per-page=&page-no=` for a page
  GET    /<path>/view?<key>   fetch one
  POST   /<path>              create (complete payload)
  PATCH  /<path>?<key>        partial update (tri-state payload)
  PUT    /<path>?<key>        complete update
  DELETE /<path>?<key>        delete, returning the deleted record

Keys travel as kebab-case query params, e.g. `?national-id=V123` or
`?city-number=1&state-id=2`.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from dealership_api.core.pagination import PaginationParams
from dealership_api.core.resource import Resource
from dealership_api.core.response import DataResponse, envelope
from dealership_api.db.base import get_db
from dealership_api.services.resource import ResourceService


def build_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=resource.path, tags=[resource.tag])

    out = resource.out
    key_model = resource.key_model
    payload_model = resource.payload
    patch_model = resource.patch

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _svc(session: AsyncSession) -> ResourceService:
        return ResourceService(session, resource)

    def _key(key: Any) -> dict[str, Any]:
        return key.model_dump()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------

    @router.get("", response_model=None, summary=f"List {resource.tag.lower()}")
    async def list_items(
        pagination: Annotated[PaginationParams, Query()],
        session: AsyncSession = Depends(get_db),
    ):
        items, meta = await _svc(session).list(pagination)
        return envelope([out.model_validate(item) for item in items], meta)

    @router.get("/view", response_model=DataResponse[out], summary=f"Fetch a {resource.name}")
    async def fetch_item(
        key: Annotated[key_model, Query()],
        session: AsyncSession = Depends(get_db),
    ):
        record = await _svc(session).get(_key(key))
        return {"data": out.model_validate(record)}

    @router.post(
        "",
        response_model=DataResponse[out],
        status_code=status.HTTP_201_CREATED,
        summary=f"Create a {resource.name}",
    )
    async def create_item(
        body: Annotated[payload_model, Body()],
        session: AsyncSession = Depends(get_db),
    ):
        record = await _svc(session).create(body)
        return {"data": out.model_validate(record)}

    @router.patch("", response_model=DataResponse[out], summary=f"Update a {resource.name} partially")
    async def update_item_partially(
        key: Annotated[key_model, Query()],
        body: Annotated[patch_model, Body()],
        session: AsyncSession = Depends(get_db),
    ):
        record = await _svc(session).update(_key(key), body)
        return {"data": out.model_validate(record)}

    @router.put("", response_model=DataResponse[out], summary=f"Update a {resource.name} completely")
    async def update_item_completely(
        key: Annotated[key_model, Query()],
        body: Annotated[payload_model, Body()],
        session: AsyncSession = Depends(get_db),
    ):
        record = await _svc(session).update(_key(key), body)
        return {"data": out.model_validate(record)}

    @router.delete("", response_model=DataResponse[out], summary=f"Delete a {resource.name}")
    async def delete_item(
        key: Annotated[key_model, Query()],
        session: AsyncSession = Depends(get_db),
    ):
        record = await _svc(session).delete(_key(key))
        return {"data": out.model_validate(record)}

    return router
