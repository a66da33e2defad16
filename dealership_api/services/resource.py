"""Resource service — the CRUD façade shared by every resource.

Each operation is one linear sequence: load existing → resolve update →
persist → translate errors, or page → count → return. Storage errors never
leave this layer untranslated; see core/constraints.py.

Rule: No FastAPI here. The repository owns the SQL.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from dealership_api.core.constraints import Action, translating
from dealership_api.core.pagination import PageMeta, PaginationParams, paginate
from dealership_api.core.patch import resolve
from dealership_api.core.presence import field_values
from dealership_api.core.resource import Resource
from dealership_api.repositories.base import ResourceRepository

Record = dict[str, Any]


class ResourceService:
    def __init__(self, session: AsyncSession, resource: Resource):
        self._resource = resource
        self._repo = ResourceRepository(session, resource)

    async def list(self, params: PaginationParams) -> tuple[list[Record], PageMeta | None]:
        window = params.window()
        if window is None:
            with translating(self._resource, Action.LIST):
                return await self._repo.list_all(), None

        per_page, page_no = window
        with translating(self._resource, Action.LIST):
            page = await paginate(per_page).get_page(page_no, self._repo)
            # Not in the page's transaction: metadata may lag concurrent writes.
            total = await self._repo.count()
        return page.items, PageMeta.build(total, page_no, per_page)

    async def get(self, key: Record) -> Record:
        with translating(self._resource, Action.FETCH):
            return await self._repo.get(key)

    async def create(self, payload: BaseModel) -> Record:
        with translating(self._resource, Action.CREATE):
            return await self._repo.create(payload.model_dump())

    async def update(self, key: Record, payload: BaseModel) -> Record:
        """Apply a partial (PATCH) or complete (PUT) payload to the keyed row."""
        existing = await self.get(key)
        resolved = resolve(field_values(payload), existing)
        values = {name: resolved[name] for name in self._resource.fields}
        with translating(self._resource, Action.UPDATE):
            return await self._repo.update(key, values)

    async def delete(self, key: Record) -> Record:
        with translating(self._resource, Action.DELETE):
            return await self._repo.delete(key)
