"""Generic async repository over one resource table.

Rows travel as plain dicts (column name -> value). Every read is ordered by
primary key so that offset pagination is deterministic. Lookups that match no
row raise ``NoResultFound``; callers translate it.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from dealership_api.core.resource import Resource


class ResourceRepository:
    """CRUD over ``resource.table`` using Core statements with RETURNING."""

    def __init__(self, session: AsyncSession, resource: Resource):
        self._session = session
        self._resource = resource
        self._table = resource.table

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _key_clause(self, key: dict[str, Any]):
        return and_(*(self._table.c[name] == key[name] for name in self._resource.key_names))

    def _base_query(self):
        return select(self._table).order_by(*self._resource.key_columns)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get(self, key: dict[str, Any]) -> dict[str, Any]:
        result = await self._session.execute(self._base_query().where(self._key_clause(key)))
        return dict(result.mappings().one())

    async def list_all(self) -> list[dict[str, Any]]:
        result = await self._session.execute(self._base_query())
        return [dict(row) for row in result.mappings().all()]

    async def fetch_window(self, offset: int, limit: int) -> list[dict[str, Any]]:
        result = await self._session.execute(self._base_query().offset(offset).limit(limit))
        return [dict(row) for row in result.mappings().all()]

    async def count(self) -> int:
        result = await self._session.execute(select(func.count()).select_from(self._table))
        return result.scalar_one()

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, values: dict[str, Any]) -> dict[str, Any]:
        result = await self._session.execute(
            insert(self._table).values(**values).returning(*self._table.c)
        )
        return dict(result.mappings().one())

    async def update(self, key: dict[str, Any], values: dict[str, Any]) -> dict[str, Any]:
        """Write every given column; a vanished row raises ``NoResultFound``."""
        result = await self._session.execute(
            update(self._table)
            .where(self._key_clause(key))
            .values(**values)
            .returning(*self._table.c)
        )
        return dict(result.mappings().one())

    async def delete(self, key: dict[str, Any]) -> dict[str, Any]:
        result = await self._session.execute(
            delete(self._table).where(self._key_clause(key)).returning(*self._table.c)
        )
        return dict(result.mappings().one())
