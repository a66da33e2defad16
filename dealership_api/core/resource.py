"""Resource descriptors: what the generic CRUD machinery needs to know about one table.

Each persisted entity is described once (ORM model, payload schema, output
schema, check-constraint map) and everything else is derived: the PATCH model,
the key query model, the writable field list and the constraint lookup used to
name offending fields in error messages.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic.alias_generators import to_camel
from sqlalchemy import Column, ForeignKeyConstraint, PrimaryKeyConstraint, Table, UniqueConstraint

from dealership_api.core.presence import partial_model
from dealership_api.db.base import Base


def to_kebab(name: str) -> str:
    return name.replace("_", "-")


def _key_model(name: str, columns: tuple[Column, ...]) -> type[BaseModel]:
    fields: dict[str, Any] = {
        column.name: (column.type.python_type, Field(alias=to_kebab(column.name)))
        for column in columns
    }
    return create_model(name, __config__=ConfigDict(extra="forbid"), **fields)


class Resource:
    """Descriptor for one CRUD resource."""

    def __init__(
        self,
        name: str,
        path: str,
        model: type[Base],
        payload: type[BaseModel],
        out: type[BaseModel],
        *,
        checks: Mapping[str, str | tuple[str, ...]] | None = None,
        tag: str | None = None,
    ):
        self.name = name
        self.path = path
        self.model = model
        self.table: Table = model.__table__  # type: ignore[assignment]
        self.payload = payload
        self.out = out
        self.patch = partial_model(payload)
        self.checks = {
            name: (fields,) if isinstance(fields, str) else tuple(fields)
            for name, fields in (checks or {}).items()
        }
        self.tag = tag or path.strip("/").replace("-", " ").title()

        self.key_columns: tuple[Column, ...] = tuple(self.table.primary_key.columns)
        self.key_names: tuple[str, ...] = tuple(column.name for column in self.key_columns)
        self.key_model = _key_model(f"{model.__name__}Key", self.key_columns)
        self.fields: tuple[str, ...] = tuple(payload.model_fields)

    def __repr__(self) -> str:
        return f"Resource({self.name!r}, {self.path!r})"

    # ------------------------------------------------------------------
    # Constraint lookup
    # ------------------------------------------------------------------

    def constraint_fields(self, constraint_name: str | None) -> tuple[str, ...] | None:
        """Columns guarded by the named constraint, or None if it is not ours."""
        if not constraint_name:
            return None
        for constraint in self.table.constraints:
            if constraint.name == constraint_name and len(constraint.columns):
                return tuple(column.name for column in constraint.columns)
        for index in self.table.indexes:
            if index.unique and index.name == constraint_name:
                return tuple(column.name for column in index.columns)
        if constraint_name in self.checks:
            return self.checks[constraint_name]
        return None

    def unique_candidates(self) -> list[tuple[str, ...]]:
        candidates = [
            tuple(column.name for column in constraint.columns)
            for constraint in self.table.constraints
            if isinstance(constraint, (PrimaryKeyConstraint, UniqueConstraint))
        ]
        candidates += [
            tuple(column.name for column in index.columns)
            for index in self.table.indexes
            if index.unique
        ]
        candidates += [(column.name,) for column in self.table.columns if column.unique]
        # Generated keys are never supplied by clients, so they cannot conflict.
        writable = set(self.fields)
        deduped: list[tuple[str, ...]] = []
        for candidate in candidates:
            if candidate not in deduped and set(candidate) <= writable:
                deduped.append(candidate)
        return self._in_column_order(deduped)

    def foreign_key_candidates(self) -> list[tuple[str, ...]]:
        return self._in_column_order(
            [
                tuple(column.name for column in constraint.columns)
                for constraint in self.table.constraints
                if isinstance(constraint, ForeignKeyConstraint)
            ]
        )

    def _in_column_order(self, candidates: list[tuple[str, ...]]) -> list[tuple[str, ...]]:
        # table.constraints is a set
        position = {name: index for index, name in enumerate(self.table.columns.keys())}
        return sorted(candidates, key=lambda fields: [position[name] for name in fields])

    @staticmethod
    def external_name(field_name: str) -> str:
        """Field name as the client sees it."""
        return to_camel(field_name)
