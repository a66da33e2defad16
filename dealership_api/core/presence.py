"""Tri-state field values for partial updates.

A field of an update payload is in exactly one of three states:

* ``ABSENT``  — the client did not mention the field; keep the stored value.
* ``NULL``    — the client sent ``null``; clear the stored value.
* ``PRESENT`` — the client sent a concrete value.

Plain ``Optional`` decoding collapses the first two, so payloads are decoded
with pydantic and the states are read back from ``model_fields_set``.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, create_model

T = TypeVar("T")


class _UnsetType:
    """Sentinel for a field left out of a patch; distinct from ``None``."""

    _instance: _UnsetType | None = None

    def __new__(cls) -> _UnsetType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _UnsetType()


class Presence(str, enum.Enum):
    ABSENT = "absent"
    NULL = "null"
    PRESENT = "present"


@dataclass(frozen=True)
class FieldValue(Generic[T]):
    presence: Presence
    value: T | None = None

    @classmethod
    def absent(cls) -> FieldValue[T]:
        return cls(Presence.ABSENT)

    @classmethod
    def null(cls) -> FieldValue[T]:
        return cls(Presence.NULL)

    @classmethod
    def of(cls, value: T) -> FieldValue[T]:
        if value is None:
            return cls(Presence.NULL)
        return cls(Presence.PRESENT, value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], key: str) -> FieldValue[Any]:
        """Apply the JSON rule: missing key, explicit null, or a value."""
        if key not in data:
            return cls.absent()
        return cls.of(data[key])

    @property
    def is_absent(self) -> bool:
        return self.presence is Presence.ABSENT

    def to_optional(self) -> T | None:
        """Collapse ``ABSENT`` and ``NULL`` into ``None``."""
        return self.value if self.presence is Presence.PRESENT else None

    def to_patch(self) -> T | None | _UnsetType:
        """Keep all three states: ``UNSET``, ``None`` or the value."""
        if self.presence is Presence.ABSENT:
            return UNSET
        return self.to_optional()

    def or_else(self, current: Any) -> Any:
        if self.presence is Presence.ABSENT:
            return current
        return self.to_optional()


def field_values(payload: BaseModel) -> dict[str, FieldValue[Any]]:
    """Read the tri-state of every declared field of a validated payload."""
    values: dict[str, FieldValue[Any]] = {}
    for name in type(payload).model_fields:
        if name not in payload.model_fields_set:
            values[name] = FieldValue.absent()
        else:
            values[name] = FieldValue.of(getattr(payload, name))
    return values


def partial_model(complete: type[BaseModel], name: str | None = None) -> type[BaseModel]:
    """Derive the PATCH payload model from the complete (PUT/POST) one.

    Every field becomes optional but keeps its annotation, so ``null`` is
    only accepted where the complete model already allows ``None``. The
    ``None`` default is never validated and never reported as set, which is
    what lets ``field_values`` tell a missing key apart from ``null``.
    """
    fields: dict[str, Any] = {
        field_name: (info.annotation, None)
        for field_name, info in complete.model_fields.items()
    }
    model_name = name or complete.__name__.replace("Payload", "") + "Patch"
    return create_model(model_name, __base__=complete.__base__, **fields)
