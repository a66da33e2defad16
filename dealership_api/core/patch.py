"""Merge a tri-state update payload onto a previously loaded record."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dealership_api.core.presence import FieldValue


def resolve(payload: Mapping[str, FieldValue[Any]], existing: Mapping[str, Any]) -> dict[str, Any]:
    """Return the fully resolved record to persist.

    Every field of ``existing`` is present in the result: absent fields keep
    their stored value, null fields become ``None`` and present fields take
    the new value. Payload entries for fields the record does not have are
    ignored; the payload model rejects unknown keys before this point.
    """
    resolved = dict(existing)
    for name, value in payload.items():
        if name in resolved:
            resolved[name] = value.or_else(resolved[name])
    return resolved
