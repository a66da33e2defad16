"""Translate storage failures into domain errors.

This is the only module that looks inside SQLAlchemy / DBAPI exceptions. The
constraint *kind* is read from the driver's error code (PostgreSQL SQLSTATE or
SQLite extended result code), never from the message text, and the constraint
name (when the driver reports one) is mapped back to the payload fields that
caused it.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy.exc import DBAPIError, NoResultFound, SQLAlchemyError

from dealership_api.core.exceptions import (
    AppException,
    DomainValidationError,
    InvalidCreateError,
    InvalidUpdateError,
    ResourceNotFoundError,
    UnexpectedError,
)
from dealership_api.core.resource import Resource

logger = logging.getLogger(__name__)


class Action(str, enum.Enum):
    CREATE = "create"
    FETCH = "fetch"
    LIST = "list"
    UPDATE = "update"
    DELETE = "delete"


class ConstraintKind(str, enum.Enum):
    UNIQUE = "unique"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"


@dataclass(frozen=True)
class ConstraintViolation:
    kind: ConstraintKind
    constraint_name: str | None = None


_PG_SQLSTATES = {
    "23505": ConstraintKind.UNIQUE,
    "23503": ConstraintKind.FOREIGN_KEY,
    "23514": ConstraintKind.CHECK,
}

# SQLite extended result codes (sqlite3.SQLITE_CONSTRAINT_*)
_SQLITE_CODES = {
    2067: ConstraintKind.UNIQUE,
    1555: ConstraintKind.UNIQUE,  # PRIMARYKEY
    787: ConstraintKind.FOREIGN_KEY,
    275: ConstraintKind.CHECK,
}


def _driver_errors(exc: BaseException) -> Iterator[BaseException]:
    """The DBAPI error and whatever it wraps (async adapters chain the real one)."""
    seen: set[int] = set()
    current: BaseException | None = exc.orig if isinstance(exc, DBAPIError) else exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def _constraint_name(error: BaseException) -> str | None:
    name = getattr(error, "constraint_name", None)
    if name:
        return name
    diag = getattr(error, "diag", None)
    return getattr(diag, "constraint_name", None) if diag is not None else None


def classify(exc: BaseException) -> ConstraintViolation | None:
    """Return the constraint violation behind ``exc``, if it is one."""
    kind: ConstraintKind | None = None
    name: str | None = None
    for error in _driver_errors(exc):
        if kind is None:
            sqlstate = getattr(error, "sqlstate", None) or getattr(error, "pgcode", None)
            if sqlstate in _PG_SQLSTATES:
                kind = _PG_SQLSTATES[sqlstate]
            sqlite_code = getattr(error, "sqlite_errorcode", None)
            if sqlite_code in _SQLITE_CODES:
                kind = _SQLITE_CODES[sqlite_code]
        name = name or _constraint_name(error)
    if kind is None:
        return None
    return ConstraintViolation(kind, name)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

def _join(names: Sequence[str], conjunction: str) -> str:
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} {conjunction} {names[-1]}"


def _describe(resource: Resource, fields: Sequence[str]) -> str:
    external = [resource.external_name(field) for field in fields]
    if len(external) == 1:
        return external[0]
    return f"combination of {_join(external, 'and')}"


def _describe_candidates(resource: Resource, candidates: Sequence[Sequence[str]]) -> str:
    return _join([_describe(resource, fields) for fields in candidates], "or")


def _violation_message(resource: Resource, violation: ConstraintViolation) -> str:
    fields = resource.constraint_fields(violation.constraint_name)
    if violation.kind is ConstraintKind.UNIQUE:
        candidates = [fields] if fields else resource.unique_candidates()
        subject = _describe_candidates(resource, candidates) if candidates else "value"
        return f"The specified {subject} already exists"
    if violation.kind is ConstraintKind.FOREIGN_KEY:
        candidates = [fields] if fields else resource.foreign_key_candidates()
        subject = _describe_candidates(resource, candidates) if candidates else "reference"
        return f"The specified {subject} does not exist"
    if fields:
        return f"The specified {_describe(resource, fields)} is not valid"
    return f"One of the specified values is not valid for the {resource.name}"


# ---------------------------------------------------------------------------
# Translation
# ---------------------------------------------------------------------------

def translate(exc: SQLAlchemyError, resource: Resource, action: Action) -> AppException:
    """Map a storage error raised while performing ``action`` on ``resource``."""
    if isinstance(exc, NoResultFound):
        return ResourceNotFoundError(resource.name)

    violation = classify(exc)
    if violation is not None:
        logger.debug("%s %s rejected by %s", action.value, resource.name, violation)
        if violation.kind is ConstraintKind.CHECK:
            return DomainValidationError(_violation_message(resource, violation))
        if action is Action.CREATE:
            return InvalidCreateError(_violation_message(resource, violation))
        if action is Action.UPDATE:
            return InvalidUpdateError(_violation_message(resource, violation))
        if action is Action.DELETE and violation.kind is ConstraintKind.FOREIGN_KEY:
            return DomainValidationError(
                f"The {resource.name} is still referenced by other resources"
            )

    return UnexpectedError(f"Failed to {action.value} the {resource.name}", cause=exc)


@contextmanager
def translating(resource: Resource, action: Action) -> Iterator[None]:
    """Re-raise any storage error inside the block as its domain error."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise translate(exc, resource, action) from exc
