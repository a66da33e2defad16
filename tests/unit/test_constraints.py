"""Tests for dealership_api/core/constraints.py — storage error classification and translation."""

import sqlite3

import pytest
from sqlalchemy.exc import IntegrityError, NoResultFound, OperationalError

from dealership_api.core.constraints import (
    Action,
    ConstraintKind,
    ConstraintViolation,
    classify,
    translate,
    translating,
)
from dealership_api.core.exceptions import (
    DomainValidationError,
    InvalidCreateError,
    InvalidUpdateError,
    ResourceNotFoundError,
    UnexpectedError,
)
from dealership_api.resources import (
    ACTIVITY_PRICES,
    CLIENTS,
    DEALERSHIPS,
    STAFF,
    STATES,
    STOCK,
    VEHICLE_MODELS,
    VEHICLES,
)


class _PgError(Exception):
    """Shaped like asyncpg / psycopg errors: SQLSTATE plus the constraint name."""

    def __init__(self, sqlstate, constraint_name=None):
        super().__init__(f"pg error {sqlstate}")
        self.sqlstate = sqlstate
        self.constraint_name = constraint_name


def _pg(sqlstate, constraint_name=None):
    return IntegrityError("STATEMENT", {}, _PgError(sqlstate, constraint_name))


def _wrapped_pg(sqlstate, constraint_name=None):
    """Async adapters raise their own error class chained to the driver's."""
    adapter_error = Exception("adapter error")
    adapter_error.__cause__ = _PgError(sqlstate, constraint_name)
    return IntegrityError("STATEMENT", {}, adapter_error)


def _sqlite(code):
    error = sqlite3.IntegrityError("constraint failed")
    error.sqlite_errorcode = code
    return IntegrityError("STATEMENT", {}, error)


# --- classify ---

@pytest.mark.parametrize("sqlstate, kind", [
    ("23505", ConstraintKind.UNIQUE),
    ("23503", ConstraintKind.FOREIGN_KEY),
    ("23514", ConstraintKind.CHECK),
])
def test_classify_postgres_sqlstate(sqlstate, kind):
    assert classify(_pg(sqlstate, "some_constraint")) == ConstraintViolation(kind, "some_constraint")


def test_classify_follows_adapter_cause_chain():
    assert classify(_wrapped_pg("23505", "clients_pk")) == ConstraintViolation(
        ConstraintKind.UNIQUE, "clients_pk"
    )


def test_classify_reads_psycopg_diag_constraint_name():
    error = _PgError("23503")
    error.diag = type("Diag", (), {"constraint_name": "vehicles_model_id_fk"})()
    violation = classify(IntegrityError("STATEMENT", {}, error))
    assert violation == ConstraintViolation(ConstraintKind.FOREIGN_KEY, "vehicles_model_id_fk")


@pytest.mark.parametrize("code, kind", [
    (2067, ConstraintKind.UNIQUE),
    (1555, ConstraintKind.UNIQUE),
    (787, ConstraintKind.FOREIGN_KEY),
    (275, ConstraintKind.CHECK),
])
def test_classify_sqlite_extended_codes(code, kind):
    assert classify(_sqlite(code)) == ConstraintViolation(kind, None)


def test_classify_ignores_unrelated_errors():
    assert classify(_pg("23502")) is None  # not-null
    assert classify(OperationalError("STATEMENT", {}, Exception("connection lost"))) is None


def test_classify_does_not_read_message_text():
    error = Exception("duplicate key value violates unique constraint")
    assert classify(IntegrityError("STATEMENT", {}, error)) is None


# --- translate: uniqueness ---

def test_unique_violation_on_create_names_the_identifier():
    error = translate(_pg("23505", "clients_pk"), CLIENTS, Action.CREATE)
    assert isinstance(error, InvalidCreateError)
    assert error.message == "The specified nationalId already exists"
    assert error.status_code == 400


def test_unique_violation_on_update_is_invalid_update():
    error = translate(_pg("23505", "clients_pk"), CLIENTS, Action.UPDATE)
    assert isinstance(error, InvalidUpdateError)


def test_unique_violation_without_constraint_name_uses_candidates():
    error = translate(_sqlite(1555), CLIENTS, Action.CREATE)
    assert error.message == "The specified nationalId already exists"


def test_unique_candidates_skip_generated_keys():
    error = translate(_sqlite(2067), STATES, Action.CREATE)
    assert error.message == "The specified name already exists"


# --- translate: foreign keys ---

def test_foreign_key_violation_names_the_constraint_field():
    error = translate(_pg("23503", "vehicles_model_id_fk"), VEHICLES, Action.CREATE)
    assert isinstance(error, InvalidCreateError)
    assert error.message == "The specified modelId does not exist"


def test_foreign_key_violation_names_other_field_for_other_constraint():
    error = translate(_pg("23503", "vehicles_owner_national_id_fk"), VEHICLES, Action.UPDATE)
    assert isinstance(error, InvalidUpdateError)
    assert error.message == "The specified ownerNationalId does not exist"


def test_composite_foreign_key_violation():
    error = translate(
        _pg("23503", "dealerships_city_number_state_id_fk"), DEALERSHIPS, Action.CREATE
    )
    assert error.message == "The specified combination of cityNumber and stateId does not exist"


def test_foreign_key_violation_without_name_lists_all_references():
    error = translate(_sqlite(787), STAFF, Action.CREATE)
    assert error.message == (
        "The specified employerDealershipRif, helpedDealershipRif or roleId does not exist"
    )


def test_foreign_key_violation_on_delete_means_still_referenced():
    error = translate(_sqlite(787), CLIENTS, Action.DELETE)
    assert isinstance(error, DomainValidationError)
    assert error.message == "The client is still referenced by other resources"


# --- translate: checks, not found, unexpected ---

def test_check_violation_names_mapped_field():
    error = translate(_pg("23514", "valid_seat_count"), VEHICLE_MODELS, Action.CREATE)
    assert isinstance(error, DomainValidationError)
    assert error.message == "The specified seatCount is not valid"


def test_check_violation_without_name():
    error = translate(_sqlite(275), VEHICLE_MODELS, Action.UPDATE)
    assert isinstance(error, DomainValidationError)
    assert error.message == "One of the specified values is not valid for the vehicle model"


def test_no_result_is_resource_not_found():
    error = translate(NoResultFound(), VEHICLES, Action.FETCH)
    assert isinstance(error, ResourceNotFoundError)
    assert error.message == "The specified vehicle does not exist"
    assert error.status_code == 404


def test_anything_else_is_unexpected_and_keeps_cause():
    exc = OperationalError("STATEMENT", {}, Exception("connection lost"))
    error = translate(exc, CLIENTS, Action.LIST)
    assert isinstance(error, UnexpectedError)
    assert error.cause is exc
    assert error.status_code == 500
    assert "connection lost" not in error.message


def test_unique_violation_on_delete_is_unexpected():
    assert isinstance(translate(_pg("23505", "clients_pk"), CLIENTS, Action.DELETE), UnexpectedError)


# --- translating() ---

def test_translating_reraises_domain_error_with_cause():
    exc = _pg("23505", "clients_pk")
    with pytest.raises(InvalidCreateError) as exc_info:
        with translating(CLIENTS, Action.CREATE):
            raise exc
    assert exc_info.value.__cause__ is exc


def test_translating_leaves_other_exceptions_alone():
    with pytest.raises(KeyError):
        with translating(CLIENTS, Action.CREATE):
            raise KeyError("national_id")


def test_check_spanning_several_fields_names_the_combination():
    error = translate(
        _pg("23514", "consistency_between_min_capacity_and_product_count"), STOCK, Action.UPDATE
    )
    assert isinstance(error, DomainValidationError)
    assert error.message == "The specified combination of productCount and minCapacity is not valid"


def test_composite_and_simple_references_without_name():
    error = translate(_sqlite(787), ACTIVITY_PRICES, Action.CREATE)
    assert error.message == (
        "The specified combination of activityNumber and serviceId or dealershipRif does not exist"
    )
