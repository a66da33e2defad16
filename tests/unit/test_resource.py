"""Tests for dealership_api/core/resource.py — what descriptors derive from the table and schemas."""

import pytest
from pydantic import ValidationError

from dealership_api.resources import (
    ACTIVITY_PRICES,
    CITIES,
    CLIENTS,
    DISCOUNTS,
    RESOURCES,
    STAFF,
    STATES,
    STOCK,
    VEHICLES,
)


def test_every_resource_has_a_unique_path():
    paths = [resource.path for resource in RESOURCES]
    assert len(paths) == len(set(paths))


def test_key_names_follow_primary_key():
    assert CLIENTS.key_names == ("national_id",)
    assert set(CITIES.key_names) == {"city_number", "state_id"}
    assert DISCOUNTS.key_names == ("discount_number",)


def test_key_model_uses_kebab_case_aliases():
    key = CITIES.key_model.model_validate({"city-number": "3", "state-id": "7"})
    assert key.model_dump() == {"city_number": 3, "state_id": 7}


def test_key_model_rejects_unknown_params():
    with pytest.raises(ValidationError):
        CLIENTS.key_model.model_validate({"national-id": "V1", "extra": "x"})


def test_writable_fields_exclude_generated_keys():
    assert "id" not in STATES.fields
    assert "discount_number" not in DISCOUNTS.fields
    assert "national_id" in CLIENTS.fields


def test_constraint_fields_resolves_named_constraints():
    assert CLIENTS.constraint_fields("clients_pk") == ("national_id",)
    assert VEHICLES.constraint_fields("vehicles_model_id_fk") == ("model_id",)
    assert STAFF.constraint_fields("valid_salary") == ("salary",)
    assert STATES.constraint_fields("states_name_key") == ("name",)


def test_constraint_fields_unknown_or_missing_name():
    assert CLIENTS.constraint_fields("vehicles_model_id_fk") is None
    assert CLIENTS.constraint_fields(None) is None


def test_foreign_key_candidates_in_column_order():
    assert VEHICLES.foreign_key_candidates() == [("model_id",), ("owner_national_id",)]


def test_tags_are_derived_from_paths():
    assert CLIENTS.tag == "Clients"
    assert STATES.tag == "States"


def test_check_map_accepts_several_fields():
    assert STOCK.constraint_fields("valid_product_cost") == ("product_cost",)
    assert STOCK.constraint_fields("consistency_between_min_capacity_and_max_capacity") == (
        "max_capacity",
        "min_capacity",
    )


def test_activity_price_key_spans_three_columns():
    assert ACTIVITY_PRICES.key_names == ("activity_number", "service_id", "dealership_rif")
    key = ACTIVITY_PRICES.key_model.model_validate(
        {"activity-number": "1", "service-id": "2", "dealership-rif": "J-1"}
    )
    assert key.model_dump() == {"activity_number": 1, "service_id": 2, "dealership_rif": "J-1"}
