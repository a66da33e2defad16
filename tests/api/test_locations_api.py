"""API tests for states, cities, dealerships, staff and discounts — composite keys and checks."""

from decimal import Decimal

import pytest


@pytest.fixture
async def city(client, base_url):
    response = await client.post(f"{base_url}/states", json={"name": "Miranda"})
    assert response.status_code == 201, response.text
    state_id = response.json()["data"]["id"]

    response = await client.post(
        f"{base_url}/cities", json={"cityNumber": 1, "stateId": state_id, "name": "Los Teques"}
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
async def dealership(client, base_url, city):
    payload = {
        "rif": "J-30000001",
        "name": "Autos Los Teques",
        "cityNumber": city["cityNumber"],
        "stateId": city["stateId"],
    }
    response = await client.post(f"{base_url}/dealerships", json=payload)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_duplicate_state_name(client, base_url, city):
    response = await client.post(f"{base_url}/states", json={"name": "Miranda"})
    assert response.status_code == 400
    assert response.json() == {"error": "The specified name already exists"}


async def test_city_is_fetched_by_composite_key(client, base_url, city):
    response = await client.get(
        f"{base_url}/cities/view",
        params={"city-number": city["cityNumber"], "state-id": city["stateId"]},
    )
    assert response.status_code == 200
    assert response.json() == {"data": city}


async def test_city_key_requires_both_parts(client, base_url, city):
    response = await client.get(f"{base_url}/cities/view", params={"city-number": 1})
    assert response.status_code == 422


async def test_duplicate_city(client, base_url, city):
    response = await client.post(f"{base_url}/cities", json=city)
    assert response.status_code == 400
    assert response.json() == {
        "error": "The specified combination of cityNumber and stateId already exists"
    }


async def test_city_in_unknown_state(client, base_url):
    response = await client.post(
        f"{base_url}/cities", json={"cityNumber": 1, "stateId": 42, "name": "Nowhere"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "The specified stateId does not exist"}


async def test_dealership_in_unknown_city(client, base_url, city):
    payload = {"rif": "J-1", "name": "Lost", "cityNumber": 99, "stateId": city["stateId"]}
    response = await client.post(f"{base_url}/dealerships", json=payload)
    assert response.status_code == 400
    assert response.json() == {
        "error": "The specified combination of cityNumber and stateId does not exist"
    }


async def test_deleting_city_with_dealership_is_rejected(client, base_url, dealership):
    response = await client.delete(
        f"{base_url}/cities",
        params={"city-number": dealership["cityNumber"], "state-id": dealership["stateId"]},
    )
    assert response.status_code == 422
    assert response.json() == {"error": "The city is still referenced by other resources"}


async def test_employee_with_optional_helped_dealership(client, base_url, dealership):
    response = await client.post(
        f"{base_url}/roles", json={"name": "Mechanic", "description": "Services vehicles"}
    )
    role_id = response.json()["data"]["id"]
    employee = {
        "nationalId": "V-20000001",
        "fullName": "Luis Rojas",
        "mainPhoneNo": "+58-212-5550201",
        "secondaryPhoneNo": "+58-414-5550202",
        "email": "luis@example.com",
        "address": "Av. Bolivar 12",
        "employerDealershipRif": dealership["rif"],
        "helpedDealershipRif": None,
        "roleId": role_id,
        "salary": "1500.00",
    }
    response = await client.post(f"{base_url}/staff", json=employee)
    assert response.status_code == 201, response.text
    created = response.json()["data"]
    assert created["helpedDealershipRif"] is None
    assert Decimal(created["salary"]) == Decimal("1500")

    response = await client.patch(
        f"{base_url}/staff",
        params={"national-id": employee["nationalId"]},
        json={"helpedDealershipRif": dealership["rif"]},
    )
    assert response.status_code == 200
    assert response.json()["data"]["helpedDealershipRif"] == dealership["rif"]

    response = await client.patch(
        f"{base_url}/staff",
        params={"national-id": employee["nationalId"]},
        json={"salary": "-1"},
    )
    assert response.status_code == 422
    assert response.json() == {"error": "One of the specified values is not valid for the employee"}


async def test_discount_numbers_are_generated(client, base_url, dealership):
    payload = {
        "dealershipRif": dealership["rif"],
        "discountPercentage": "0.15",
        "requiredAnnualServiceUsageCount": 3,
    }
    first = await client.post(f"{base_url}/discounts", json=payload)
    second = await client.post(f"{base_url}/discounts", json=payload)
    assert first.status_code == 201, first.text
    assert second.status_code == 201, second.text
    assert first.json()["data"]["discountNumber"] != second.json()["data"]["discountNumber"]
    assert Decimal(first.json()["data"]["discountPercentage"]) == Decimal("0.15")


async def test_discount_percentage_above_one_is_rejected(client, base_url, dealership):
    payload = {
        "dealershipRif": dealership["rif"],
        "discountPercentage": "1.5",
        "requiredAnnualServiceUsageCount": 3,
    }
    response = await client.post(f"{base_url}/discounts", json=payload)
    assert response.status_code == 422
    assert response.json() == {"error": "One of the specified values is not valid for the discount"}


async def test_deleting_state_with_cities_is_rejected(client, base_url, city):
    response = await client.delete(f"{base_url}/states", params={"id": city["stateId"]})
    assert response.status_code == 422
    assert response.json() == {"error": "The state is still referenced by other resources"}

    response = await client.get(f"{base_url}/states/view", params={"id": city["stateId"]})
    assert response.status_code == 200
