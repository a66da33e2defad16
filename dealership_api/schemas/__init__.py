"""Pydantic schemas package.

Folder intent:
  common.py      — CamelModel / PayloadModel bases + HealthResponse
  state.py       — states, cities
  client.py      — clients, vehicles
  catalog.py     — vehicle models, supply lines, products, services, activities
  dealership.py  — dealerships, roles, staff, discounts, stock
  billing.py     — workshop orders, invoices, payments

Each resource has a `<Name>Payload` (POST / PUT body, every key required) and
a `<Name>Out` response model. PATCH bodies are derived from the payload by
core.presence.partial_model.
"""
