"""Domain package — all ORM models are imported here so `Base.metadata` knows every table.

Folder intent:
  state.py       — states and the cities numbered within them
  client.py      — clients and their vehicles
  catalog.py     — vehicle models, supply lines, products, services, activities
  dealership.py  — dealerships, roles, staff, discounts, stock
  billing.py     — workshop orders, invoices, payments
"""

from dealership_api.domain.billing import Invoice, Order, Payment
from dealership_api.domain.catalog import (
    Activity,
    ActivityPrice,
    Product,
    Service,
    SupplyLine,
    VehicleModel,
)
from dealership_api.domain.client import Client, Vehicle
from dealership_api.domain.dealership import Dealership, Discount, Employee, Role, StockItem
from dealership_api.domain.state import City, State

__all__ = [
    "Activity",
    "ActivityPrice",
    "City",
    "Client",
    "Dealership",
    "Discount",
    "Employee",
    "Invoice",
    "Order",
    "Payment",
    "Product",
    "Role",
    "Service",
    "State",
    "StockItem",
    "SupplyLine",
    "Vehicle",
    "VehicleModel",
]
