"""Registry of every CRUD resource exposed under /api/v1.

How to add a new resource:
  1. Add the ORM model to dealership_api/domain/
  2. Add `<Name>Payload` and `<Name>Out` to dealership_api/schemas/
  3. Describe it here and append it to RESOURCES
"""

from dealership_api.core.resource import Resource
from dealership_api.domain import (
    Activity,
    ActivityPrice,
    City,
    Client,
    Dealership,
    Discount,
    Employee,
    Invoice,
    Order,
    Payment,
    Product,
    Role,
    Service,
    State,
    StockItem,
    SupplyLine,
    Vehicle,
    VehicleModel,
)
from dealership_api.schemas.billing import (
    InvoiceOut,
    InvoicePayload,
    OrderOut,
    OrderPayload,
    PaymentOut,
    PaymentPayload,
)
from dealership_api.schemas.catalog import (
    ActivityOut,
    ActivityPayload,
    ActivityPriceOut,
    ActivityPricePayload,
    ProductOut,
    ProductPayload,
    ServiceOut,
    ServicePayload,
    SupplyLineOut,
    SupplyLinePayload,
    VehicleModelOut,
    VehicleModelPayload,
)
from dealership_api.schemas.client import ClientOut, ClientPayload, VehicleOut, VehiclePayload
from dealership_api.schemas.dealership import (
    DealershipOut,
    DealershipPayload,
    DiscountOut,
    DiscountPayload,
    EmployeeOut,
    EmployeePayload,
    RoleOut,
    RolePayload,
    StockItemOut,
    StockItemPayload,
)
from dealership_api.schemas.state import CityOut, CityPayload, StateOut, StatePayload

STATES = Resource("state", "/states", State, StatePayload, StateOut)
CITIES = Resource("city", "/cities", City, CityPayload, CityOut)
CLIENTS = Resource("client", "/clients", Client, ClientPayload, ClientOut)
VEHICLE_MODELS = Resource(
    "vehicle model",
    "/vehicle-models",
    VehicleModel,
    VehicleModelPayload,
    VehicleModelOut,
    checks={
        "valid_seat_count": "seat_count",
        "valid_weight_in_kg": "weight_in_kg",
        "valid_octane_rating": "octane_rating",
    },
)
VEHICLES = Resource("vehicle", "/vehicles", Vehicle, VehiclePayload, VehicleOut)
DEALERSHIPS = Resource("dealership", "/dealerships", Dealership, DealershipPayload, DealershipOut)
ROLES = Resource("role", "/roles", Role, RolePayload, RoleOut)
STAFF = Resource(
    "employee",
    "/staff",
    Employee,
    EmployeePayload,
    EmployeeOut,
    checks={"valid_salary": "salary"},
)
SUPPLY_LINES = Resource("supply line", "/supply-lines", SupplyLine, SupplyLinePayload, SupplyLineOut)
PRODUCTS = Resource("product", "/products", Product, ProductPayload, ProductOut)
SERVICES = Resource("service", "/services", Service, ServicePayload, ServiceOut)
DISCOUNTS = Resource(
    "discount",
    "/discounts",
    Discount,
    DiscountPayload,
    DiscountOut,
    checks={
        "valid_discount_percentage": "discount_percentage",
        "valid_required_annual_service_usage_count": "required_annual_service_usage_count",
    },
)

ACTIVITIES = Resource(
    "activity",
    "/activities",
    Activity,
    ActivityPayload,
    ActivityOut,
    checks={"valid_price_per_hour": "price_per_hour"},
)
ACTIVITY_PRICES = Resource(
    "activity price",
    "/activities-prices",
    ActivityPrice,
    ActivityPricePayload,
    ActivityPriceOut,
    checks={"valid_price_per_hour": "price_per_hour"},
)
STOCK = Resource(
    "stock item",
    "/stock",
    StockItem,
    StockItemPayload,
    StockItemOut,
    checks={
        "valid_product_cost": "product_cost",
        "valid_min_capacity": "min_capacity",
        "consistency_between_min_capacity_and_product_count": ("product_count", "min_capacity"),
        "consistency_between_min_capacity_and_max_capacity": ("max_capacity", "min_capacity"),
    },
)
ORDERS = Resource(
    "order",
    "/orders",
    Order,
    OrderPayload,
    OrderOut,
    checks={
        "valid_vehicle_kilometrage": "vehicle_kilometrage",
        "consistency_between_reservation_checkin_and_checkout_timestamps": (
            "reservation_timestamp",
            "checkin_timestamp",
            "estimated_checkout_timestamp",
            "checkout_timestamp",
        ),
    },
)
INVOICES = Resource(
    "invoice",
    "/invoices",
    Invoice,
    InvoicePayload,
    InvoiceOut,
    checks={"valid_amount_due": "amount_due", "valid_discount": "discount"},
)
PAYMENTS = Resource(
    "payment",
    "/payments",
    Payment,
    PaymentPayload,
    PaymentOut,
    checks={"valid_amount_paid": "amount_paid"},
)

RESOURCES: tuple[Resource, ...] = (
    STATES,
    CITIES,
    CLIENTS,
    VEHICLE_MODELS,
    VEHICLES,
    DEALERSHIPS,
    ROLES,
    STAFF,
    SUPPLY_LINES,
    PRODUCTS,
    SERVICES,
    DISCOUNTS,
    ACTIVITIES,
    ACTIVITY_PRICES,
    STOCK,
    ORDERS,
    INVOICES,
    PAYMENTS,
)
