"""Dealership, role, staff, discount and stock Pydantic schemas."""


from decimal import Decimal

from dealership_api.schemas.common import CamelModel, PayloadModel

class DealershipPayload(PayloadModel):
    rif: str
    name: str
    city_number: int
    state_id: int

class DealershipOut(CamelModel):
    rif: str
    name: str
    city_number: int
    state_id: int

class RolePayload(PayloadModel):
    name: str
    description: str

class RoleOut(CamelModel):
    id: int
    name: str
    description: str

class EmployeePayload(PayloadModel):
    national_id: str
    full_name: str
    main_phone_no: str
    secondary_phone_no: str
    email: str
    address: str
    employer_dealership_rif: str
    helped_dealership_rif: str | None
    role_id: int
    salary: Decimal

class EmployeeOut(CamelModel):
    national_id: str
    full_name: str
    main_phone_no: str
    secondary_phone_no: str
    email: str
    address: str
    employer_dealership_rif: str
    helped_dealership_rif: str | None = None
    role_id: int
    salary: Decimal

class DiscountPayload(PayloadModel):
    dealership_rif: str
    discount_percentage: Decimal
    required_annual_service_usage_count: int

class DiscountOut(CamelModel):
    discount_number: int
    dealership_rif: str
    discount_percentage: Decimal
    required_annual_service_usage_count: int

class StockItemPayload(PayloadModel):
    product_id: int
    dealership_rif: str
    product_cost: Decimal
    product_count: int
    vendor_name: str
    max_capacity: int
    min_capacity: int

class StockItemOut(CamelModel):
    product_id: int
    dealership_rif: str
    product_cost: Decimal
    product_count: int
    vendor_name: str
    max_capacity: int
    min_capacity: int
