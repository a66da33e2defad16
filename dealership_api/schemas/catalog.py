"""Catalogue Pydantic schemas: vehicle models, supply lines, products, services, activities."""


from decimal import Decimal

from dealership_api.schemas.common import CamelModel, PayloadModel

class VehicleModelPayload(PayloadModel):
    name: str
    seat_count: int
    weight_in_kg: Decimal
    octane_rating: int
    gearbox_oil_type: str
    engine_oil_type: str
    engine_coolant_type: str

class VehicleModelOut(CamelModel):
    id: int
    name: str
    seat_count: int
    weight_in_kg: Decimal
    octane_rating: int
    gearbox_oil_type: str
    engine_oil_type: str
    engine_coolant_type: str

class SupplyLinePayload(PayloadModel):
    name: str

class SupplyLineOut(CamelModel):
    id: int
    name: str

class ProductPayload(PayloadModel):
    name: str
    description: str
    is_ecologic: bool
    supply_line_id: int

class ProductOut(CamelModel):
    id: int
    name: str
    description: str
    is_ecologic: bool
    supply_line_id: int

class ServicePayload(PayloadModel):
    name: str
    description: str
    coordinator_national_id: str

class ServiceOut(CamelModel):
    id: int
    name: str
    description: str
    coordinator_national_id: str

class ActivityPayload(PayloadModel):
    activity_number: int
    service_id: int
    description: str
    price_per_hour: Decimal

class ActivityOut(CamelModel):
    activity_number: int
    service_id: int
    description: str
    price_per_hour: Decimal

class ActivityPricePayload(PayloadModel):
    activity_number: int
    service_id: int
    dealership_rif: str
    price_per_hour: Decimal

class ActivityPriceOut(CamelModel):
    activity_number: int
    service_id: int
    dealership_rif: str
    price_per_hour: Decimal
