"""Client and vehicle Pydantic schemas (request DTOs and response models).

Nullable columns are declared `X | None` without a default: the key must be
sent on create and complete update, but it may be `null`.
"""


from datetime import date

from dealership_api.schemas.common import CamelModel, PayloadModel

class ClientPayload(PayloadModel):
    national_id: str
    full_name: str
    main_phone_no: str
    secondary_phone_no: str
    email: str

class ClientOut(CamelModel):
    national_id: str
    full_name: str
    main_phone_no: str
    secondary_phone_no: str
    email: str

class VehiclePayload(PayloadModel):
    plate: str
    brand: str
    model_id: int
    serial_no: str
    engine_serial_no: str
    color: str
    purchase_date: date
    additional_info: str | None
    maintenance_summary: str | None
    owner_national_id: str

class VehicleOut(CamelModel):
    plate: str
    brand: str
    model_id: int
    serial_no: str
    engine_serial_no: str
    color: str
    purchase_date: date
    additional_info: str | None = None
    maintenance_summary: str | None = None
    owner_national_id: str
