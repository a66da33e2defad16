"""Order, invoice and payment Pydantic schemas."""


from datetime import date, datetime
from decimal import Decimal

from dealership_api.domain.billing import PaymentType
from dealership_api.schemas.common import CamelModel, PayloadModel

class OrderPayload(PayloadModel):
    vehicle_plate: str
    reservation_timestamp: datetime
    checkin_timestamp: datetime | None
    estimated_checkout_timestamp: datetime | None
    checkout_timestamp: datetime | None
    analyst_national_id: str
    vehicle_caretaker_national_id: str | None
    vehicle_caretaker_name: str | None
    vehicle_kilometrage: Decimal

class OrderOut(CamelModel):
    id: int
    vehicle_plate: str
    reservation_timestamp: datetime
    checkin_timestamp: datetime | None = None
    estimated_checkout_timestamp: datetime | None = None
    checkout_timestamp: datetime | None = None
    analyst_national_id: str
    vehicle_caretaker_national_id: str | None = None
    vehicle_caretaker_name: str | None = None
    vehicle_kilometrage: Decimal

class InvoicePayload(PayloadModel):
    order_id: int
    amount_due: Decimal
    discount: Decimal
    issue_date: date

class InvoiceOut(CamelModel):
    id: int
    order_id: int
    amount_due: Decimal
    discount: Decimal
    issue_date: date

class PaymentPayload(PayloadModel):
    payment_number: int
    invoice_id: int
    amount_paid: Decimal
    payment_date: date
    payment_type: PaymentType
    card_number: str
    card_bank: str

class PaymentOut(CamelModel):
    payment_number: int
    invoice_id: int
    amount_paid: Decimal
    payment_date: date
    payment_type: PaymentType
    card_number: str
    card_bank: str
