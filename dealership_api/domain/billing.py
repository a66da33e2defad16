"""SQLAlchemy ORM models for workshop orders, their invoices and payments."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal, Optional, get_args

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Identity,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from dealership_api.db.base import Base

PaymentType = Literal["bolivares", "foreign-currency", "transfer", "debit-card", "credit-card"]


class Order(Base):
    """A vehicle's visit to the workshop, from reservation to checkout."""

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("vehicle_kilometrage > 0", name="valid_vehicle_kilometrage"),
        CheckConstraint(
            "reservation_timestamp <= checkin_timestamp"
            " AND checkin_timestamp <= estimated_checkout_timestamp"
            " AND estimated_checkout_timestamp <= checkout_timestamp",
            name="consistency_between_reservation_checkin_and_checkout_timestamps",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    vehicle_plate: Mapped[str] = mapped_column(
        String(16),
        ForeignKey("vehicles.plate", onupdate="CASCADE"),
        nullable=False,
    )
    reservation_timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    checkin_timestamp: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    estimated_checkout_timestamp: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True
    )
    checkout_timestamp: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    analyst_national_id: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("staff.national_id", onupdate="CASCADE"),
        nullable=False,
    )
    # Whoever brought the vehicle in, when it is not the owner
    vehicle_caretaker_national_id: Mapped[Optional[str]] = mapped_column(
        String(20), nullable=True
    )
    vehicle_caretaker_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    vehicle_kilometrage: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)


class Invoice(Base):
    __tablename__ = "invoices"
    __table_args__ = (
        CheckConstraint("amount_due >= 0", name="valid_amount_due"),
        CheckConstraint("discount BETWEEN 0 AND 1", name="valid_discount"),
    )

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    order_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("orders.id", onupdate="CASCADE"),
        nullable=False,
    )
    amount_due: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    discount: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False)
    issue_date: Mapped[date] = mapped_column(Date, nullable=False)


class Payment(Base):
    """One payment towards an invoice; numbered within the invoice."""

    __tablename__ = "payments"
    __table_args__ = (CheckConstraint("amount_paid > 0", name="valid_amount_paid"),)

    payment_number: Mapped[int] = mapped_column(Integer, primary_key=True)
    invoice_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("invoices.id", onupdate="CASCADE"),
        primary_key=True,
    )
    amount_paid: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    payment_date: Mapped[date] = mapped_column(Date, nullable=False)
    payment_type: Mapped[str] = mapped_column(
        Enum(*get_args(PaymentType), name="payment_type"), nullable=False
    )
    card_number: Mapped[str] = mapped_column(Text, nullable=False)
    card_bank: Mapped[str] = mapped_column(Text, nullable=False)
