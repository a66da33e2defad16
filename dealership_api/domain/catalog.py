"""SQLAlchemy ORM models for the vehicle, product and service catalogues, and service activities."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    ForeignKey,
    ForeignKeyConstraint,
    Identity,
    Integer,
    Numeric,
    SmallInteger,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from dealership_api.db.base import Base


class VehicleModel(Base):
    __tablename__ = "vehicle_models"
    __table_args__ = (
        CheckConstraint("seat_count > 0", name="valid_seat_count"),
        CheckConstraint("weight_in_kg > 0", name="valid_weight_in_kg"),
        CheckConstraint("octane_rating > 0", name="valid_octane_rating"),
    )

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    seat_count: Mapped[int] = mapped_column(Integer, nullable=False)
    weight_in_kg: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    octane_rating: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    gearbox_oil_type: Mapped[str] = mapped_column(Text, nullable=False)
    engine_oil_type: Mapped[str] = mapped_column(Text, nullable=False)
    engine_coolant_type: Mapped[str] = mapped_column(Text, nullable=False)


class SupplyLine(Base):
    __tablename__ = "supply_lines"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    is_ecologic: Mapped[bool] = mapped_column(Boolean, nullable=False)
    supply_line_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("supply_lines.id", onupdate="CASCADE"),
        nullable=False,
    )


class Service(Base):
    """A maintenance service offered by the dealerships, run by a coordinator."""

    __tablename__ = "services"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    coordinator_national_id: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("staff.national_id", onupdate="CASCADE"),
        nullable=False,
    )


class Activity(Base):
    """One billable step of a service, numbered within that service."""

    __tablename__ = "activities"
    __table_args__ = (
        CheckConstraint("price_per_hour >= 0", name="valid_price_per_hour"),
    )

    activity_number: Mapped[int] = mapped_column(Integer, primary_key=True)
    service_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("services.id", onupdate="CASCADE"),
        primary_key=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price_per_hour: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)


class ActivityPrice(Base):
    """What a dealership charges per hour for an activity."""

    __tablename__ = "activities_prices"
    __table_args__ = (
        ForeignKeyConstraint(
            ["activity_number", "service_id"],
            ["activities.activity_number", "activities.service_id"],
            onupdate="CASCADE",
        ),
        CheckConstraint("price_per_hour >= 0", name="valid_price_per_hour"),
    )

    activity_number: Mapped[int] = mapped_column(Integer, primary_key=True)
    service_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    dealership_rif: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("dealerships.rif", onupdate="CASCADE"),
        primary_key=True,
    )
    price_per_hour: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
