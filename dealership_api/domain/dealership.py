"""SQLAlchemy ORM models for dealerships, their staff, discounts and stock."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from sqlalchemy import (
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


class Dealership(Base):
    __tablename__ = "dealerships"
    __table_args__ = (
        ForeignKeyConstraint(
            ["city_number", "state_id"],
            ["cities.city_number", "cities.state_id"],
            onupdate="CASCADE",
        ),
    )

    rif: Mapped[str] = mapped_column(String(20), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    city_number: Mapped[int] = mapped_column(Integer, nullable=False)
    state_id: Mapped[int] = mapped_column(Integer, nullable=False)


class Role(Base):
    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)


class Employee(Base):
    __tablename__ = "staff"
    __table_args__ = (CheckConstraint("salary >= 0", name="valid_salary"),)

    national_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    main_phone_no: Mapped[str] = mapped_column(String(20), nullable=False)
    secondary_phone_no: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    employer_dealership_rif: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("dealerships.rif", onupdate="CASCADE"),
        nullable=False,
    )
    # Set while the employee is on loan to another dealership
    helped_dealership_rif: Mapped[Optional[str]] = mapped_column(
        String(20),
        ForeignKey("dealerships.rif", onupdate="CASCADE"),
        nullable=True,
    )
    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.id", onupdate="CASCADE"),
        nullable=False,
    )
    salary: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)


class Discount(Base):
    __tablename__ = "discounts"
    __table_args__ = (
        CheckConstraint(
            "discount_percentage BETWEEN 0 AND 1", name="valid_discount_percentage"
        ),
        CheckConstraint(
            "required_annual_service_usage_count >= 0",
            name="valid_required_annual_service_usage_count",
        ),
    )

    discount_number: Mapped[int] = mapped_column(
        Integer, Identity(always=True), primary_key=True
    )
    dealership_rif: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("dealerships.rif", onupdate="CASCADE"),
        nullable=False,
    )
    discount_percentage: Mapped[Decimal] = mapped_column(Numeric(5, 4), nullable=False)
    required_annual_service_usage_count: Mapped[int] = mapped_column(
        SmallInteger, nullable=False
    )


class StockItem(Base):
    """A product kept in stock at one dealership."""

    __tablename__ = "stock"
    __table_args__ = (
        CheckConstraint("product_cost >= 0", name="valid_product_cost"),
        CheckConstraint("min_capacity >= 0", name="valid_min_capacity"),
        CheckConstraint(
            "product_count >= min_capacity",
            name="consistency_between_min_capacity_and_product_count",
        ),
        CheckConstraint(
            "max_capacity >= min_capacity",
            name="consistency_between_min_capacity_and_max_capacity",
        ),
    )

    product_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("products.id", onupdate="CASCADE"),
        primary_key=True,
    )
    dealership_rif: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("dealerships.rif", onupdate="CASCADE"),
        primary_key=True,
    )
    product_cost: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    product_count: Mapped[int] = mapped_column(Integer, nullable=False)
    vendor_name: Mapped[str] = mapped_column(Text, nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    min_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
