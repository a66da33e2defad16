"""SQLAlchemy ORM models for clients and the vehicles they own."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dealership_api.db.base import Base


class Client(Base):
    __tablename__ = "clients"

    national_id: Mapped[str] = mapped_column(String(20), primary_key=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    main_phone_no: Mapped[str] = mapped_column(String(20), nullable=False)
    secondary_phone_no: Mapped[str] = mapped_column(String(20), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)


class Vehicle(Base):
    __tablename__ = "vehicles"

    plate: Mapped[str] = mapped_column(String(16), primary_key=True)
    brand: Mapped[str] = mapped_column(Text, nullable=False)
    model_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("vehicle_models.id", onupdate="CASCADE"),
        nullable=False,
    )
    serial_no: Mapped[str] = mapped_column(Text, nullable=False)
    engine_serial_no: Mapped[str] = mapped_column(Text, nullable=False)
    color: Mapped[str] = mapped_column(Text, nullable=False)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    additional_info: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    maintenance_summary: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    owner_national_id: Mapped[str] = mapped_column(
        String(20),
        ForeignKey("clients.national_id", onupdate="CASCADE"),
        nullable=False,
    )
