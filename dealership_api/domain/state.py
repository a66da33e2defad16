"""SQLAlchemy ORM models for states and their cities."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Identity, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from dealership_api.db.base import Base


class State(Base):
    __tablename__ = "states"

    id: Mapped[int] = mapped_column(Integer, Identity(always=True), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)


class City(Base):
    """Cities are numbered within their state; the pair is the key."""

    __tablename__ = "cities"

    city_number: Mapped[int] = mapped_column(Integer, primary_key=True)
    state_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("states.id", onupdate="CASCADE"),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
