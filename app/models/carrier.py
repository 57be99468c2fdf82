"""Carrier model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Date, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import AuditMixin, Base, ContactMixin


class Carrier(Base, AuditMixin, ContactMixin):
    __tablename__ = "carriers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    address: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(120))
    state: Mapped[str | None] = mapped_column(String(64))
    zip_code: Mapped[str | None] = mapped_column(String(20))
    mc_number: Mapped[str | None] = mapped_column(String(32))
    dot_number: Mapped[str | None] = mapped_column(String(32))
    insurance_expiry: Mapped[date | None] = mapped_column(Date)
    w9_on_file: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    performance_rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), default=Decimal("0.00"), nullable=False)
    preferred_lanes: Mapped[str | None] = mapped_column(Text)
    equipment_types: Mapped[str | None] = mapped_column(String(255))
    notes: Mapped[str | None] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
