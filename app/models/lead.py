"""Lead model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.core.enums import EntityKind, LeadStatus
from app.models.base import AuditMixin, Base, ContactMixin


class Lead(Base, AuditMixin, ContactMixin):
    __tablename__ = "leads"
    __table_args__ = (Index("idx_leads_status", "status"),)

    entity_kind = EntityKind.LEAD

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    origin_city: Mapped[str | None] = mapped_column(String(120))
    origin_state: Mapped[str | None] = mapped_column(String(64))
    destination_city: Mapped[str | None] = mapped_column(String(120))
    destination_state: Mapped[str | None] = mapped_column(String(64))
    pickup_date: Mapped[date | None] = mapped_column(Date)
    equipment_type: Mapped[str | None] = mapped_column(String(64))
    commodity: Mapped[str | None] = mapped_column(String(255))
    weight: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    notes: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(32), default=LeadStatus.NEW.value, nullable=False)
