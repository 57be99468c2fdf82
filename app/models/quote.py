"""Quote model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import EntityKind, QuoteStatus
from app.models.base import AuditMixin, Base


class Quote(Base, AuditMixin):
    __tablename__ = "quotes"
    __table_args__ = (Index("idx_quotes_status", "status"),)

    entity_kind = EntityKind.QUOTE

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    quote_number: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    lead_id: Mapped[int | None] = mapped_column(ForeignKey("leads.id", ondelete="SET NULL"))
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("customers.id", ondelete="SET NULL"))
    origin_city: Mapped[str] = mapped_column(String(120), nullable=False)
    origin_state: Mapped[str] = mapped_column(String(64), nullable=False)
    destination_city: Mapped[str] = mapped_column(String(120), nullable=False)
    destination_state: Mapped[str] = mapped_column(String(64), nullable=False)
    pickup_date: Mapped[date | None] = mapped_column(Date)
    equipment_type: Mapped[str] = mapped_column(String(64), nullable=False)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    commodity: Mapped[str | None] = mapped_column(String(255))
    quoted_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    valid_until: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=QuoteStatus.DRAFT.value, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    lead = relationship("Lead")
    customer = relationship("Customer")
