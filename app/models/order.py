"""Order model module."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import EntityKind, OrderStatus
from app.models.base import AuditMixin, Base


class Order(Base, AuditMixin):
    __tablename__ = "orders"
    __table_args__ = (Index("idx_orders_status", "status"),)

    entity_kind = EntityKind.ORDER

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_number: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    customer_id: Mapped[int | None] = mapped_column(ForeignKey("customers.id", ondelete="SET NULL"))
    customer_name: Mapped[str | None] = mapped_column(String(255))
    lead_id: Mapped[int | None] = mapped_column(ForeignKey("leads.id", ondelete="SET NULL"))
    quote_id: Mapped[int | None] = mapped_column(ForeignKey("quotes.id", ondelete="SET NULL"), unique=True)
    origin_company: Mapped[str | None] = mapped_column(String(255))
    origin_address: Mapped[str] = mapped_column(String(255), nullable=False)
    origin_city: Mapped[str] = mapped_column(String(120), nullable=False)
    origin_state: Mapped[str] = mapped_column(String(64), nullable=False)
    origin_zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    destination_company: Mapped[str | None] = mapped_column(String(255))
    destination_address: Mapped[str] = mapped_column(String(255), nullable=False)
    destination_city: Mapped[str] = mapped_column(String(120), nullable=False)
    destination_state: Mapped[str] = mapped_column(String(64), nullable=False)
    destination_zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    pickup_date: Mapped[date] = mapped_column(Date, nullable=False)
    delivery_date: Mapped[date | None] = mapped_column(Date)
    equipment_type: Mapped[str] = mapped_column(String(64), nullable=False)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    commodity: Mapped[str | None] = mapped_column(String(255))
    customer_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(32), default=OrderStatus.NEEDS_TRUCK.value, nullable=False)
    special_instructions: Mapped[str | None] = mapped_column(Text)

    customer = relationship("Customer")
    lead = relationship("Lead")
    quote = relationship("Quote")
    dispatches = relationship("Dispatch", back_populates="order")
