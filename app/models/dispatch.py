"""Dispatch model module."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.enums import DispatchStatus, EntityKind
from app.models.base import AuditMixin, Base


class Dispatch(Base, AuditMixin):
    __tablename__ = "dispatches"
    __table_args__ = (
        Index("idx_dispatches_status", "status"),
        Index("idx_dispatches_order", "order_id"),
    )

    entity_kind = EntityKind.DISPATCH

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    order_id: Mapped[int] = mapped_column(ForeignKey("orders.id", ondelete="RESTRICT"), nullable=False)
    carrier_id: Mapped[int] = mapped_column(ForeignKey("carriers.id", ondelete="RESTRICT"), nullable=False)
    carrier_rate: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    driver_name: Mapped[str | None] = mapped_column(String(255))
    driver_phone: Mapped[str | None] = mapped_column(String(64))
    truck_number: Mapped[str | None] = mapped_column(String(64))
    trailer_number: Mapped[str | None] = mapped_column(String(64))
    status: Mapped[str] = mapped_column(String(32), default=DispatchStatus.ASSIGNED.value, nullable=False)
    rate_confirmation_sent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    rate_confirmation_signed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    estimated_pickup_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_pickup_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    estimated_delivery_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    actual_delivery_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    notes: Mapped[str | None] = mapped_column(Text)

    order = relationship("Order", back_populates="dispatches")
    carrier = relationship("Carrier")
