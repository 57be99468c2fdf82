"""Invoice request/response schemas for API contracts."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class InvoiceCreateRequest(BaseModel):
    invoice_number: str | None = Field(default=None, max_length=64)
    type: str = Field(min_length=1, max_length=16)
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    dispatch_id: int | None = None
    amount: Decimal = Field(ge=0)
    status: str | None = Field(default=None, max_length=40)
    due_date: date
    notes: str | None = Field(default=None, max_length=10000)


class InvoiceUpdateRequest(BaseModel):
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    dispatch_id: int | None = None
    amount: Decimal | None = Field(default=None, ge=0)
    status: str | None = Field(default=None, max_length=40)
    due_date: date | None = None
    paid_date: date | None = None
    notes: str | None = Field(default=None, max_length=10000)


class InvoiceResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    invoice_number: str
    type: str
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    dispatch_id: int | None = None
    amount: Decimal
    status: str
    derived_status: str | None = None
    due_date: date
    paid_date: date | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InvoiceSummaryResponse(BaseModel):
    total_customer: int
    total_carrier: int
    pending_amount: Decimal
    overdue_count: int
