"""Quote request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.orders import OrderResponse


class QuoteCreateRequest(BaseModel):
    quote_number: str | None = Field(default=None, max_length=64)
    lead_id: int | None = None
    customer_id: int | None = None
    origin_city: str = Field(min_length=1, max_length=120)
    origin_state: str = Field(min_length=1, max_length=64)
    destination_city: str = Field(min_length=1, max_length=120)
    destination_state: str = Field(min_length=1, max_length=64)
    pickup_date: date | None = None
    equipment_type: str = Field(min_length=1, max_length=64)
    weight: Decimal | None = Field(default=None, ge=0)
    commodity: str | None = Field(default=None, max_length=255)
    quoted_rate: Decimal = Field(ge=0)
    valid_until: date
    status: str | None = Field(default=None, max_length=40)
    notes: str | None = Field(default=None, max_length=10000)


class QuoteUpdateRequest(BaseModel):
    lead_id: int | None = None
    customer_id: int | None = None
    origin_city: str | None = Field(default=None, min_length=1, max_length=120)
    origin_state: str | None = Field(default=None, min_length=1, max_length=64)
    destination_city: str | None = Field(default=None, min_length=1, max_length=120)
    destination_state: str | None = Field(default=None, min_length=1, max_length=64)
    pickup_date: date | None = None
    equipment_type: str | None = Field(default=None, min_length=1, max_length=64)
    weight: Decimal | None = Field(default=None, ge=0)
    commodity: str | None = Field(default=None, max_length=255)
    quoted_rate: Decimal | None = Field(default=None, ge=0)
    valid_until: date | None = None
    status: str | None = Field(default=None, max_length=40)
    notes: str | None = Field(default=None, max_length=10000)


class QuoteAcceptRequest(BaseModel):
    """Order details a quote does not carry."""

    origin_address: str = Field(min_length=1, max_length=255)
    origin_zip_code: str = Field(min_length=1, max_length=20)
    destination_address: str = Field(min_length=1, max_length=255)
    destination_zip_code: str = Field(min_length=1, max_length=20)
    order_number: str | None = Field(default=None, max_length=64)
    customer_name: str | None = Field(default=None, max_length=255)
    origin_company: str | None = Field(default=None, max_length=255)
    destination_company: str | None = Field(default=None, max_length=255)
    pickup_date: date | None = None
    delivery_date: date | None = None
    special_instructions: str | None = Field(default=None, max_length=10000)


class QuoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    quote_number: str
    lead_id: int | None = None
    customer_id: int | None = None
    origin_city: str
    origin_state: str
    destination_city: str
    destination_state: str
    pickup_date: date | None = None
    equipment_type: str
    weight: Decimal | None = None
    commodity: str | None = None
    quoted_rate: Decimal
    valid_until: date
    status: str
    derived_status: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class QuoteAcceptResponse(BaseModel):
    quote: QuoteResponse
    order: OrderResponse
