"""Order request/response schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class OrderCreateRequest(BaseModel):
    order_number: str | None = Field(default=None, max_length=64)
    customer_id: int | None = None
    customer_name: str | None = Field(default=None, max_length=255)
    lead_id: int | None = None
    quote_id: int | None = None
    origin_company: str | None = Field(default=None, max_length=255)
    origin_address: str = Field(min_length=1, max_length=255)
    origin_city: str = Field(min_length=1, max_length=120)
    origin_state: str = Field(min_length=1, max_length=64)
    origin_zip_code: str = Field(min_length=1, max_length=20)
    destination_company: str | None = Field(default=None, max_length=255)
    destination_address: str = Field(min_length=1, max_length=255)
    destination_city: str = Field(min_length=1, max_length=120)
    destination_state: str = Field(min_length=1, max_length=64)
    destination_zip_code: str = Field(min_length=1, max_length=20)
    pickup_date: date
    delivery_date: date | None = None
    equipment_type: str = Field(min_length=1, max_length=64)
    weight: Decimal | None = Field(default=None, ge=0)
    commodity: str | None = Field(default=None, max_length=255)
    customer_rate: Decimal = Field(ge=0)
    status: str | None = Field(default=None, max_length=40)
    special_instructions: str | None = Field(default=None, max_length=10000)


class OrderUpdateRequest(BaseModel):
    customer_id: int | None = None
    customer_name: str | None = Field(default=None, max_length=255)
    origin_company: str | None = Field(default=None, max_length=255)
    origin_address: str | None = Field(default=None, min_length=1, max_length=255)
    origin_city: str | None = Field(default=None, min_length=1, max_length=120)
    origin_state: str | None = Field(default=None, min_length=1, max_length=64)
    origin_zip_code: str | None = Field(default=None, min_length=1, max_length=20)
    destination_company: str | None = Field(default=None, max_length=255)
    destination_address: str | None = Field(default=None, min_length=1, max_length=255)
    destination_city: str | None = Field(default=None, min_length=1, max_length=120)
    destination_state: str | None = Field(default=None, min_length=1, max_length=64)
    destination_zip_code: str | None = Field(default=None, min_length=1, max_length=20)
    pickup_date: date | None = None
    delivery_date: date | None = None
    equipment_type: str | None = Field(default=None, min_length=1, max_length=64)
    weight: Decimal | None = Field(default=None, ge=0)
    commodity: str | None = Field(default=None, max_length=255)
    customer_rate: Decimal | None = Field(default=None, ge=0)
    status: str | None = Field(default=None, max_length=40)
    special_instructions: str | None = Field(default=None, max_length=10000)


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_number: str
    customer_id: int | None = None
    customer_name: str | None = None
    lead_id: int | None = None
    quote_id: int | None = None
    origin_company: str | None = None
    origin_address: str
    origin_city: str
    origin_state: str
    origin_zip_code: str
    destination_company: str | None = None
    destination_address: str
    destination_city: str
    destination_state: str
    destination_zip_code: str
    pickup_date: date
    delivery_date: date | None = None
    equipment_type: str
    weight: Decimal | None = None
    commodity: str | None = None
    customer_rate: Decimal
    status: str
    derived_status: str | None = None
    special_instructions: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
