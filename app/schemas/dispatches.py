"""Dispatch request/response schemas."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DispatchCreateRequest(BaseModel):
    order_id: int
    carrier_id: int
    carrier_rate: Decimal = Field(ge=0)
    driver_name: str | None = Field(default=None, max_length=255)
    driver_phone: str | None = Field(default=None, max_length=64)
    truck_number: str | None = Field(default=None, max_length=64)
    trailer_number: str | None = Field(default=None, max_length=64)
    status: str | None = Field(default=None, max_length=40)
    rate_confirmation_sent: bool = False
    rate_confirmation_signed: bool = False
    estimated_pickup_time: datetime | None = None
    estimated_delivery_time: datetime | None = None
    notes: str | None = Field(default=None, max_length=10000)


class DispatchUpdateRequest(BaseModel):
    carrier_rate: Decimal | None = Field(default=None, ge=0)
    driver_name: str | None = Field(default=None, max_length=255)
    driver_phone: str | None = Field(default=None, max_length=64)
    truck_number: str | None = Field(default=None, max_length=64)
    trailer_number: str | None = Field(default=None, max_length=64)
    status: str | None = Field(default=None, max_length=40)
    rate_confirmation_sent: bool | None = None
    rate_confirmation_signed: bool | None = None
    estimated_pickup_time: datetime | None = None
    actual_pickup_time: datetime | None = None
    estimated_delivery_time: datetime | None = None
    actual_delivery_time: datetime | None = None
    notes: str | None = Field(default=None, max_length=10000)


class DispatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    order_id: int
    carrier_id: int
    carrier_rate: Decimal
    driver_name: str | None = None
    driver_phone: str | None = None
    truck_number: str | None = None
    trailer_number: str | None = None
    status: str
    derived_status: str | None = None
    rate_confirmation_sent: bool
    rate_confirmation_signed: bool
    estimated_pickup_time: datetime | None = None
    actual_pickup_time: datetime | None = None
    estimated_delivery_time: datetime | None = None
    actual_delivery_time: datetime | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
