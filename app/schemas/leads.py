"""Lead request/response schemas for API contracts."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class LeadCreateRequest(BaseModel):
    company_name: str = Field(min_length=1, max_length=255)
    contact_person: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320)
    phone: str = Field(min_length=1, max_length=64)
    origin_city: str | None = Field(default=None, max_length=120)
    origin_state: str | None = Field(default=None, max_length=64)
    destination_city: str | None = Field(default=None, max_length=120)
    destination_state: str | None = Field(default=None, max_length=64)
    pickup_date: date | None = None
    equipment_type: str | None = Field(default=None, max_length=64)
    commodity: str | None = Field(default=None, max_length=255)
    weight: Decimal | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=10000)
    status: str | None = Field(default=None, max_length=40)


class LeadUpdateRequest(BaseModel):
    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    contact_person: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone: str | None = Field(default=None, min_length=1, max_length=64)
    origin_city: str | None = Field(default=None, max_length=120)
    origin_state: str | None = Field(default=None, max_length=64)
    destination_city: str | None = Field(default=None, max_length=120)
    destination_state: str | None = Field(default=None, max_length=64)
    pickup_date: date | None = None
    equipment_type: str | None = Field(default=None, max_length=64)
    commodity: str | None = Field(default=None, max_length=255)
    weight: Decimal | None = Field(default=None, ge=0)
    notes: str | None = Field(default=None, max_length=10000)
    status: str | None = Field(default=None, max_length=40)


class LeadResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    contact_person: str
    email: str
    phone: str
    origin_city: str | None = None
    origin_state: str | None = None
    destination_city: str | None = None
    destination_state: str | None = None
    pickup_date: date | None = None
    equipment_type: str | None = None
    commodity: str | None = None
    weight: Decimal | None = None
    notes: str | None = None
    status: str
    derived_status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
