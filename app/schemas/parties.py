"""Customer and carrier directory schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class ContactFields(BaseModel):
    company_name: str = Field(min_length=1, max_length=255)
    contact_person: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=320)
    phone: str = Field(min_length=1, max_length=64)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=120)
    state: str | None = Field(default=None, max_length=64)
    zip_code: str | None = Field(default=None, max_length=20)


class CustomerCreateRequest(ContactFields):
    billing_address: str | None = Field(default=None, max_length=255)
    billing_city: str | None = Field(default=None, max_length=120)
    billing_state: str | None = Field(default=None, max_length=64)
    billing_zip_code: str | None = Field(default=None, max_length=20)
    credit_limit: Decimal | None = Field(default=None, ge=0)
    payment_terms: str = Field(default="Net 30", max_length=64)
    special_instructions: str | None = Field(default=None, max_length=10000)
    is_active: bool = True


class CustomerUpdateRequest(BaseModel):
    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    contact_person: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone: str | None = Field(default=None, min_length=1, max_length=64)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=120)
    state: str | None = Field(default=None, max_length=64)
    zip_code: str | None = Field(default=None, max_length=20)
    billing_address: str | None = Field(default=None, max_length=255)
    billing_city: str | None = Field(default=None, max_length=120)
    billing_state: str | None = Field(default=None, max_length=64)
    billing_zip_code: str | None = Field(default=None, max_length=20)
    credit_limit: Decimal | None = Field(default=None, ge=0)
    payment_terms: str | None = Field(default=None, max_length=64)
    special_instructions: str | None = Field(default=None, max_length=10000)
    is_active: bool | None = None


class CustomerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    contact_person: str
    email: str
    phone: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    billing_address: str | None = None
    billing_city: str | None = None
    billing_state: str | None = None
    billing_zip_code: str | None = None
    credit_limit: Decimal | None = None
    payment_terms: str
    special_instructions: str | None = None
    is_active: bool
    created_at: datetime | None = None


class CarrierCreateRequest(ContactFields):
    mc_number: str | None = Field(default=None, max_length=32)
    dot_number: str | None = Field(default=None, max_length=32)
    insurance_expiry: date | None = None
    w9_on_file: bool = False
    performance_rating: Decimal = Field(default=Decimal("0.00"), ge=0, le=5)
    preferred_lanes: str | None = Field(default=None, max_length=10000)
    equipment_types: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)
    is_active: bool = True


class CarrierUpdateRequest(BaseModel):
    company_name: str | None = Field(default=None, min_length=1, max_length=255)
    contact_person: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=320)
    phone: str | None = Field(default=None, min_length=1, max_length=64)
    address: str | None = Field(default=None, max_length=255)
    city: str | None = Field(default=None, max_length=120)
    state: str | None = Field(default=None, max_length=64)
    zip_code: str | None = Field(default=None, max_length=20)
    mc_number: str | None = Field(default=None, max_length=32)
    dot_number: str | None = Field(default=None, max_length=32)
    insurance_expiry: date | None = None
    w9_on_file: bool | None = None
    performance_rating: Decimal | None = Field(default=None, ge=0, le=5)
    preferred_lanes: str | None = Field(default=None, max_length=10000)
    equipment_types: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)
    is_active: bool | None = None


class CarrierResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    company_name: str
    contact_person: str
    email: str
    phone: str
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    mc_number: str | None = None
    dot_number: str | None = None
    insurance_expiry: date | None = None
    w9_on_file: bool
    performance_rating: Decimal
    preferred_lanes: str | None = None
    equipment_types: str | None = None
    notes: str | None = None
    is_active: bool
    created_at: datetime | None = None
