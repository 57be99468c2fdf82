"""Follow-up task schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FollowUpCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10000)
    type: str = Field(min_length=1, max_length=16)
    lead_id: int | None = None
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    due_date: datetime
    completed: bool = False
    priority: str = Field(default="medium", max_length=16)
    assigned_to: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)


class FollowUpUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=10000)
    type: str | None = Field(default=None, max_length=16)
    lead_id: int | None = None
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    due_date: datetime | None = None
    completed: bool | None = None
    priority: str | None = Field(default=None, max_length=16)
    assigned_to: str | None = Field(default=None, max_length=255)
    notes: str | None = Field(default=None, max_length=10000)


class FollowUpResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    type: str
    lead_id: int | None = None
    customer_id: int | None = None
    carrier_id: int | None = None
    order_id: int | None = None
    due_date: datetime
    completed: bool
    completed_at: datetime | None = None
    priority: str
    assigned_to: str | None = None
    notes: str | None = None
    derived_status: str | None = None
    created_at: datetime | None = None
