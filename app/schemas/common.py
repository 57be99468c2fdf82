"""Common schema module."""

from __future__ import annotations

from pydantic import BaseModel, Field


class StatusUpdateRequest(BaseModel):
    status: str = Field(min_length=2, max_length=40)
