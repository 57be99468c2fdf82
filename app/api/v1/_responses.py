"""Response shaping shared by the entity routers."""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel

from app.lifecycle.derived import compute_derived_status

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def serialize(schema: type[SchemaT], record: Any, now: datetime) -> SchemaT:
    """Validate `record` into `schema`, attaching its display status when the schema has one."""
    item = schema.model_validate(record)
    if "derived_status" in schema.model_fields:
        item.derived_status = compute_derived_status(record, now)
    return item
