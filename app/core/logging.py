"""Structured logging helpers for request-scoped events."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class LogContext:
    """Normalized context fields expected in structured logs."""

    user_id: str | None = None
    role: str | None = None
    entity_kind: str | None = None
    entity_id: int | None = None


def build_log_event(event: str, context: LogContext, **fields: Any) -> dict[str, Any]:
    """Build a normalized structured log payload for use as logging `extra`."""
    payload: dict[str, Any] = {
        "event_timestamp": datetime.now(timezone.utc).isoformat(),
        "event": event,
        "user_id": context.user_id,
        "role": context.role,
        "entity_kind": context.entity_kind,
        "entity_id": context.entity_id,
    }
    payload.update(fields)
    return payload
