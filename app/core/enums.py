"""Canonical enum values for freight back-office entities.

Stored values are lowercase snake_case to match the values the dispatch
board and the database rows have always used.
"""

from __future__ import annotations

import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    BROKER = "broker"
    USER = "user"


class EntityKind(str, enum.Enum):
    LEAD = "lead"
    QUOTE = "quote"
    ORDER = "order"
    DISPATCH = "dispatch"
    INVOICE = "invoice"
    FOLLOW_UP = "follow_up"


class LeadStatus(str, enum.Enum):
    NEW = "new"
    CONTACTED = "contacted"
    QUOTED = "quoted"
    CONVERTED = "converted"
    LOST = "lost"


class QuoteStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    EXPIRED = "expired"


class OrderStatus(str, enum.Enum):
    NEEDS_TRUCK = "needs_truck"
    DISPATCHED = "dispatched"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"


class DispatchStatus(str, enum.Enum):
    ASSIGNED = "assigned"
    PICKED_UP = "picked_up"
    IN_TRANSIT = "in_transit"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class InvoiceStatus(str, enum.Enum):
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"


class InvoiceType(str, enum.Enum):
    CUSTOMER = "customer"
    CARRIER = "carrier"


class FollowUpType(str, enum.Enum):
    CALL = "call"
    EMAIL = "email"
    MEETING = "meeting"
    OTHER = "other"


class FollowUpPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# Legacy literals still emitted by older screens and imports.
STATUS_ALIASES: dict[EntityKind, dict[str, str]] = {
    EntityKind.LEAD: {"won": LeadStatus.CONVERTED.value},
    EntityKind.QUOTE: {
        "converted": QuoteStatus.ACCEPTED.value,
        "pending": QuoteStatus.DRAFT.value,
    },
}


def normalize_status(kind: EntityKind, status: str) -> str:
    """Map a raw status literal onto its canonical stored value."""
    value = status.strip().lower()
    return STATUS_ALIASES.get(kind, {}).get(value, value)
