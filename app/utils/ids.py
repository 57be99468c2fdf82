"""Identifier generation helpers."""

from __future__ import annotations

import time
import uuid

QUOTE_PREFIX = "QT"
ORDER_PREFIX = "ORD"
INVOICE_PREFIX = "INV"


def new_document_number(prefix: str) -> str:
    """Create a `<PREFIX>-<epoch millis>` document number.

    A short random suffix keeps numbers unique when two are issued in the
    same millisecond.
    """
    millis = int(time.time() * 1000)
    return f"{prefix}-{millis}-{uuid.uuid4().hex[:4].upper()}"


def new_user_id() -> str:
    """Create a UUID4-based user identifier."""
    return f"user-{uuid.uuid4().hex}"
