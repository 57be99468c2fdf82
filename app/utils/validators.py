"""Deterministic validators and sanitizers for free-form record fields."""

from __future__ import annotations

import re

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")
STATE_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")


def sanitize_text(value: str | None, max_len: int = 20000) -> str:
    """Sanitize free-form content before persistence/display."""
    if value is None:
        return ""
    cleaned = str(value).replace("\x00", "").strip()
    cleaned = cleaned[:max_len]
    return cleaned


def sanitize_optional(value: str | None, max_len: int = 20000) -> str | None:
    """Like sanitize_text, but blank input stays None."""
    cleaned = sanitize_text(value, max_len=max_len)
    return cleaned or None


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return bool(EMAIL_PATTERN.match(value.strip()))


def normalize_state_code(value: str | None) -> str | None:
    """Uppercase two-letter state/province codes; longer names pass through trimmed."""
    cleaned = sanitize_optional(value, max_len=64)
    if cleaned is None:
        return None
    upper = cleaned.upper()
    return upper if STATE_CODE_PATTERN.match(upper) else cleaned


LANE_STATE_FIELDS = ("origin_state", "destination_state")


def normalize_lane_fields(data: dict) -> dict:
    """Return a copy of `data` with its origin/destination state codes normalized."""
    payload = dict(data)
    for name in LANE_STATE_FIELDS:
        if payload.get(name):
            payload[name] = normalize_state_code(payload[name])
    return payload
