from __future__ import annotations

import re

from app.utils.ids import ORDER_PREFIX, new_document_number, new_user_id
from app.utils.validators import (
    is_valid_email,
    normalize_lane_fields,
    normalize_state_code,
    sanitize_optional,
    sanitize_text,
)


def test_sanitize_text_strips_nulls_and_truncates():
    assert sanitize_text("  load\x00 board  ") == "load board"
    assert sanitize_text(None) == ""
    assert sanitize_text("abcdef", max_len=3) == "abc"


def test_sanitize_optional_keeps_blank_as_none():
    assert sanitize_optional("   ") is None
    assert sanitize_optional(" x ") == "x"


def test_email_validation():
    assert is_valid_email("ops@acme-freight.com")
    assert not is_valid_email("ops@acme")
    assert not is_valid_email(None)


def test_state_codes_are_uppercased():
    assert normalize_state_code(" tx ") == "TX"
    assert normalize_state_code("Ontario") == "Ontario"
    assert normalize_state_code("") is None


def test_normalize_lane_fields_copies_payload():
    payload = {"origin_state": "ca", "destination_state": "nv", "origin_city": "Fresno"}
    normalized = normalize_lane_fields(payload)
    assert normalized == {"origin_state": "CA", "destination_state": "NV", "origin_city": "Fresno"}
    assert payload["origin_state"] == "ca"


def test_document_numbers_are_prefixed_and_unique():
    numbers = {new_document_number(ORDER_PREFIX) for _ in range(50)}
    assert len(numbers) == 50
    assert all(re.match(r"^ORD-\d+-[0-9A-F]{4}$", number) for number in numbers)


def test_user_ids_are_prefixed():
    assert new_user_id().startswith("user-")
