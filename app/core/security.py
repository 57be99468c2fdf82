"""Security primitives for password workflows."""

from __future__ import annotations

import hashlib
import hmac
import secrets

_ITERATIONS = 120_000


def hash_password(password: str, pepper: str = "", salt: str | None = None) -> str:
    """Return `salt$hexdigest` using PBKDF2-SHA256 over the peppered password."""
    salt = salt or secrets.token_hex(16)
    value = f"{pepper}:{password}".encode("utf-8")
    digest = hashlib.pbkdf2_hmac("sha256", value, salt.encode("utf-8"), _ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, hashed_password: str, pepper: str = "") -> bool:
    """Constant-time comparison for hashed password values."""
    salt, sep, _digest = hashed_password.partition("$")
    if not sep:
        return False
    candidate = hash_password(password=password, pepper=pepper, salt=salt)
    return hmac.compare_digest(candidate, hashed_password)
