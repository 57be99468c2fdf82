"""Dependency providers for API handlers."""

from __future__ import annotations

from collections.abc import Generator
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from app.auth.jwt import decode_jwt
from app.core.config import Config, get_config
from app.core.exceptions import AuthenticationError
from app.database.db import get_db


@dataclass(frozen=True)
class CurrentUser:
    user_id: str
    username: str
    role: str
    claims: dict[str, Any]


def get_settings() -> Config:
    """Return validated application configuration."""
    return get_config()


def get_db_session() -> Generator[Session, None, None]:
    """Yield SQLAlchemy session for dependency injection."""
    yield from get_db()


def get_current_user(token: str, settings: Config | None = None) -> CurrentUser:
    """Resolve the caller from a signed access token."""
    cfg = settings or get_settings()
    claims = decode_jwt(token=token, secret=cfg.JWT_SECRET)
    if claims.get("token_use") != "access":
        raise AuthenticationError("Token is not an access token.")

    try:
        return CurrentUser(
            user_id=str(claims["sub"]),
            username=str(claims.get("username", "")),
            role=str(claims["role"]).lower(),
            claims=claims,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise AuthenticationError("Invalid auth claims.") from exc
