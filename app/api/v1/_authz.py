"""Shared authorization and error translation helpers for API v1 route modules."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import replace

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.auth.rbac import has_permission, require_access
from app.core.config import get_config
from app.core.dependencies import CurrentUser, get_current_user
from app.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    EverFlownException,
    NotFoundError,
    ValidationError,
)
from app.models import User


def _extract_bearer_token(authorization: str | None) -> str:
    if authorization is None or not authorization.strip():
        raise AuthenticationError("Authorization header is required.")
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Authorization header must use Bearer token.")
    return parts[1].strip()


def authenticate(authorization: str | None, db: Session) -> CurrentUser:
    """Resolve the caller and re-read role and active flag from the stored user.

    Token claims only identify the caller. A role change or deactivation takes
    effect on the next request, not when the access token expires.
    """
    try:
        claimed = get_current_user(token=_extract_bearer_token(authorization), settings=get_config())
        user = db.get(User, claimed.user_id)
        if user is None or not user.is_active:
            raise AuthenticationError("User is no longer active.")
    except EverFlownException as exc:
        code, detail = map_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return replace(claimed, username=user.username, role=str(user.role).lower())


def authorize(authorization: str | None, resource: str, action: str, db: Session) -> CurrentUser:
    user = authenticate(authorization, db)
    try:
        require_access(user.role, resource, action)
    except AuthorizationError as exc:
        code, detail = map_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc
    return user


def map_error(exc: Exception) -> tuple[int, str]:
    if isinstance(exc, AuthenticationError):
        return status.HTTP_401_UNAUTHORIZED, str(exc)
    if isinstance(exc, AuthorizationError):
        return status.HTTP_403_FORBIDDEN, str(exc)
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND, str(exc)
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT, str(exc)
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc)
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error."


@contextmanager
def service_errors() -> Iterator[None]:
    """Re-raise application errors as HTTP errors with their mapped status."""
    try:
        yield
    except EverFlownException as exc:
        code, detail = map_error(exc)
        raise HTTPException(status_code=code, detail=detail) from exc


def authorize_permission(authorization: str | None, permission: str, db: Session) -> CurrentUser:
    """Authorize against a single permission flag rather than a resource action."""
    user = authenticate(authorization, db)
    if not has_permission(user.role, permission):
        code, detail = map_error(AuthorizationError(f"Role '{user.role}' lacks {permission}."))
        raise HTTPException(status_code=code, detail=detail)
    return user
