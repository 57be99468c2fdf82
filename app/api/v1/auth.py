"""Auth endpoints for API v1."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authenticate, authorize, service_errors
from app.auth.jwt import TokenPair, create_token_pair, decode_jwt
from app.auth.rbac import get_permissions, role_display_name
from app.core.config import get_config
from app.core.dependencies import get_db_session
from app.core.exceptions import AuthenticationError
from app.models import User
from app.schemas.auth import LoginRequest, RefreshRequest, TokenResponse
from app.schemas.users import CurrentUserResponse, PermissionsResponse, UserCreateRequest, UserResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_tokens(user: User) -> TokenResponse:
    cfg = get_config()
    tokens: TokenPair = create_token_pair(
        user_id=user.id,
        role=user.role,
        username=user.username,
        secret=cfg.JWT_SECRET,
        access_ttl_minutes=cfg.JWT_ACCESS_TTL_MINUTES,
        refresh_ttl_days=cfg.JWT_REFRESH_TTL_DAYS,
    )
    return TokenResponse(
        access_token=tokens.access_token,
        refresh_token=tokens.refresh_token,
        token_type=tokens.token_type,
    )


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db_session)) -> TokenResponse:
    with service_errors():
        user = UserService(db).authenticate(payload.username, payload.password)
    logger.info("auth.login", extra={"event": "auth.login", "user_id": user.id, "role": user.role})
    return _issue_tokens(user)


@router.post("/refresh", response_model=TokenResponse)
def refresh(payload: RefreshRequest, db: Session = Depends(get_db_session)) -> TokenResponse:
    cfg = get_config()
    try:
        claims = decode_jwt(payload.refresh_token, secret=cfg.JWT_SECRET)
        if claims.get("token_use") != "refresh":
            raise AuthenticationError("Token is not a refresh token.")
        user = UserService(db).get(str(claims.get("sub")))
        if user is None or not user.is_active:
            raise AuthenticationError("User is no longer active.")
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc

    return _issue_tokens(user)


@router.get("/me", response_model=CurrentUserResponse)
def me(
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> CurrentUserResponse:
    current = authenticate(authorization, db)
    with service_errors():
        user = UserService(db).require(current.user_id)
    return CurrentUserResponse(
        user=UserResponse.model_validate(user),
        role_display_name=role_display_name(user.role),
        permissions=PermissionsResponse(**get_permissions(user.role).as_dict()),
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> UserResponse:
    service = UserService(db)
    fields = payload.model_dump(exclude_none=True)
    with service_errors():
        # The first account bootstraps the install and is always an administrator.
        user = service.create_bootstrap_admin(**fields)
    if user is None:
        authorize(authorization, "users", "create", db)
        with service_errors():
            user = service.create_user(**fields)
    return UserResponse.model_validate(user)
