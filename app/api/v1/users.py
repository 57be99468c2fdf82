"""User management endpoints for API v1."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.v1._authz import authenticate, authorize, authorize_permission, map_error, service_errors
from app.auth.rbac import has_permission
from app.core.dependencies import get_db_session
from app.core.exceptions import AuthorizationError
from app.schemas.users import UserCreateRequest, UserResponse, UserUpdateRequest
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])
MANAGE_USERS = "can_manage_users"
# Fields only a user manager may change, even on their own account.
MANAGED_FIELDS = frozenset({"role", "is_active"})


def _authorize_self_or_manager(authorization: str | None, user_id: str, db: Session, changes: dict | None = None):
    current = authenticate(authorization, db)
    if has_permission(current.role, MANAGE_USERS):
        return current
    if current.user_id != user_id or MANAGED_FIELDS & set(changes or {}):
        code, detail = map_error(AuthorizationError(f"Role '{current.role}' lacks {MANAGE_USERS}."))
        raise HTTPException(status_code=code, detail=detail)
    return current


@router.get("", response_model=list[UserResponse])
def list_users(
    role: str | None = Query(default=None),
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> list[UserResponse]:
    authorize_permission(authorization, MANAGE_USERS, db)
    with service_errors():
        users = UserService(db).list_users(role=role)
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: str,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> UserResponse:
    _authorize_self_or_manager(authorization, user_id, db)
    with service_errors():
        user = UserService(db).require(user_id)
    return UserResponse.model_validate(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> UserResponse:
    authorize(authorization, "users", "create", db)
    with service_errors():
        user = UserService(db).create_user(**payload.model_dump(exclude_none=True))
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    payload: UserUpdateRequest,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> UserResponse:
    changes = payload.model_dump(exclude_unset=True)
    _authorize_self_or_manager(authorization, user_id, db, changes)
    with service_errors():
        user = UserService(db).update_user(user_id, changes)
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    authorization: str | None = Header(default=None, alias="Authorization"),
    db: Session = Depends(get_db_session),
) -> None:
    current = authorize_permission(authorization, MANAGE_USERS, db)
    if current.user_id == user_id:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Users cannot delete their own account.")
    with service_errors():
        UserService(db).delete(user_id)
