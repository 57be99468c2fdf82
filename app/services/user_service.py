"""User accounts: registration, credential checks and role management."""

from __future__ import annotations

import logging
import threading
from typing import Any

from sqlalchemy import func

from app.core.config import get_config
from app.core.enums import UserRole
from app.core.exceptions import AuthenticationError, ConflictError, ValidationError
from app.core.security import hash_password, verify_password
from app.models import User
from app.services.base_service import CrudService
from app.utils.ids import new_user_id
from app.utils.validators import is_valid_email, sanitize_optional

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
# Columns that may be changed but never cleared.
NON_NULLABLE_FIELDS = ("email", "role", "is_active")
_bootstrap_lock = threading.Lock()


class UserService(CrudService):
    model = User
    protected_fields = CrudService.protected_fields | {"hashed_password"}

    def __init__(self, db=None, pepper: str | None = None) -> None:
        super().__init__(db)
        self.pepper = get_config().PASSWORD_PEPPER if pepper is None else pepper

    def count(self) -> int:
        return self.db.query(func.count(User.id)).scalar() or 0

    def get_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username.strip()).first()

    def create_bootstrap_admin(self, **fields: Any) -> User | None:
        """Create the first account as an administrator, or return None once any user exists.

        The emptiness check and the insert run under a process-wide lock. Deployments
        with several worker processes should seed the administrator through
        `init_db` so the users table is never empty when the API starts.
        """
        with _bootstrap_lock:
            if self.count() > 0:
                return None
            fields["role"] = UserRole.ADMIN.value
            user = self.create_user(**fields)
        logger.info(
            "user.bootstrap_admin",
            extra={"event": "user.bootstrap_admin", "user_id": user.id},
        )
        return user

    def create_user(
        self,
        username: str,
        password: str,
        email: str,
        role: str = UserRole.USER.value,
        **profile: Any,
    ) -> User:
        username = sanitize_optional(username, max_len=255)
        if not username:
            raise ValidationError("Username is required")
        if not is_valid_email(email):
            raise ValidationError(f"Invalid email address: {email}")
        self._check_password(password)
        if self.get_by_username(username) is not None:
            raise ConflictError(f"Username already taken: {username}")

        user = User(
            id=new_user_id(),
            username=username,
            email=email.strip(),
            hashed_password=hash_password(password, pepper=self.pepper),
            role=self._check_role(role),
            **self._clean(profile),
        )
        self.db.add(user)
        self.commit()
        self.db.refresh(user)
        logger.info(
            "user.created",
            extra={"event": "user.created", "user_id": user.id, "role": user.role},
        )
        return user

    def authenticate(self, username: str, password: str) -> User:
        user = self.get_by_username(username or "")
        if user is None or not user.is_active:
            raise AuthenticationError("Invalid username or password")
        if not verify_password(password or "", user.hashed_password, pepper=self.pepper):
            raise AuthenticationError("Invalid username or password")
        return user

    def update_user(self, user_id: str, changes: dict[str, Any]) -> User:
        payload = dict(changes)
        password = payload.pop("password", None)
        cleared = [field for field in NON_NULLABLE_FIELDS if field in payload and payload[field] is None]
        if cleared:
            raise ValidationError(f"Fields cannot be null: {', '.join(cleared)}")
        if "role" in payload and payload["role"] is not None:
            payload["role"] = self._check_role(payload["role"])
        if payload.get("email") is not None and not is_valid_email(payload["email"]):
            raise ValidationError(f"Invalid email address: {payload['email']}")
        self._clean(payload)
        user = self.require(user_id)
        if password is not None:
            self._check_password(password)
            user.hashed_password = hash_password(password, pepper=self.pepper)
        return self.update(user_id, payload)

    def list_users(self, role: str | None = None) -> list[User]:
        return self.list(role=self._check_role(role) if role else None)

    def _check_role(self, role: str) -> str:
        try:
            return UserRole(str(role).strip().lower()).value
        except ValueError as exc:
            allowed = ", ".join(member.value for member in UserRole)
            raise ValidationError(f"Invalid role '{role}'. Must be one of: {allowed}") from exc

    def _check_password(self, password: str | None) -> None:
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
