"""Role-based authorization helpers.

Permissions are derived from the role on every call and never persisted.
Every check fails closed: a missing role, resource or action resolves to
a denial instead of an exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from app.core.enums import UserRole
from app.core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PermissionSet:
    can_create: bool = False
    can_read: bool = False
    can_update: bool = False
    can_delete: bool = False
    can_manage_users: bool = False
    can_view_reports: bool = False
    can_generate_pdfs: bool = False

    def as_dict(self) -> dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


NO_PERMISSIONS = PermissionSet()

ROLE_PERMISSIONS: dict[UserRole, PermissionSet] = {
    UserRole.ADMIN: PermissionSet(
        can_create=True,
        can_read=True,
        can_update=True,
        can_delete=True,
        can_manage_users=True,
        can_view_reports=True,
        can_generate_pdfs=True,
    ),
    # Brokers run the whole freight desk but cannot manage user accounts.
    UserRole.BROKER: PermissionSet(
        can_create=True,
        can_read=True,
        can_update=True,
        can_delete=True,
        can_manage_users=False,
        can_view_reports=True,
        can_generate_pdfs=True,
    ),
    UserRole.USER: PermissionSet(
        can_read=True,
        can_view_reports=True,
        can_generate_pdfs=True,
    ),
}

FALLBACK_ROLE = UserRole.USER

# (resource, action) pairs that bypass the general CRUD mapping.
SPECIAL_ACCESS: dict[tuple[str, str], str] = {
    ("users", "create"): "can_manage_users",
    ("reports", "view"): "can_view_reports",
    ("pdf", "generate"): "can_generate_pdfs",
}

ACTION_PERMISSIONS: dict[str, str] = {
    "create": "can_create",
    "read": "can_read",
    "view": "can_read",
    "update": "can_update",
    "edit": "can_update",
    "delete": "can_delete",
}

ROLE_DISPLAY_NAMES: dict[UserRole, str] = {
    UserRole.ADMIN: "Administrator",
    UserRole.BROKER: "Broker",
    UserRole.USER: "User",
}


def resolve_role(role: UserRole | str | None) -> UserRole | None:
    """Return the closed role for a raw value.

    None or blank means unauthenticated. Any other unrecognized value falls
    back to the most restrictive authenticated role.
    """
    if role is None:
        return None
    if isinstance(role, UserRole):
        return role
    value = str(role).strip().lower()
    if not value:
        return None
    try:
        return UserRole(value)
    except ValueError:
        logger.warning(
            "acl.role.unknown_fallback",
            extra={"event": "acl.role.unknown_fallback", "role": value, "fallback": FALLBACK_ROLE.value},
        )
        return FALLBACK_ROLE


def get_permissions(role: UserRole | str | None) -> PermissionSet:
    """Return the full permission set granted to a role."""
    resolved = resolve_role(role)
    if resolved is None:
        return NO_PERMISSIONS
    return ROLE_PERMISSIONS[resolved]


def has_permission(role: UserRole | str | None, permission: str) -> bool:
    """Check a single permission flag by name; unknown flags are denied."""
    return get_permissions(role).as_dict().get(permission, False)


def can_access_resource(role: UserRole | str | None, resource: str, action: str) -> bool:
    """Resolve whether a role may perform `action` on `resource`."""
    permissions = get_permissions(role)
    key = ((resource or "").strip().lower(), (action or "").strip().lower())

    special = SPECIAL_ACCESS.get(key)
    if special is not None:
        return getattr(permissions, special)

    flag = ACTION_PERMISSIONS.get(key[1])
    if flag is None:
        return False
    return getattr(permissions, flag)


def require_access(role: UserRole | str | None, resource: str, action: str) -> None:
    """Raise when a role may not perform `action` on `resource`."""
    if can_access_resource(role, resource, action):
        return
    logger.info(
        "acl.access.denied",
        extra={"event": "acl.access.denied", "role": str(role), "resource": resource, "action": action},
    )
    raise AuthorizationError(f"Role '{role}' may not {action} {resource}.")


def role_display_name(role: UserRole | str | None) -> str:
    """Human label for a role; values outside the closed set read as Unknown."""
    if isinstance(role, UserRole):
        return ROLE_DISPLAY_NAMES[role]
    try:
        return ROLE_DISPLAY_NAMES[UserRole(str(role).strip().lower())]
    except ValueError:
        return "Unknown"
