from __future__ import annotations

import logging

import pytest

from app.auth.rbac import (
    NO_PERMISSIONS,
    PermissionSet,
    can_access_resource,
    get_permissions,
    has_permission,
    require_access,
    resolve_role,
    role_display_name,
)
from app.core.enums import UserRole
from app.core.exceptions import AuthorizationError

EXPECTED_ROWS = {
    None: (False, False, False, False, False, False, False),
    "user": (False, True, False, False, False, True, True),
    "broker": (True, True, True, True, False, True, True),
    "admin": (True, True, True, True, True, True, True),
}

FLAGS = (
    "can_create",
    "can_read",
    "can_update",
    "can_delete",
    "can_manage_users",
    "can_view_reports",
    "can_generate_pdfs",
)


@pytest.mark.parametrize("role", list(EXPECTED_ROWS))
def test_get_permissions_matches_role_table(role):
    permissions = get_permissions(role)
    assert tuple(getattr(permissions, flag) for flag in FLAGS) == EXPECTED_ROWS[role]


def test_unknown_role_falls_back_to_user_row(caplog):
    with caplog.at_level(logging.WARNING, logger="app.auth.rbac"):
        permissions = get_permissions("superuser")
    assert permissions == get_permissions("user")
    assert any(getattr(record, "event", None) == "acl.role.unknown_fallback" for record in caplog.records)


def test_blank_role_is_unauthenticated():
    assert get_permissions("") == NO_PERMISSIONS
    assert get_permissions("   ") == NO_PERMISSIONS
    assert resolve_role(None) is None


def test_role_values_are_case_insensitive():
    assert resolve_role(" Admin ") is UserRole.ADMIN
    assert get_permissions("BROKER") == get_permissions(UserRole.BROKER)


@pytest.mark.parametrize("role", ["admin", "broker", "user", "intern", None])
@pytest.mark.parametrize(
    ("action", "flag"),
    [
        ("create", "can_create"),
        ("read", "can_read"),
        ("view", "can_read"),
        ("update", "can_update"),
        ("edit", "can_update"),
        ("delete", "can_delete"),
    ],
)
def test_general_crud_mapping(role, action, flag):
    assert can_access_resource(role, "orders", action) is getattr(get_permissions(role), flag)


@pytest.mark.parametrize("role", ["admin", "broker", "user", "intern", None])
def test_special_cases_override_general_mapping(role):
    permissions = get_permissions(role)
    assert can_access_resource(role, "users", "create") is permissions.can_manage_users
    assert can_access_resource(role, "reports", "view") is permissions.can_view_reports
    assert can_access_resource(role, "pdf", "generate") is permissions.can_generate_pdfs


@pytest.mark.parametrize("action", ["generate", "approve", "", "DELETE_ALL"])
def test_unmatched_actions_are_denied(action):
    assert can_access_resource("admin", "orders", action) is False


def test_delete_and_user_management_scenarios():
    assert can_access_resource("user", "orders", "delete") is False
    assert can_access_resource("broker", "orders", "delete") is True
    assert can_access_resource("admin", "users", "create") is True
    assert can_access_resource("broker", "users", "create") is False


def test_require_access_raises_for_denied_action():
    require_access("broker", "quotes", "update")
    with pytest.raises(AuthorizationError):
        require_access("user", "quotes", "update")


def test_has_permission_denies_unknown_flags():
    assert has_permission("admin", "can_manage_users") is True
    assert has_permission("admin", "can_launch_rockets") is False


def test_permission_set_defaults_to_deny():
    assert PermissionSet() == NO_PERMISSIONS
    assert not any(NO_PERMISSIONS.as_dict().values())


def test_role_display_names():
    assert role_display_name("admin") == "Administrator"
    assert role_display_name(UserRole.BROKER) == "Broker"
    assert role_display_name("ghost") == "Unknown"
