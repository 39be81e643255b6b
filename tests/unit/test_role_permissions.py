"""Unit tests for the static role -> permission table."""

import pytest

from attendtrack.domain.policy import (
    ROLE_PERMISSIONS,
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_permissions,
)
from attendtrack.domain.value_objects import Permission, UserRole


def test_admin_holds_every_permission() -> None:
    assert ROLE_PERMISSIONS[UserRole.ADMIN] == frozenset(Permission)


@pytest.mark.parametrize(
    ("role", "permission", "expected"),
    [
        (UserRole.COORDINATOR, Permission.DATA_EXPORT, True),
        (UserRole.COORDINATOR, Permission.SYSTEM_SETTINGS, False),
        (UserRole.COORDINATOR, Permission.AUDIT_READ, False),
        (UserRole.LECTURER, Permission.ATTENDANCE_CREATE, True),
        (UserRole.LECTURER, Permission.ATTENDANCE_VERIFY, False),
        (UserRole.LECTURER, Permission.USER_LIST, False),
        (UserRole.CLASS_REP, Permission.ATTENDANCE_VERIFY, True),
        (UserRole.CLASS_REP, Permission.ATTENDANCE_CREATE, False),
    ],
)
def test_has_permission(role: UserRole, permission: Permission, expected: bool) -> None:
    assert has_permission(role, permission) is expected


def test_unknown_role_has_no_permissions() -> None:
    """A role that failed to parse is None and holds nothing."""
    assert has_permission(UserRole.parse("janitor"), Permission.SCHEDULE_READ) is False
    assert has_permission(None, Permission.USER_READ) is False


def test_empty_permission_list_is_vacuously_true() -> None:
    assert has_all_permissions(UserRole.CLASS_REP, []) is True
    assert has_any_permission(UserRole.CLASS_REP, []) is True
    assert has_any_permission(None, []) is True


def test_any_versus_all() -> None:
    perms = [Permission.USER_READ, Permission.SYSTEM_SETTINGS]
    assert has_permissions(UserRole.COORDINATOR, perms) is True
    assert has_permissions(UserRole.COORDINATOR, perms, require_all=True) is False
    assert has_permissions(UserRole.ADMIN, perms, require_all=True) is True


def test_any_accepts_generator() -> None:
    perms = (p for p in [Permission.DATA_IMPORT, Permission.DATA_EXPORT])
    assert has_any_permission(UserRole.LECTURER, perms) is False


def test_role_parse_is_case_insensitive() -> None:
    assert UserRole.parse("ADMIN") is UserRole.ADMIN
    assert UserRole.parse(" Class_Rep ") is UserRole.CLASS_REP
    assert UserRole.parse("") is None
    assert UserRole.parse(None) is None


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        ROLE_PERMISSIONS[UserRole.LECTURER] = frozenset(Permission)  # type: ignore[index]


@pytest.mark.parametrize("role", [*UserRole, None])
def test_all_implies_any(role: UserRole | None) -> None:
    perms = list(Permission)
    for i, first in enumerate(perms):
        for second in perms[i:]:
            pair = [first, second]
            if has_all_permissions(role, pair):
                assert has_any_permission(role, pair)
