"""Static role -> permission table.

Built once at import time; lookups never raise and unknown roles have no
permissions.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from attendtrack.domain.value_objects import Permission, UserRole

_COORDINATOR = frozenset(
    {
        Permission.USER_READ,
        Permission.USER_LIST,
        Permission.USER_CREATE,
        Permission.USER_UPDATE,
        Permission.PROGRAMME_READ,
        Permission.PROGRAMME_LIST,
        Permission.PROGRAMME_MANAGE,
        Permission.COURSE_READ,
        Permission.COURSE_LIST,
        Permission.COURSE_MANAGE,
        Permission.SCHEDULE_READ,
        Permission.SCHEDULE_LIST,
        Permission.SCHEDULE_MANAGE,
        Permission.ATTENDANCE_READ,
        Permission.ATTENDANCE_LIST,
        Permission.ANALYTICS_READ,
        Permission.NOTIFICATION_ANALYTICS,
        Permission.DATA_IMPORT,
        Permission.DATA_EXPORT,
    }
)

_LECTURER = frozenset(
    {
        Permission.PROGRAMME_READ,
        Permission.COURSE_READ,
        Permission.COURSE_LIST,
        Permission.SCHEDULE_READ,
        Permission.SCHEDULE_LIST,
        Permission.ATTENDANCE_READ,
        Permission.ATTENDANCE_LIST,
        Permission.ATTENDANCE_CREATE,
    }
)

_CLASS_REP = frozenset(
    {
        Permission.COURSE_READ,
        Permission.SCHEDULE_READ,
        Permission.ATTENDANCE_READ,
        Permission.ATTENDANCE_VERIFY,
    }
)

ROLE_PERMISSIONS: Mapping[UserRole, frozenset[Permission]] = MappingProxyType(
    {
        UserRole.ADMIN: frozenset(Permission),
        UserRole.COORDINATOR: _COORDINATOR,
        UserRole.LECTURER: _LECTURER,
        UserRole.CLASS_REP: _CLASS_REP,
    }
)


def has_permission(role: UserRole | None, permission: Permission) -> bool:
    """Check if role's capability set contains permission."""
    if role is None:
        return False
    return permission in ROLE_PERMISSIONS.get(role, frozenset())


def has_all_permissions(role: UserRole | None, permissions: Iterable[Permission]) -> bool:
    """AND over permissions. Empty list is vacuously true."""
    return all(has_permission(role, p) for p in permissions)


def has_any_permission(role: UserRole | None, permissions: Iterable[Permission]) -> bool:
    """OR over permissions. Empty list is vacuously true."""
    permissions = list(permissions)
    if not permissions:
        return True
    return any(has_permission(role, p) for p in permissions)


def has_permissions(
    role: UserRole | None,
    permissions: Iterable[Permission],
    require_all: bool = False,
) -> bool:
    """Combine per-permission checks with AND (require_all) or OR."""
    if require_all:
        return has_all_permissions(role, permissions)
    return has_any_permission(role, permissions)
