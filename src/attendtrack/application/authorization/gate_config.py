"""Gate configurations and the registry of predefined ones."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Protocol

from attendtrack.application.dto.session_dto import RequestInfo, SessionUser
from attendtrack.domain.value_objects import (
    Permission,
    ResourceAction,
    ResourceType,
    UserRole,
)


class AccessCheck(Protocol):
    """Custom access predicate; its result is final when configured."""

    async def decide(self, session: SessionUser, request: RequestInfo) -> bool: ...


class AdminOrCoordinatorCheck:
    """Allow administrators and coordinators."""

    async def decide(self, session: SessionUser, request: RequestInfo) -> bool:
        return session.role in (UserRole.ADMIN, UserRole.COORDINATOR)


@dataclass(frozen=True)
class GateConfig:
    """What the gate checks for one route.

    Only the first configured branch is evaluated: custom_check, then
    permissions, then resource_type + action.
    """

    permissions: tuple[Permission, ...] = ()
    require_all: bool = False
    resource_type: ResourceType | None = None
    action: ResourceAction | None = None
    check_ownership: bool = False
    check_class_membership: bool = False
    custom_check: AccessCheck | None = None


GATE_CONFIGS: Mapping[str, GateConfig] = MappingProxyType(
    {
        "admin_only": GateConfig(permissions=(Permission.SYSTEM_SETTINGS,)),
        "admin_or_coordinator": GateConfig(custom_check=AdminOrCoordinatorCheck()),
        "user_management": GateConfig(
            permissions=(Permission.USER_READ, Permission.USER_LIST),
        ),
        "programme_management": GateConfig(
            permissions=(Permission.PROGRAMME_READ, Permission.PROGRAMME_LIST),
        ),
        "course_management": GateConfig(
            permissions=(Permission.COURSE_READ, Permission.COURSE_LIST),
        ),
        "schedule_access": GateConfig(
            resource_type=ResourceType.SCHEDULE,
            action=ResourceAction.READ,
            check_ownership=True,
            check_class_membership=True,
        ),
        "attendance_access": GateConfig(
            resource_type=ResourceType.ATTENDANCE,
            action=ResourceAction.READ,
            check_ownership=True,
            check_class_membership=True,
        ),
        "attendance_verify": GateConfig(
            resource_type=ResourceType.ATTENDANCE,
            action=ResourceAction.VERIFY,
            check_class_membership=True,
        ),
        "notification_access": GateConfig(
            resource_type=ResourceType.NOTIFICATION,
            action=ResourceAction.READ,
            check_ownership=True,
        ),
        "user_profile": GateConfig(
            resource_type=ResourceType.USER,
            action=ResourceAction.READ,
            check_ownership=True,
        ),
        "analytics_access": GateConfig(permissions=(Permission.ANALYTICS_READ,)),
        "notification_analytics": GateConfig(
            permissions=(Permission.NOTIFICATION_ANALYTICS,),
        ),
        "import_export_access": GateConfig(
            permissions=(Permission.DATA_IMPORT, Permission.DATA_EXPORT),
        ),
        "audit_access": GateConfig(permissions=(Permission.AUDIT_READ,)),
    }
)


def get_gate_config(name: str) -> GateConfig:
    """Look up a predefined gate; raises KeyError for unknown names."""
    return GATE_CONFIGS[name]
