"""Domain value objects."""

from attendtrack.domain.value_objects.permission import Permission
from attendtrack.domain.value_objects.report_options import (
    ReportFormat,
    ReportRange,
    ReportTab,
)
from attendtrack.domain.value_objects.resource import ResourceAction, ResourceType
from attendtrack.domain.value_objects.user_role import UserRole

__all__ = [
    "Permission",
    "ReportFormat",
    "ReportRange",
    "ReportTab",
    "ResourceAction",
    "ResourceType",
    "UserRole",
]
