"""Static authorization policy tables."""

from attendtrack.domain.policy.resource_policy import Rule, is_resource_action_allowed
from attendtrack.domain.policy.role_permissions import (
    ROLE_PERMISSIONS,
    has_all_permissions,
    has_any_permission,
    has_permission,
    has_permissions,
)

__all__ = [
    "ROLE_PERMISSIONS",
    "Rule",
    "has_all_permissions",
    "has_any_permission",
    "has_permission",
    "has_permissions",
    "is_resource_action_allowed",
]
