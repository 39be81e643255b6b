"""Resource-level policy: role x resource type x action -> rule.

A rule says when an action is allowed on a single resource instance, given the
ownership and class-membership flags computed for the acting user. Missing
entries deny.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from attendtrack.domain.value_objects import ResourceAction, ResourceType, UserRole


class Rule(Enum):
    """When an action is allowed."""

    ALWAYS = "always"
    OWNER = "owner"
    MEMBER = "member"
    OWNER_OR_MEMBER = "owner_or_member"

    def permits(self, is_owner: bool, is_class_member: bool) -> bool:
        match self:
            case Rule.ALWAYS:
                return True
            case Rule.OWNER:
                return is_owner
            case Rule.MEMBER:
                return is_class_member
            case Rule.OWNER_OR_MEMBER:
                return is_owner or is_class_member


_Table = Mapping[ResourceType, Mapping[ResourceAction, Rule]]

_OWN_PROFILE = {
    ResourceAction.READ: Rule.OWNER,
    ResourceAction.UPDATE: Rule.OWNER,
}

_OWN_NOTIFICATIONS = {
    ResourceAction.READ: Rule.OWNER,
    ResourceAction.UPDATE: Rule.OWNER,
    ResourceAction.DELETE: Rule.OWNER,
}

RESOURCE_POLICY: Mapping[UserRole, _Table] = MappingProxyType(
    {
        UserRole.ADMIN: {
            resource_type: {action: Rule.ALWAYS for action in ResourceAction}
            for resource_type in ResourceType
        },
        UserRole.COORDINATOR: {
            ResourceType.SCHEDULE: {
                ResourceAction.READ: Rule.ALWAYS,
                ResourceAction.CREATE: Rule.ALWAYS,
                ResourceAction.UPDATE: Rule.ALWAYS,
            },
            ResourceType.ATTENDANCE: {ResourceAction.READ: Rule.ALWAYS},
            ResourceType.USER: {
                ResourceAction.READ: Rule.ALWAYS,
                ResourceAction.UPDATE: Rule.OWNER,
            },
            ResourceType.NOTIFICATION: _OWN_NOTIFICATIONS,
        },
        UserRole.LECTURER: {
            ResourceType.SCHEDULE: {ResourceAction.READ: Rule.OWNER},
            ResourceType.ATTENDANCE: {
                ResourceAction.READ: Rule.OWNER,
                ResourceAction.CREATE: Rule.ALWAYS,
                ResourceAction.UPDATE: Rule.OWNER,
            },
            ResourceType.USER: _OWN_PROFILE,
            ResourceType.NOTIFICATION: _OWN_NOTIFICATIONS,
        },
        UserRole.CLASS_REP: {
            ResourceType.SCHEDULE: {ResourceAction.READ: Rule.MEMBER},
            ResourceType.ATTENDANCE: {
                ResourceAction.READ: Rule.OWNER_OR_MEMBER,
                ResourceAction.VERIFY: Rule.MEMBER,
            },
            ResourceType.USER: _OWN_PROFILE,
            ResourceType.NOTIFICATION: _OWN_NOTIFICATIONS,
        },
    }
)


def is_resource_action_allowed(
    role: UserRole | None,
    resource_type: ResourceType | str,
    action: ResourceAction | str,
    *,
    is_owner: bool = False,
    is_class_member: bool = False,
) -> bool:
    """Check if role may perform action on a resource with the given flags."""
    if role is None:
        return False
    rule = RESOURCE_POLICY.get(role, {}).get(resource_type, {}).get(action)
    if rule is None:
        return False
    return rule.permits(is_owner, is_class_member)
