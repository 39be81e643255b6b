"""Permission evaluator - turns a gate configuration into allow/deny."""

import logging
import re
from dataclasses import dataclass
from enum import StrEnum

from attendtrack.application.authorization.gate_config import GateConfig
from attendtrack.application.authorization.membership import ClassMembershipResolver
from attendtrack.application.authorization.ownership import OwnershipResolver
from attendtrack.application.dto.session_dto import RequestInfo, SessionUser
from attendtrack.domain.policy import has_permissions, is_resource_action_allowed

logger = logging.getLogger(__name__)

_UUID_SEGMENT = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}", re.IGNORECASE
)
_INT_SEGMENT = re.compile(r"[0-9]+")


class DenyReason(StrEnum):
    """Why a request was denied; the value is the client-facing message."""

    UNAUTHENTICATED = "Authentication required"
    ACCESS_DENIED = "Access denied"
    INSUFFICIENT_PERMISSIONS = "Insufficient permissions"
    RESOURCE_DENIED = "Access denied for this resource"


@dataclass(frozen=True)
class Decision:
    """Outcome of a gate evaluation."""

    allowed: bool
    reason: DenyReason | None = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason) -> "Decision":
        return cls(allowed=False, reason=reason)


def extract_resource_id(path: str | None) -> str | None:
    """Return the last path segment that looks like a UUID or an integer id."""
    if not path:
        return None
    for part in reversed(path.split("/")):
        if _UUID_SEGMENT.fullmatch(part) or _INT_SEGMENT.fullmatch(part):
            return part
    return None


class PermissionEvaluator:
    """Evaluates a GateConfig for a session and request."""

    def __init__(
        self,
        ownership_resolver: OwnershipResolver,
        membership_resolver: ClassMembershipResolver,
    ) -> None:
        self._ownership = ownership_resolver
        self._membership = membership_resolver

    async def evaluate(
        self,
        config: GateConfig,
        session: SessionUser | None,
        request: RequestInfo,
    ) -> Decision:
        """Apply the first configured check; default-allow when none is configured."""
        if session is None or not session.user_id:
            return Decision.deny(DenyReason.UNAUTHENTICATED)

        if config.custom_check is not None:
            if await config.custom_check.decide(session, request):
                return Decision.allow()
            return Decision.deny(DenyReason.ACCESS_DENIED)

        if config.permissions:
            if has_permissions(session.role, config.permissions, config.require_all):
                return Decision.allow()
            return Decision.deny(DenyReason.INSUFFICIENT_PERMISSIONS)

        if config.resource_type and config.action:
            if await self._check_resource(config, session, request):
                return Decision.allow()
            return Decision.deny(DenyReason.RESOURCE_DENIED)

        logger.debug("No checks configured for %s %s, allowing", request.method, request.path)
        return Decision.allow()

    async def _check_resource(
        self, config: GateConfig, session: SessionUser, request: RequestInfo
    ) -> bool:
        is_owner = False
        is_class_member = False
        if config.check_ownership or config.check_class_membership:
            resource_id = extract_resource_id(request.path)
            if config.check_ownership:
                is_owner = await self._ownership.is_owner(
                    config.resource_type, resource_id, session.user_id, session.role
                )
            if config.check_class_membership:
                is_class_member = await self._membership.is_class_member(
                    config.resource_type, resource_id, session.user_id, session.role
                )
        return is_resource_action_allowed(
            session.role,
            config.resource_type,
            config.action,
            is_owner=is_owner,
            is_class_member=is_class_member,
        )
