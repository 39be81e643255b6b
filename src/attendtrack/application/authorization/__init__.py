"""Request authorization: resolvers, gate configurations and evaluator."""

from attendtrack.application.authorization.evaluator import (
    Decision,
    DenyReason,
    PermissionEvaluator,
    extract_resource_id,
)
from attendtrack.application.authorization.gate_config import (
    GATE_CONFIGS,
    AccessCheck,
    AdminOrCoordinatorCheck,
    GateConfig,
    get_gate_config,
)
from attendtrack.application.authorization.membership import ClassMembershipResolver
from attendtrack.application.authorization.ownership import OwnershipResolver

__all__ = [
    "GATE_CONFIGS",
    "AccessCheck",
    "AdminOrCoordinatorCheck",
    "ClassMembershipResolver",
    "Decision",
    "DenyReason",
    "GateConfig",
    "OwnershipResolver",
    "PermissionEvaluator",
    "extract_resource_id",
    "get_gate_config",
]
