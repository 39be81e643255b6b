"""Audit log entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AuditLog:
    """Record of an action taken by a user on a target."""

    id: str
    user_id: str
    action: str
    target_type: str
    target_id: str
    timestamp: datetime
    metadata: str | None = None
