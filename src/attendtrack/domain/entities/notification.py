"""Notification entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Notification:
    """Notification addressed to a single user."""

    id: str
    user_id: str
    title: str
    message: str
    created_at: datetime
    is_read: bool = False
