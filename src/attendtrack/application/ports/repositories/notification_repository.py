"""Notification repository port."""

from typing import Protocol

from attendtrack.domain.entities import Notification


class NotificationRepository(Protocol):
    """Port for notification persistence."""

    async def get_by_id(self, notification_id: str) -> Notification | None: ...
