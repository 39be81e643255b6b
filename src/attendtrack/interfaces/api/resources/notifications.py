"""Notification API resources."""

import falcon.asgi


class NotificationResource:
    """GET /v1/notifications/{id} - recipient only."""

    access_gates = {"GET": "notification_access"}

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        notification_id: str,
    ) -> None:
        """Get notification by id."""
        async with self._uow_factory() as uow:
            notification = await uow.notifications.get_by_id(notification_id)
        if not notification:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Notification not found"}
            return

        resp.media = {
            "id": notification.id,
            "title": notification.title,
            "message": notification.message,
            "is_read": notification.is_read,
            "created_at": notification.created_at.isoformat(),
        }
        resp.status = falcon.HTTP_200
