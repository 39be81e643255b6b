"""PostgreSQL notification repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import Notification


class PostgresNotificationRepository:
    """Notification repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, notification_id: str) -> Notification | None:
        """Get notification by id."""
        cur = await self._conn.execute(
            "SELECT id, user_id, title, message, created_at, is_read "
            "FROM notifications WHERE id = %s",
            (notification_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Notification(
            id=r[0],
            user_id=r[1],
            title=r[2],
            message=r[3],
            created_at=r[4],
            is_read=r[5],
        )
