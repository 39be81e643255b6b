"""PostgreSQL audit log repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import AuditLog


class PostgresAuditLogRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def create(self, entry: AuditLog) -> AuditLog:
        """Append audit entry."""
        await self._conn.execute(
            "INSERT INTO audit_logs (id, user_id, action, target_type, target_id, metadata, timestamp) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.user_id,
                entry.action,
                entry.target_type,
                entry.target_id,
                entry.metadata,
                entry.timestamp,
            ),
        )
        return entry

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLog], str | None]:
        """List entries newest first. Cursor is the id of the last entry seen."""
        if cursor:
            cur = await self._conn.execute(
                "SELECT id, user_id, action, target_type, target_id, metadata, timestamp "
                "FROM audit_logs WHERE (timestamp, id) < "
                "(SELECT timestamp, id FROM audit_logs WHERE id = %s) "
                "ORDER BY timestamp DESC, id DESC LIMIT %s",
                (cursor, limit + 1),
            )
        else:
            cur = await self._conn.execute(
                "SELECT id, user_id, action, target_type, target_id, metadata, timestamp "
                "FROM audit_logs ORDER BY timestamp DESC, id DESC LIMIT %s",
                (limit + 1,),
            )
        rows = await cur.fetchall()
        items = [
            AuditLog(
                id=r[0],
                user_id=r[1],
                action=r[2],
                target_type=r[3],
                target_id=r[4],
                metadata=r[5],
                timestamp=r[6],
            )
            for r in rows[:limit]
        ]
        next_cursor = items[-1].id if len(rows) > limit else None
        return (items, next_cursor)
