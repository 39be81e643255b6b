"""PostgreSQL user repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import User
from attendtrack.domain.value_objects import UserRole


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: str) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            "SELECT id, email, first_name, last_name, role, is_active FROM users WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return User(
            id=r[0],
            email=r[1],
            first_name=r[2],
            last_name=r[3],
            role=UserRole.parse(r[4]),
            is_active=r[5],
        )
