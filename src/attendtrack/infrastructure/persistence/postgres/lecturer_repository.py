"""PostgreSQL lecturer repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import Lecturer


class PostgresLecturerRepository:
    """Lecturer repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, lecturer_id: str) -> Lecturer | None:
        """Get lecturer by id, with the owning user's names."""
        cur = await self._conn.execute(
            "SELECT l.id, l.user_id, l.employee_id, u.first_name, u.last_name, u.email, "
            "l.rank, l.department "
            "FROM lecturers l JOIN users u ON u.id = l.user_id WHERE l.id = %s",
            (lecturer_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return Lecturer(
            id=r[0],
            user_id=r[1],
            employee_id=r[2],
            first_name=r[3],
            last_name=r[4],
            email=r[5],
            rank=r[6],
            department=r[7],
        )
