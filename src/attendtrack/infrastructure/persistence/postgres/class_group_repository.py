"""PostgreSQL class group repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import ClassGroup


class PostgresClassGroupRepository:
    """Class group repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, class_group_id: str) -> ClassGroup | None:
        """Get class group by id."""
        cur = await self._conn.execute(
            "SELECT id, name, programme_id, admission_year, delivery_mode, class_rep_id "
            "FROM class_groups WHERE id = %s",
            (class_group_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return ClassGroup(
            id=r[0],
            name=r[1],
            programme_id=r[2],
            admission_year=r[3],
            delivery_mode=r[4],
            class_rep_id=r[5],
        )

    async def list_ids_by_rep(self, user_id: str) -> set[str]:
        """Ids of all class groups the user represents."""
        cur = await self._conn.execute(
            "SELECT id FROM class_groups WHERE class_rep_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return {r[0] for r in rows}
