"""PostgreSQL course schedule repository implementation."""

from psycopg import AsyncConnection

from attendtrack.domain.entities import CourseSchedule


class PostgresScheduleRepository:
    """Course schedule repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, schedule_id: str) -> CourseSchedule | None:
        """Get schedule by id, with the lecturer's user id."""
        cur = await self._conn.execute(
            "SELECT s.id, s.course_id, s.class_group_id, s.lecturer_id, l.user_id, "
            "s.day_of_week, s.start_time, s.end_time, s.session_type, s.classroom_id "
            "FROM course_schedules s LEFT JOIN lecturers l ON l.id = s.lecturer_id "
            "WHERE s.id = %s",
            (schedule_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return CourseSchedule(
            id=r[0],
            course_id=r[1],
            class_group_id=r[2],
            lecturer_id=r[3],
            lecturer_user_id=r[4],
            day_of_week=r[5],
            start_time=r[6],
            end_time=r[7],
            session_type=r[8],
            classroom_id=r[9],
        )
