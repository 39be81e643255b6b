"""PostgreSQL attendance record repository implementation."""

from datetime import datetime

from psycopg import AsyncConnection

from attendtrack.domain.entities import AttendanceRecord, AttendanceReportEntry

_RECORD_COLUMNS = (
    "id, lecturer_id, course_schedule_id, timestamp, location_verified, method, "
    "gps_latitude, gps_longitude, class_rep_verified, class_rep_comment, "
    "session_start_time, session_end_time, time_window_verified, "
    "meeting_link_verified, session_duration_met, device_fingerprint, ip_address"
)


class PostgresAttendanceRepository:
    """Attendance record repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, record_id: str) -> AttendanceRecord | None:
        """Get attendance record by id."""
        cur = await self._conn.execute(
            f"SELECT {_RECORD_COLUMNS} FROM attendance_records WHERE id = %s",
            (record_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return AttendanceRecord(
            id=r[0],
            lecturer_id=r[1],
            course_schedule_id=r[2],
            timestamp=r[3],
            location_verified=r[4],
            method=r[5],
            gps_latitude=r[6],
            gps_longitude=r[7],
            class_rep_verified=r[8],
            class_rep_comment=r[9],
            session_start_time=r[10],
            session_end_time=r[11],
            time_window_verified=r[12],
            meeting_link_verified=r[13],
            session_duration_met=r[14],
            device_fingerprint=r[15],
            ip_address=r[16],
        )

    async def update_verification(
        self, record_id: str, verified: bool, comment: str | None
    ) -> None:
        """Store the class representative's verdict."""
        await self._conn.execute(
            "UPDATE attendance_records SET class_rep_verified = %s, class_rep_comment = %s "
            "WHERE id = %s",
            (verified, comment, record_id),
        )

    async def list_for_report(
        self,
        start: datetime,
        end: datetime,
        lecturer_id: str | None = None,
    ) -> list[AttendanceReportEntry]:
        """Records in [start, end], joined with lecturer, course, group and room."""
        params: list[object] = [start, end]
        where = "a.timestamp >= %s AND a.timestamp <= %s"
        if lecturer_id:
            where += " AND a.lecturer_id = %s"
            params.append(lecturer_id)

        cur = await self._conn.execute(
            "SELECT a.id, a.timestamp, a.lecturer_id, u.first_name, u.last_name, u.email, "
            "a.course_schedule_id, c.course_code, c.title, g.name, a.method, "
            "r.name, b.name, a.class_rep_verified, a.class_rep_comment, "
            "a.session_start_time, a.session_end_time "
            "FROM attendance_records a "
            "JOIN lecturers l ON l.id = a.lecturer_id "
            "JOIN users u ON u.id = l.user_id "
            "JOIN course_schedules s ON s.id = a.course_schedule_id "
            "JOIN courses c ON c.id = s.course_id "
            "JOIN class_groups g ON g.id = s.class_group_id "
            "LEFT JOIN classrooms r ON r.id = s.classroom_id "
            "LEFT JOIN buildings b ON b.id = r.building_id "
            f"WHERE {where} ORDER BY a.timestamp DESC",
            params,
        )
        rows = await cur.fetchall()
        return [
            AttendanceReportEntry(
                record_id=r[0],
                timestamp=r[1],
                lecturer_id=r[2],
                lecturer_first_name=r[3],
                lecturer_last_name=r[4],
                lecturer_email=r[5],
                course_schedule_id=r[6],
                course_code=r[7],
                course_title=r[8],
                class_group_name=r[9],
                method=r[10],
                classroom_name=r[11],
                building_name=r[12],
                class_rep_verified=r[13],
                class_rep_comment=r[14],
                session_start_time=r[15],
                session_end_time=r[16],
            )
            for r in rows
        ]
