"""Flattened attendance row used for reporting."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AttendanceReportEntry:
    """Attendance record joined with lecturer, course, class group and room."""

    record_id: str
    timestamp: datetime
    lecturer_id: str
    lecturer_first_name: str
    lecturer_last_name: str
    lecturer_email: str
    course_schedule_id: str
    course_code: str
    course_title: str
    class_group_name: str
    method: str
    classroom_name: str | None = None
    building_name: str | None = None
    class_rep_verified: bool | None = None
    class_rep_comment: str | None = None
    session_start_time: datetime | None = None
    session_end_time: datetime | None = None
