"""Domain entities."""

from attendtrack.domain.entities.attendance_record import AttendanceRecord
from attendtrack.domain.entities.audit_log import AuditLog
from attendtrack.domain.entities.class_group import ClassGroup
from attendtrack.domain.entities.course_schedule import CourseSchedule
from attendtrack.domain.entities.lecturer import Lecturer
from attendtrack.domain.entities.notification import Notification
from attendtrack.domain.entities.report_entry import AttendanceReportEntry
from attendtrack.domain.entities.user import User

__all__ = [
    "AttendanceRecord",
    "AttendanceReportEntry",
    "AuditLog",
    "ClassGroup",
    "CourseSchedule",
    "Lecturer",
    "Notification",
    "User",
]
