"""Repository ports."""

from attendtrack.application.ports.repositories.attendance_repository import (
    AttendanceRepository,
)
from attendtrack.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from attendtrack.application.ports.repositories.class_group_repository import (
    ClassGroupRepository,
)
from attendtrack.application.ports.repositories.lecturer_repository import (
    LecturerRepository,
)
from attendtrack.application.ports.repositories.notification_repository import (
    NotificationRepository,
)
from attendtrack.application.ports.repositories.schedule_repository import (
    ScheduleRepository,
)
from attendtrack.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AttendanceRepository",
    "AuditLogRepository",
    "ClassGroupRepository",
    "LecturerRepository",
    "NotificationRepository",
    "ScheduleRepository",
    "UserRepository",
]
