"""Permission tokens checked against a role's static capability set."""

from enum import StrEnum


class Permission(StrEnum):
    """Atomic named capabilities."""

    USER_READ = "user:read"
    USER_LIST = "user:list"
    USER_CREATE = "user:create"
    USER_UPDATE = "user:update"
    USER_DELETE = "user:delete"

    PROGRAMME_READ = "programme:read"
    PROGRAMME_LIST = "programme:list"
    PROGRAMME_MANAGE = "programme:manage"

    COURSE_READ = "course:read"
    COURSE_LIST = "course:list"
    COURSE_MANAGE = "course:manage"

    SCHEDULE_READ = "schedule:read"
    SCHEDULE_LIST = "schedule:list"
    SCHEDULE_MANAGE = "schedule:manage"

    ATTENDANCE_READ = "attendance:read"
    ATTENDANCE_LIST = "attendance:list"
    ATTENDANCE_CREATE = "attendance:create"
    ATTENDANCE_VERIFY = "attendance:verify"

    ANALYTICS_READ = "analytics:read"
    NOTIFICATION_ANALYTICS = "notification:analytics"
    DATA_IMPORT = "data:import"
    DATA_EXPORT = "data:export"
    AUDIT_READ = "audit:read"
    SYSTEM_SETTINGS = "system:settings"
