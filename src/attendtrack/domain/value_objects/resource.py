"""Resource types and actions used by resource-level permission checks."""

from enum import StrEnum


class ResourceType(StrEnum):
    """Resource kinds that support ownership or class-membership checks."""

    SCHEDULE = "schedule"
    ATTENDANCE = "attendance"
    USER = "user"
    NOTIFICATION = "notification"

    @classmethod
    def parse(cls, value: str | None) -> "ResourceType | None":
        """Parse resource type, None if unknown."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class ResourceAction(StrEnum):
    """Actions on a single resource instance."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    VERIFY = "verify"
