"""User roles."""

from enum import StrEnum


class UserRole(StrEnum):
    """Fixed set of roles a user can hold."""

    ADMIN = "admin"
    COORDINATOR = "coordinator"
    LECTURER = "lecturer"
    CLASS_REP = "class_rep"

    @classmethod
    def parse(cls, value: str | None) -> "UserRole | None":
        """Parse a role name (case-insensitive), None if unknown."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
