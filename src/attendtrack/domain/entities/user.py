"""User entity."""

from dataclasses import dataclass

from attendtrack.domain.value_objects import UserRole


@dataclass
class User:
    """User - identity with a single role."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole | None
    is_active: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
