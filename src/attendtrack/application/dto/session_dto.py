"""Session and request DTOs consumed by the authorization layer."""

from dataclasses import dataclass, field

from attendtrack.domain.value_objects import UserRole


@dataclass(frozen=True)
class SessionUser:
    """Authenticated user from the identity provider."""

    user_id: str
    role: UserRole | None
    email: str | None = None


@dataclass(frozen=True)
class RequestInfo:
    """The parts of an inbound HTTP request the gate looks at."""

    method: str
    path: str
    params: dict[str, str | list[str]] = field(default_factory=dict)
