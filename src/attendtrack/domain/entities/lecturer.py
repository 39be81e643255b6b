"""Lecturer entity."""

from dataclasses import dataclass


@dataclass
class Lecturer:
    """Lecturer profile linked to a user; names are read from the user row."""

    id: str
    user_id: str
    employee_id: str
    first_name: str
    last_name: str
    email: str
    rank: str | None = None
    department: str | None = None
