"""Attendance DTOs."""

from dataclasses import dataclass


@dataclass
class VerifyAttendanceInput:
    """Class representative verdict on an attendance record."""

    record_id: str
    verified: bool
    comment: str | None = None
