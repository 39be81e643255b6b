"""Attendance record entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class AttendanceRecord:
    """Lecturer check-in for a scheduled session."""

    id: str
    lecturer_id: str
    course_schedule_id: str
    timestamp: datetime
    location_verified: bool
    method: str
    gps_latitude: float | None = None
    gps_longitude: float | None = None
    class_rep_verified: bool | None = None
    class_rep_comment: str | None = None
    session_start_time: datetime | None = None
    session_end_time: datetime | None = None
    time_window_verified: bool = False
    meeting_link_verified: bool = False
    session_duration_met: bool = False
    device_fingerprint: str | None = None
    ip_address: str | None = None

    @property
    def verification_status(self) -> str:
        if self.class_rep_verified is True:
            return "Verified"
        if self.class_rep_verified is False:
            return "Disputed"
        return "Pending"
