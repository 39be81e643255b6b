"""Attendance record repository port."""

from datetime import datetime
from typing import Protocol

from attendtrack.domain.entities import AttendanceRecord, AttendanceReportEntry


class AttendanceRepository(Protocol):
    """Port for attendance record persistence."""

    async def get_by_id(self, record_id: str) -> AttendanceRecord | None: ...

    async def update_verification(
        self, record_id: str, verified: bool, comment: str | None
    ) -> None: ...

    async def list_for_report(
        self,
        start: datetime,
        end: datetime,
        lecturer_id: str | None = None,
    ) -> list[AttendanceReportEntry]: ...
