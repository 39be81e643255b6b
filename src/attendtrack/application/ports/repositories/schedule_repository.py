"""Course schedule repository port."""

from typing import Protocol

from attendtrack.domain.entities import CourseSchedule


class ScheduleRepository(Protocol):
    """Port for course schedule persistence."""

    async def get_by_id(self, schedule_id: str) -> CourseSchedule | None: ...
