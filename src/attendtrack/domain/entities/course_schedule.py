"""Course schedule entity."""

from dataclasses import dataclass


@dataclass
class CourseSchedule:
    """Weekly slot of a course for a class group, taught by a lecturer.

    lecturer_user_id is the user behind lecturer_id.
    """

    id: str
    course_id: str
    class_group_id: str
    lecturer_id: str
    lecturer_user_id: str | None
    day_of_week: int
    start_time: str
    end_time: str
    session_type: str
    classroom_id: str | None = None
