"""Report aggregation - date ranges and per-tab groupings of attendance rows."""

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta
from typing import Any

from attendtrack.domain.entities import AttendanceReportEntry
from attendtrack.domain.value_objects import ReportRange, ReportTab

Row = dict[str, Any]


def resolve_date_range(report_range: ReportRange, now: datetime) -> tuple[datetime, datetime]:
    """Map a range selector to (start, end) relative to now.

    Semesters start on 1 September and 1 January.
    """
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    match report_range:
        case ReportRange.WEEK:
            start = now - timedelta(days=7)
        case ReportRange.SEMESTER:
            start = midnight.replace(month=9 if now.month >= 9 else 1, day=1)
        case ReportRange.YEAR:
            start = midnight.replace(month=1, day=1)
        case _:
            start = midnight.replace(day=1)
    return start, now


def _format_time(value: datetime | None) -> str:
    return value.strftime("%H:%M:%S") if value else "N/A"


def overview_rows(entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """One row per attendance record, newest first."""
    ordered = sorted(entries, key=lambda e: e.timestamp, reverse=True)
    return [
        {
            "Date": e.timestamp.strftime("%Y-%m-%d"),
            "Time": e.timestamp.strftime("%H:%M:%S"),
            "Lecturer": f"{e.lecturer_first_name} {e.lecturer_last_name}",
            "Course": f"{e.course_code} - {e.course_title}",
            "ClassGroup": e.class_group_name,
            "Classroom": f"{e.classroom_name or 'N/A'} ({e.building_name or 'N/A'})",
            "Status": _verification_status(e.class_rep_verified),
            "Method": e.method,
            "SessionStart": _format_time(e.session_start_time),
            "SessionEnd": _format_time(e.session_end_time),
            "Remarks": e.class_rep_comment or "N/A",
        }
        for e in ordered
    ]


def _verification_status(verified: bool | None) -> str:
    if verified is True:
        return "Verified"
    if verified is False:
        return "Disputed"
    return "Pending"


def course_rows(entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """Attendance count per course schedule, in order of first appearance."""
    counts = Counter(e.course_schedule_id for e in entries)
    first: dict[str, AttendanceReportEntry] = {}
    for e in entries:
        first.setdefault(e.course_schedule_id, e)
    return [
        {
            "CourseCode": e.course_code or "N/A",
            "CourseTitle": e.course_title or "N/A",
            "ClassGroup": e.class_group_name or "N/A",
            "AttendanceCount": counts[schedule_id],
        }
        for schedule_id, e in first.items()
    ]


def lecturer_rows(entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """Attendance count per lecturer, in order of first appearance."""
    counts = Counter(e.lecturer_id for e in entries)
    first: dict[str, AttendanceReportEntry] = {}
    for e in entries:
        first.setdefault(e.lecturer_id, e)
    return [
        {
            "LecturerName": f"{e.lecturer_first_name or 'N/A'} {e.lecturer_last_name or ''}".strip(),
            "Email": e.lecturer_email or "N/A",
            "AttendanceCount": counts[lecturer_id],
        }
        for lecturer_id, e in first.items()
    ]


def student_rows(entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """Per-student breakdown; students are not tracked yet, so always empty."""
    return []


def daily_trend_rows(entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """Attendance count per calendar day, oldest first."""
    counts = Counter(e.timestamp.date() for e in entries)
    return [
        {"Date": day.isoformat(), "AttendanceCount": count}
        for day, count in sorted(counts.items())
    ]


_GROUPINGS = {
    ReportTab.OVERVIEW: overview_rows,
    ReportTab.BY_COURSE: course_rows,
    ReportTab.BY_LECTURER: lecturer_rows,
    ReportTab.BY_STUDENT: student_rows,
    ReportTab.DAILY_TRENDS: daily_trend_rows,
}


def aggregate(tab: ReportTab, entries: Sequence[AttendanceReportEntry]) -> list[Row]:
    """Group entries for the given tab."""
    return _GROUPINGS[tab](entries)
