"""Report export options."""

from enum import StrEnum


class ReportFormat(StrEnum):
    """Supported export formats."""

    CSV = "csv"
    PDF = "pdf"

    @property
    def content_type(self) -> str:
        return "text/csv" if self is ReportFormat.CSV else "application/pdf"


class ReportRange(StrEnum):
    """Date range selectors, resolved against the current time."""

    WEEK = "week"
    MONTH = "month"
    SEMESTER = "semester"
    YEAR = "year"

    @classmethod
    def parse(cls, value: str | None) -> "ReportRange":
        """Parse range; missing or unknown values fall back to month."""
        try:
            return cls(value) if value else cls.MONTH
        except ValueError:
            return cls.MONTH


_TAB_ALIASES = {
    "courses": "by-course",
    "lecturers": "by-lecturer",
    "students": "by-student",
    "trends": "daily-trends",
}


class ReportTab(StrEnum):
    """Report groupings."""

    OVERVIEW = "overview"
    BY_COURSE = "by-course"
    BY_LECTURER = "by-lecturer"
    BY_STUDENT = "by-student"
    DAILY_TRENDS = "daily-trends"

    @classmethod
    def parse(cls, value: str | None) -> "ReportTab":
        """Parse tab name or alias; missing or unknown values fall back to overview."""
        if not value:
            return cls.OVERVIEW
        try:
            return cls(_TAB_ALIASES.get(value, value))
        except ValueError:
            return cls.OVERVIEW
