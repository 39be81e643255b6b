"""Report export DTOs."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from attendtrack.domain.value_objects import ReportRange, ReportTab


@dataclass
class ReportRequest:
    """Raw export parameters as received from the client."""

    format: str | None = None
    range: str | None = None
    tab: str | None = None
    lecturer_id: str | None = None


@dataclass
class ReportData:
    """Aggregated rows for one tab and date range."""

    tab: ReportTab
    range: ReportRange
    start: datetime
    end: datetime
    rows: list[dict[str, Any]]


@dataclass
class ExportedReport:
    """Rendered report ready to be sent as an attachment."""

    filename: str
    content_type: str
    content: bytes
    row_count: int
