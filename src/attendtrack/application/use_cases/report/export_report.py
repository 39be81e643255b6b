"""Export attendance report use case."""

import logging
from collections.abc import Callable, Mapping
from datetime import UTC, datetime

from attendtrack.application.dto.report_dto import ExportedReport, ReportData, ReportRequest
from attendtrack.application.dto.session_dto import SessionUser
from attendtrack.application.ports import ReportRenderer
from attendtrack.application.use_cases.report.aggregation import aggregate, resolve_date_range
from attendtrack.domain.exceptions import PermissionDenied, ValidationError
from attendtrack.domain.value_objects import ReportFormat, ReportRange, ReportTab, UserRole

logger = logging.getLogger(__name__)

REPORT_ROLES = (UserRole.ADMIN, UserRole.COORDINATOR)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ExportReportUseCase:
    """Aggregate attendance records for a tab and range and render them."""

    def __init__(
        self,
        unit_of_work_factory: type,
        renderers: Mapping[ReportFormat, ReportRenderer],
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._renderers = renderers
        self._clock = clock

    async def execute(self, session: SessionUser, request: ReportRequest) -> ExportedReport:
        """Build the report. Only administrators and coordinators may export."""
        if session.role not in REPORT_ROLES:
            raise PermissionDenied("Only administrators and coordinators can export reports")

        try:
            report_format = ReportFormat(request.format or ReportFormat.CSV)
        except ValueError:
            raise ValidationError(f"Invalid format: {request.format}") from None
        renderer = self._renderers.get(report_format)
        if renderer is None:
            raise ValidationError(f"Invalid format: {request.format}")

        data = await self.collect(
            ReportTab.parse(request.tab),
            ReportRange.parse(request.range),
            request.lecturer_id,
        )

        filename = f"attendance-report-{data.tab}-{data.range}"
        if request.lecturer_id:
            async with self._uow_factory() as uow:
                lecturer = await uow.lecturers.get_by_id(request.lecturer_id)
            if lecturer:
                filename += f"-{lecturer.first_name}-{lecturer.last_name}"

        content = renderer.render(
            data.rows,
            title="Attendance Report",
            subtitle=f"{data.tab.upper()} - {data.range.upper()}",
        )
        logger.info(
            "User %s exported %s report %s (%d rows)",
            session.user_id,
            report_format,
            filename,
            len(data.rows),
        )
        return ExportedReport(
            filename=f"{filename}.{report_format}",
            content_type=report_format.content_type,
            content=content,
            row_count=len(data.rows),
        )

    async def collect(
        self,
        tab: ReportTab,
        report_range: ReportRange,
        lecturer_id: str | None = None,
    ) -> ReportData:
        """Fetch records in range and group them for the tab."""
        start, end = resolve_date_range(report_range, self._clock())
        async with self._uow_factory() as uow:
            entries = await uow.attendance.list_for_report(start, end, lecturer_id)
        return ReportData(
            tab=tab,
            range=report_range,
            start=start,
            end=end,
            rows=aggregate(tab, entries),
        )
