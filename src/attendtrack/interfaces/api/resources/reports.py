"""Report export API resource."""

import falcon.asgi

from attendtrack.application.dto.report_dto import ReportRequest
from attendtrack.application.use_cases.report.export_report import ExportReportUseCase
from attendtrack.domain.exceptions import PermissionDenied, ValidationError


class ReportExportResource:
    """GET /v1/reports/export - download attendance report as CSV or PDF."""

    access_gates = {"GET": "admin_or_coordinator"}

    def __init__(self, export_report: ExportReportUseCase) -> None:
        self._export = export_report

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Export report for format, range, tab and optional lecturerId."""
        request = ReportRequest(
            format=req.get_param("format"),
            range=req.get_param("range"),
            tab=req.get_param("tab"),
            lecturer_id=req.get_param("lecturerId"),
        )
        try:
            report = await self._export.execute(req.context.user, request)
        except ValidationError:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid format"}
            return
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Insufficient permissions"}
            return

        resp.status = falcon.HTTP_200
        resp.content_type = report.content_type
        resp.downloadable_as = report.filename
        resp.data = report.content
