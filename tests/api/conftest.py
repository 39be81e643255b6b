"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from attendtrack.application.authorization import (
    ClassMembershipResolver,
    OwnershipResolver,
    PermissionEvaluator,
)
from attendtrack.application.dto.session_dto import SessionUser
from attendtrack.application.use_cases.attendance.verify_attendance import (
    VerifyAttendanceUseCase,
)
from attendtrack.application.use_cases.report.export_report import ExportReportUseCase
from attendtrack.domain.value_objects import ReportFormat, UserRole
from attendtrack.infrastructure.reporting import CsvReportRenderer, PdfReportRenderer
from attendtrack.interfaces.api.app import create_app
from attendtrack.interfaces.api.middleware.permission_gate import PermissionGateMiddleware
from attendtrack.interfaces.api.resources.attendance import AttendanceRecordResource
from attendtrack.interfaces.api.resources.audit_logs import AuditLogsResource
from attendtrack.interfaces.api.resources.health import HealthResource
from attendtrack.interfaces.api.resources.notifications import NotificationResource
from attendtrack.interfaces.api.resources.reports import ReportExportResource
from attendtrack.interfaces.api.resources.schedules import ScheduleResource
from attendtrack.interfaces.api.resources.users import UserResource

from tests.conftest import FakeUnitOfWork


class HeaderAuthMiddleware:
    """Middleware that sets context.user from X-Test-User / X-Test-Role headers."""

    async def process_request(self, req, resp):
        req.context.user = None
        user_id = req.get_header("X-Test-User")
        if user_id:
            req.context.user = SessionUser(
                user_id=user_id,
                role=UserRole.parse(req.get_header("X-Test-Role")),
            )


@pytest.fixture
def evaluator(uow_factory) -> PermissionEvaluator:
    return PermissionEvaluator(
        OwnershipResolver(uow_factory),
        ClassMembershipResolver(uow_factory),
    )


@pytest.fixture
def app(campus_uow: FakeUnitOfWork, uow_factory, evaluator: PermissionEvaluator):
    """Falcon ASGI app wired to the seeded in-memory store."""
    export_report = ExportReportUseCase(
        unit_of_work_factory=uow_factory,
        renderers={
            ReportFormat.CSV: CsvReportRenderer(),
            ReportFormat.PDF: PdfReportRenderer(),
        },
    )
    return create_app(
        health_resource=HealthResource(),
        schedule_resource=ScheduleResource(uow_factory),
        attendance_resource=AttendanceRecordResource(
            uow_factory, VerifyAttendanceUseCase(uow_factory)
        ),
        notification_resource=NotificationResource(uow_factory),
        user_resource=UserResource(uow_factory),
        audit_logs_resource=AuditLogsResource(uow_factory),
        report_export_resource=ReportExportResource(export_report),
        middleware=[HeaderAuthMiddleware(), PermissionGateMiddleware(evaluator)],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    return TestClient(app)
