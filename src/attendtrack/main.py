"""Application entry point and composition root."""

import logging

from attendtrack import __version__
from attendtrack.application.authorization import (
    ClassMembershipResolver,
    OwnershipResolver,
    PermissionEvaluator,
)
from attendtrack.application.use_cases.attendance.verify_attendance import (
    VerifyAttendanceUseCase,
)
from attendtrack.application.use_cases.report.export_report import ExportReportUseCase
from attendtrack.config import Settings, get_settings
from attendtrack.domain.value_objects import ReportFormat
from attendtrack.infrastructure.auth.keycloak_provider import KeycloakProvider
from attendtrack.infrastructure.persistence.postgres.connection import create_pool, ping
from attendtrack.infrastructure.persistence.postgres.unit_of_work import (
    create_uow_factory,
)
from attendtrack.infrastructure.reporting import CsvReportRenderer, PdfReportRenderer
from attendtrack.interfaces.api.app import create_app
from attendtrack.interfaces.api.middleware.auth import AuthMiddleware
from attendtrack.interfaces.api.middleware.cors import CORSMiddleware
from attendtrack.interfaces.api.middleware.permission_gate import PermissionGateMiddleware
from attendtrack.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from attendtrack.interfaces.api.resources.attendance import AttendanceRecordResource
from attendtrack.interfaces.api.resources.audit_logs import AuditLogsResource
from attendtrack.interfaces.api.resources.health import HealthResource
from attendtrack.interfaces.api.resources.notifications import NotificationResource
from attendtrack.interfaces.api.resources.reports import ReportExportResource
from attendtrack.interfaces.api.resources.schedules import ScheduleResource
from attendtrack.interfaces.api.resources.users import UserResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_attendtrack_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set, every request is unauthenticated")

    evaluator = PermissionEvaluator(
        OwnershipResolver(uow_factory),
        ClassMembershipResolver(uow_factory),
    )
    export_report = ExportReportUseCase(
        unit_of_work_factory=uow_factory,
        renderers={
            ReportFormat.CSV: CsvReportRenderer(),
            ReportFormat.PDF: PdfReportRenderer(max_rows=settings.report_pdf_max_rows),
        },
    )
    verify_attendance = VerifyAttendanceUseCase(unit_of_work_factory=uow_factory)

    logger.info("Starting AttendTrack v%s (%s)", __version__, settings.environment)
    return create_app(
        health_resource=HealthResource(readiness_probe=lambda: ping(pool)),
        schedule_resource=ScheduleResource(uow_factory),
        attendance_resource=AttendanceRecordResource(uow_factory, verify_attendance),
        notification_resource=NotificationResource(uow_factory),
        user_resource=UserResource(uow_factory),
        audit_logs_resource=AuditLogsResource(uow_factory),
        report_export_resource=ReportExportResource(export_report),
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
            PermissionGateMiddleware(evaluator),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "attendtrack.main:create_attendtrack_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )
