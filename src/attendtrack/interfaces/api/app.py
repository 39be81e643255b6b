"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from attendtrack.interfaces.api.resources.attendance import AttendanceRecordResource
from attendtrack.interfaces.api.resources.audit_logs import AuditLogsResource
from attendtrack.interfaces.api.resources.health import HealthResource
from attendtrack.interfaces.api.resources.notifications import NotificationResource
from attendtrack.interfaces.api.resources.reports import ReportExportResource
from attendtrack.interfaces.api.resources.schedules import ScheduleResource
from attendtrack.interfaces.api.resources.users import UserResource

logger = logging.getLogger(__name__)


async def handle_unexpected_error(req, resp, ex, params) -> None:
    """Log unhandled exceptions and answer with a generic 500."""
    logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    health_resource: HealthResource,
    schedule_resource: ScheduleResource,
    attendance_resource: AttendanceRecordResource,
    notification_resource: NotificationResource,
    user_resource: UserResource,
    audit_logs_resource: AuditLogsResource,
    report_export_resource: ReportExportResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/schedules/{schedule_id}", schedule_resource)
    app.add_route("/v1/attendance/{record_id}", attendance_resource)
    app.add_route("/v1/notifications/{notification_id}", notification_resource)
    app.add_route("/v1/users/{user_id}", user_resource)
    app.add_route("/v1/audit-logs", audit_logs_resource)
    app.add_route("/v1/reports/export", report_export_resource)
    return app
