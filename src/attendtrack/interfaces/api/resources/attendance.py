"""Attendance record API resources."""

import falcon.asgi

from attendtrack.application.dto.attendance_dto import VerifyAttendanceInput
from attendtrack.application.use_cases.attendance.verify_attendance import (
    VerifyAttendanceUseCase,
)
from attendtrack.domain.entities import AttendanceRecord
from attendtrack.domain.exceptions import NotFound, PermissionDenied


def _record_to_dict(record: AttendanceRecord) -> dict:
    return {
        "id": record.id,
        "lecturer_id": record.lecturer_id,
        "course_schedule_id": record.course_schedule_id,
        "timestamp": record.timestamp.isoformat(),
        "method": record.method,
        "location_verified": record.location_verified,
        "gps_latitude": record.gps_latitude,
        "gps_longitude": record.gps_longitude,
        "status": record.verification_status,
        "class_rep_comment": record.class_rep_comment,
        "session_start_time": (
            record.session_start_time.isoformat() if record.session_start_time else None
        ),
        "session_end_time": (
            record.session_end_time.isoformat() if record.session_end_time else None
        ),
        "time_window_verified": record.time_window_verified,
        "meeting_link_verified": record.meeting_link_verified,
        "session_duration_met": record.session_duration_met,
    }


class AttendanceRecordResource:
    """GET/PATCH /v1/attendance/{id} - read a record, verify it as class representative."""

    access_gates = {"GET": "attendance_access", "PATCH": "attendance_verify"}

    def __init__(
        self,
        unit_of_work_factory: type,
        verify_attendance: VerifyAttendanceUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._verify = verify_attendance

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_id: str,
    ) -> None:
        """Get attendance record by id."""
        async with self._uow_factory() as uow:
            record = await uow.attendance.get_by_id(record_id)
        if not record:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Attendance record not found"}
            return

        resp.media = _record_to_dict(record)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        record_id: str,
    ) -> None:
        """Mark record verified or disputed."""
        try:
            body = await req.get_media()
            verified = body["verified"]
            comment = body.get("comment")
        except (KeyError, TypeError, falcon.MediaMalformedError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Invalid request body: {e}"}
            return
        if not isinstance(verified, bool) or not (comment is None or isinstance(comment, str)):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "verified must be a boolean and comment a string"}
            return

        try:
            record = await self._verify.execute(
                req.context.user,
                VerifyAttendanceInput(record_id=record_id, verified=verified, comment=comment),
            )
        except PermissionDenied:
            resp.status = falcon.HTTP_403
            resp.media = {"error": "Insufficient permissions"}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Attendance record not found"}
            return

        resp.media = _record_to_dict(record)
        resp.status = falcon.HTTP_200
