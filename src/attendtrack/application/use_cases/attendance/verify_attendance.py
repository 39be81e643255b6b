"""Verify attendance use case."""

import json
from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

from attendtrack.application.dto.attendance_dto import VerifyAttendanceInput
from attendtrack.application.dto.session_dto import SessionUser
from attendtrack.domain.entities import AttendanceRecord, AuditLog
from attendtrack.domain.exceptions import NotFound, PermissionDenied
from attendtrack.domain.policy import has_permission
from attendtrack.domain.value_objects import Permission, ResourceType


class VerifyAttendanceUseCase:
    """Class representative confirms or disputes a lecturer's check-in."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, session: SessionUser, data: VerifyAttendanceInput
    ) -> AttendanceRecord:
        """Record the verdict and write an audit entry."""
        if not has_permission(session.role, Permission.ATTENDANCE_VERIFY):
            raise PermissionDenied("User cannot verify attendance")

        async with self._uow_factory() as uow:
            record = await uow.attendance.get_by_id(data.record_id)
            if not record:
                raise NotFound("AttendanceRecord", data.record_id)

            await uow.attendance.update_verification(
                record.id, data.verified, data.comment
            )
            await uow.audit_logs.create(
                AuditLog(
                    id=str(uuid4()),
                    user_id=session.user_id,
                    action="attendance.verify",
                    target_type=ResourceType.ATTENDANCE,
                    target_id=record.id,
                    timestamp=datetime.now(UTC),
                    metadata=json.dumps(
                        {"verified": data.verified, "comment": data.comment}
                    ),
                )
            )

        return replace(
            record,
            class_rep_verified=data.verified,
            class_rep_comment=data.comment,
        )
