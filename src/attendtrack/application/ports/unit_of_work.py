"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from attendtrack.application.ports.repositories import (
    AttendanceRepository,
    AuditLogRepository,
    ClassGroupRepository,
    LecturerRepository,
    NotificationRepository,
    ScheduleRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def users(self) -> UserRepository: ...

    @property
    def lecturers(self) -> LecturerRepository: ...

    @property
    def class_groups(self) -> ClassGroupRepository: ...

    @property
    def schedules(self) -> ScheduleRepository: ...

    @property
    def attendance(self) -> AttendanceRepository: ...

    @property
    def notifications(self) -> NotificationRepository: ...

    @property
    def audit_logs(self) -> AuditLogRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
