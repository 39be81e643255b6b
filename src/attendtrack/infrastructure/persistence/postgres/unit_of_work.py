"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from attendtrack.infrastructure.persistence.postgres.attendance_repository import (
    PostgresAttendanceRepository,
)
from attendtrack.infrastructure.persistence.postgres.audit_log_repository import (
    PostgresAuditLogRepository,
)
from attendtrack.infrastructure.persistence.postgres.class_group_repository import (
    PostgresClassGroupRepository,
)
from attendtrack.infrastructure.persistence.postgres.lecturer_repository import (
    PostgresLecturerRepository,
)
from attendtrack.infrastructure.persistence.postgres.notification_repository import (
    PostgresNotificationRepository,
)
from attendtrack.infrastructure.persistence.postgres.schedule_repository import (
    PostgresScheduleRepository,
)
from attendtrack.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        self._users = PostgresUserRepository(self._conn)
        self._lecturers = PostgresLecturerRepository(self._conn)
        self._class_groups = PostgresClassGroupRepository(self._conn)
        self._schedules = PostgresScheduleRepository(self._conn)
        self._attendance = PostgresAttendanceRepository(self._conn)
        self._notifications = PostgresNotificationRepository(self._conn)
        self._audit_logs = PostgresAuditLogRepository(self._conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def lecturers(self) -> PostgresLecturerRepository:
        return self._lecturers

    @property
    def class_groups(self) -> PostgresClassGroupRepository:
        return self._class_groups

    @property
    def schedules(self) -> PostgresScheduleRepository:
        return self._schedules

    @property
    def attendance(self) -> PostgresAttendanceRepository:
        return self._attendance

    @property
    def notifications(self) -> PostgresNotificationRepository:
        return self._notifications

    @property
    def audit_logs(self) -> PostgresAuditLogRepository:
        return self._audit_logs

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager)."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
