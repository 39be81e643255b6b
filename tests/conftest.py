"""Pytest fixtures for AttendTrack tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime

import pytest

from attendtrack.domain.entities import (
    AttendanceRecord,
    AttendanceReportEntry,
    AuditLog,
    ClassGroup,
    CourseSchedule,
    Lecturer,
    Notification,
    User,
)
from attendtrack.domain.value_objects import UserRole


# --- Fake repositories ---


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, User] = {}

    async def get_by_id(self, user_id: str) -> User | None:
        return self._by_id.get(user_id)

    def add(self, user: User) -> None:
        self._by_id[user.id] = user


class FakeLecturerRepository:
    """In-memory lecturer repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Lecturer] = {}

    async def get_by_id(self, lecturer_id: str) -> Lecturer | None:
        return self._by_id.get(lecturer_id)

    def add(self, lecturer: Lecturer) -> None:
        self._by_id[lecturer.id] = lecturer


class FakeClassGroupRepository:
    """In-memory class group repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, ClassGroup] = {}
        self.rep_lookups = 0

    async def get_by_id(self, class_group_id: str) -> ClassGroup | None:
        return self._by_id.get(class_group_id)

    async def list_ids_by_rep(self, user_id: str) -> set[str]:
        self.rep_lookups += 1
        return {g.id for g in self._by_id.values() if g.class_rep_id == user_id}

    def add(self, group: ClassGroup) -> None:
        self._by_id[group.id] = group


class FakeScheduleRepository:
    """In-memory course schedule repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, CourseSchedule] = {}
        self.lookups = 0

    async def get_by_id(self, schedule_id: str) -> CourseSchedule | None:
        self.lookups += 1
        return self._by_id.get(schedule_id)

    def add(self, schedule: CourseSchedule) -> None:
        self._by_id[schedule.id] = schedule


class FakeAttendanceRepository:
    """In-memory attendance repository; report entries are seeded separately."""

    def __init__(self) -> None:
        self._by_id: dict[str, AttendanceRecord] = {}
        self._entries: list[AttendanceReportEntry] = []

    async def get_by_id(self, record_id: str) -> AttendanceRecord | None:
        return self._by_id.get(record_id)

    async def update_verification(
        self, record_id: str, verified: bool, comment: str | None
    ) -> None:
        record = self._by_id.get(record_id)
        if record:
            self._by_id[record_id] = replace(
                record, class_rep_verified=verified, class_rep_comment=comment
            )

    async def list_for_report(
        self,
        start: datetime,
        end: datetime,
        lecturer_id: str | None = None,
    ) -> list[AttendanceReportEntry]:
        items = [
            e
            for e in self._entries
            if start <= e.timestamp <= end
            and (lecturer_id is None or e.lecturer_id == lecturer_id)
        ]
        items.sort(key=lambda e: e.timestamp, reverse=True)
        return items

    def add(self, record: AttendanceRecord) -> None:
        self._by_id[record.id] = record

    def add_entry(self, entry: AttendanceReportEntry) -> None:
        self._entries.append(entry)


class FakeNotificationRepository:
    """In-memory notification repository."""

    def __init__(self) -> None:
        self._by_id: dict[str, Notification] = {}

    async def get_by_id(self, notification_id: str) -> Notification | None:
        return self._by_id.get(notification_id)

    def add(self, notification: Notification) -> None:
        self._by_id[notification.id] = notification


class FakeAuditLogRepository:
    """In-memory audit log repository."""

    def __init__(self) -> None:
        self.entries: list[AuditLog] = []

    async def create(self, entry: AuditLog) -> AuditLog:
        self.entries.append(entry)
        return entry

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLog], str | None]:
        items = sorted(self.entries, key=lambda e: (e.timestamp, e.id), reverse=True)
        start = 0
        if cursor:
            for i, e in enumerate(items):
                if e.id == cursor:
                    start = i + 1
                    break
        page = items[start : start + limit + 1]
        next_cursor = page[limit - 1].id if len(page) > limit else None
        return (page[:limit], next_cursor)


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.users = FakeUserRepository()
        self.lecturers = FakeLecturerRepository()
        self.class_groups = FakeClassGroupRepository()
        self.schedules = FakeScheduleRepository()
        self.attendance = FakeAttendanceRepository()
        self.notifications = FakeNotificationRepository()
        self.audit_logs = FakeAuditLogRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """UoW factory that yields the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def failing_uow_factory():
    """Factory whose context manager raises, as if the database were down."""

    @asynccontextmanager
    async def _factory():
        raise ConnectionError("database unavailable")
        yield  # pragma: no cover

    return _factory


# --- Seed data ---

ADMIN_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000001"
COORDINATOR_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000002"
LECTURER_USER_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000003"
OTHER_LECTURER_USER_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000004"
REP_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000005"
OTHER_REP_ID = "0b0e5a4e-1f3c-4d59-9d7a-000000000006"

LECTURER_ID = "5c1d7f0a-2b8e-4a61-8e3f-000000000001"
OTHER_LECTURER_ID = "5c1d7f0a-2b8e-4a61-8e3f-000000000002"

GROUP_1 = "9a7f3c2e-6d4b-4f18-b2a0-000000000001"
GROUP_2 = "9a7f3c2e-6d4b-4f18-b2a0-000000000002"
GROUP_3 = "9a7f3c2e-6d4b-4f18-b2a0-000000000003"

OWN_SCHEDULE_ID = "e4c2b1a0-7f6e-4d3c-9b8a-000000000001"
OTHER_SCHEDULE_ID = "e4c2b1a0-7f6e-4d3c-9b8a-000000000002"

OWN_RECORD_ID = "7d3e9f1b-4c2a-4e8d-a6b5-000000000001"
OTHER_RECORD_ID = "7d3e9f1b-4c2a-4e8d-a6b5-000000000002"

REP_NOTIFICATION_ID = "3f8a6b2d-1e9c-4a7f-8d5e-000000000001"


def seed_campus(uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """Two lecturers, three class groups and one schedule/record per lecturer.

    REP_ID represents GROUP_1 and GROUP_2; OWN_SCHEDULE_ID is taught by
    LECTURER_USER_ID to GROUP_1. OTHER_SCHEDULE_ID is taught by the other
    lecturer to GROUP_3.
    """
    for user_id, role, first, last in [
        (ADMIN_ID, UserRole.ADMIN, "Ada", "Admin"),
        (COORDINATOR_ID, UserRole.COORDINATOR, "Cora", "Coordinator"),
        (LECTURER_USER_ID, UserRole.LECTURER, "Leo", "Lecturer"),
        (OTHER_LECTURER_USER_ID, UserRole.LECTURER, "Olga", "Other"),
        (REP_ID, UserRole.CLASS_REP, "Rita", "Rep"),
        (OTHER_REP_ID, UserRole.CLASS_REP, "Remy", "Rep"),
    ]:
        uow.users.add(
            User(
                id=user_id,
                email=f"{first.lower()}@example.edu",
                first_name=first,
                last_name=last,
                role=role,
            )
        )

    uow.lecturers.add(
        Lecturer(
            id=LECTURER_ID,
            user_id=LECTURER_USER_ID,
            employee_id="EMP-001",
            first_name="Leo",
            last_name="Lecturer",
            email="leo@example.edu",
        )
    )
    uow.lecturers.add(
        Lecturer(
            id=OTHER_LECTURER_ID,
            user_id=OTHER_LECTURER_USER_ID,
            employee_id="EMP-002",
            first_name="Olga",
            last_name="Other",
            email="olga@example.edu",
        )
    )

    for group_id, rep in [(GROUP_1, REP_ID), (GROUP_2, REP_ID), (GROUP_3, OTHER_REP_ID)]:
        uow.class_groups.add(
            ClassGroup(
                id=group_id,
                name=f"BSc CS {group_id[-1]}",
                programme_id="prog-1",
                admission_year=2024,
                delivery_mode="full_time",
                class_rep_id=rep,
            )
        )

    uow.schedules.add(
        CourseSchedule(
            id=OWN_SCHEDULE_ID,
            course_id="course-1",
            class_group_id=GROUP_1,
            lecturer_id=LECTURER_ID,
            lecturer_user_id=LECTURER_USER_ID,
            day_of_week=1,
            start_time="09:00",
            end_time="11:00",
            session_type="lecture",
        )
    )
    uow.schedules.add(
        CourseSchedule(
            id=OTHER_SCHEDULE_ID,
            course_id="course-2",
            class_group_id=GROUP_3,
            lecturer_id=OTHER_LECTURER_ID,
            lecturer_user_id=OTHER_LECTURER_USER_ID,
            day_of_week=3,
            start_time="14:00",
            end_time="16:00",
            session_type="lab",
        )
    )

    for record_id, lecturer_id, schedule_id in [
        (OWN_RECORD_ID, LECTURER_ID, OWN_SCHEDULE_ID),
        (OTHER_RECORD_ID, OTHER_LECTURER_ID, OTHER_SCHEDULE_ID),
    ]:
        uow.attendance.add(
            AttendanceRecord(
                id=record_id,
                lecturer_id=lecturer_id,
                course_schedule_id=schedule_id,
                timestamp=datetime(2025, 3, 10, 9, 5),
                location_verified=True,
                method="gps",
            )
        )

    uow.notifications.add(
        Notification(
            id=REP_NOTIFICATION_ID,
            user_id=REP_ID,
            title="Verify attendance",
            message="Please verify today's session.",
            created_at=datetime(2025, 3, 10, 12, 0),
        )
    )
    return uow


@pytest.fixture
def campus_uow(fake_uow: FakeUnitOfWork) -> FakeUnitOfWork:
    """FakeUnitOfWork seeded with seed_campus."""
    return seed_campus(fake_uow)


def as_user(user_id: str, role: str) -> dict[str, str]:
    """Headers read by the API tests' auth middleware."""
    return {"X-Test-User": user_id, "X-Test-Role": role}
