"""Audit log repository port."""

from typing import Protocol

from attendtrack.domain.entities import AuditLog


class AuditLogRepository(Protocol):
    """Port for audit log persistence."""

    async def create(self, entry: AuditLog) -> AuditLog: ...

    async def list(
        self,
        *,
        cursor: str | None = None,
        limit: int = 50,
    ) -> tuple[list[AuditLog], str | None]: ...
