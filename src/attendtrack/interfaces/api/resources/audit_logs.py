"""Audit log API resources."""

import falcon.asgi


class AuditLogsResource:
    """GET /v1/audit-logs - list audit entries, newest first."""

    access_gates = {"GET": "audit_access"}

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List audit entries."""
        cursor = req.get_param("cursor")
        limit = req.get_param_as_int("limit") or 50
        limit = min(max(limit, 1), 200)

        async with self._uow_factory() as uow:
            entries, next_cursor = await uow.audit_logs.list(cursor=cursor, limit=limit)

        resp.media = {
            "items": [
                {
                    "id": e.id,
                    "user_id": e.user_id,
                    "action": e.action,
                    "target_type": e.target_type,
                    "target_id": e.target_id,
                    "metadata": e.metadata,
                    "timestamp": e.timestamp.isoformat(),
                }
                for e in entries
            ],
            "next_cursor": next_cursor,
        }
        resp.status = falcon.HTTP_200
