"""Course schedule API resources."""

import falcon.asgi


class ScheduleResource:
    """GET /v1/schedules/{id} - get schedule (owning lecturer or class representative)."""

    access_gates = {"GET": "schedule_access"}

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        schedule_id: str,
    ) -> None:
        """Get schedule by id."""
        async with self._uow_factory() as uow:
            schedule = await uow.schedules.get_by_id(schedule_id)
        if not schedule:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Schedule not found"}
            return

        resp.media = {
            "id": schedule.id,
            "course_id": schedule.course_id,
            "class_group_id": schedule.class_group_id,
            "lecturer_id": schedule.lecturer_id,
            "day_of_week": schedule.day_of_week,
            "start_time": schedule.start_time,
            "end_time": schedule.end_time,
            "classroom_id": schedule.classroom_id,
            "session_type": schedule.session_type,
        }
        resp.status = falcon.HTTP_200
