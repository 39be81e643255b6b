"""Resource ownership resolver."""

from attendtrack.application.authorization.fail_closed import try_resolve
from attendtrack.domain.value_objects import ResourceType, UserRole


class OwnershipResolver:
    """Decides whether the acting user owns a resource instance.

    Ownership is role-scoped for schedules and attendance records (only a
    lecturer can own them) and role-independent for users and notifications.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_owner(
        self,
        resource_type: ResourceType | str,
        resource_id: str | None,
        user_id: str,
        role: UserRole | None,
    ) -> bool:
        """Check ownership. Unknown types, missing ids and lookup errors give False."""
        kind = ResourceType.parse(resource_type)
        if kind is None or not resource_id:
            return False
        return await try_resolve(
            lambda: self._resolve(kind, resource_id, user_id, role),
            description=f"Ownership check for {kind} {resource_id}",
        )

    async def _resolve(
        self, kind: ResourceType, resource_id: str, user_id: str, role: UserRole | None
    ) -> bool:
        match kind:
            case ResourceType.USER:
                return resource_id == user_id
            case ResourceType.SCHEDULE:
                if role != UserRole.LECTURER:
                    return False
                async with self._uow_factory() as uow:
                    schedule = await uow.schedules.get_by_id(resource_id)
                return schedule is not None and schedule.lecturer_user_id == user_id
            case ResourceType.ATTENDANCE:
                if role != UserRole.LECTURER:
                    return False
                async with self._uow_factory() as uow:
                    record = await uow.attendance.get_by_id(resource_id)
                    if record is None:
                        return False
                    schedule = await uow.schedules.get_by_id(record.course_schedule_id)
                return schedule is not None and schedule.lecturer_user_id == user_id
            case ResourceType.NOTIFICATION:
                async with self._uow_factory() as uow:
                    notification = await uow.notifications.get_by_id(resource_id)
                return notification is not None and notification.user_id == user_id
        return False
