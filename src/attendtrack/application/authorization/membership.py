"""Class-membership resolver for class representatives."""

from attendtrack.application.authorization.fail_closed import try_resolve
from attendtrack.domain.value_objects import ResourceType, UserRole


class ClassMembershipResolver:
    """Decides whether a resource belongs to a class group the user represents."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def is_class_member(
        self,
        resource_type: ResourceType | str,
        resource_id: str | None,
        user_id: str,
        role: UserRole | None,
    ) -> bool:
        """Check class membership. Only class representatives can be members."""
        if role != UserRole.CLASS_REP or not resource_id:
            return False
        kind = ResourceType.parse(resource_type)
        if kind not in (ResourceType.ATTENDANCE, ResourceType.SCHEDULE):
            return False
        return await try_resolve(
            lambda: self._resolve(kind, resource_id, user_id),
            description=f"Class membership check for {kind} {resource_id}",
        )

    async def _resolve(self, kind: ResourceType, resource_id: str, user_id: str) -> bool:
        async with self._uow_factory() as uow:
            group_ids = await uow.class_groups.list_ids_by_rep(user_id)
            if not group_ids:
                return False

            if kind == ResourceType.ATTENDANCE:
                record = await uow.attendance.get_by_id(resource_id)
                if record is None:
                    return False
                schedule_id = record.course_schedule_id
            else:
                schedule_id = resource_id

            schedule = await uow.schedules.get_by_id(schedule_id)
        return schedule is not None and schedule.class_group_id in group_ids
