"""Class group repository port."""

from typing import Protocol

from attendtrack.domain.entities import ClassGroup


class ClassGroupRepository(Protocol):
    """Port for class group persistence."""

    async def get_by_id(self, class_group_id: str) -> ClassGroup | None: ...

    async def list_ids_by_rep(self, user_id: str) -> set[str]: ...
