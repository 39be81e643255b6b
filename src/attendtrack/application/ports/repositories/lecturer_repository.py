"""Lecturer repository port."""

from typing import Protocol

from attendtrack.domain.entities import Lecturer


class LecturerRepository(Protocol):
    """Port for lecturer persistence."""

    async def get_by_id(self, lecturer_id: str) -> Lecturer | None: ...
