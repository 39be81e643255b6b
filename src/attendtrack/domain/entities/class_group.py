"""Class group entity."""

from dataclasses import dataclass


@dataclass
class ClassGroup:
    """Class group - cohort of a programme, optionally with a class representative."""

    id: str
    name: str
    programme_id: str
    admission_year: int
    delivery_mode: str
    class_rep_id: str | None = None
