"""Report renderer port."""

from collections.abc import Sequence
from typing import Any, Protocol


class ReportRenderer(Protocol):
    """Port for serializing report rows into a downloadable document."""

    def render(
        self, rows: Sequence[dict[str, Any]], *, title: str, subtitle: str
    ) -> bytes: ...
