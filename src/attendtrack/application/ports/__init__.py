"""Application ports - interfaces for external adapters."""

from attendtrack.application.ports.report_renderer import ReportRenderer
from attendtrack.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ReportRenderer",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
