"""Report renderers."""

from attendtrack.infrastructure.reporting.csv_renderer import CsvReportRenderer
from attendtrack.infrastructure.reporting.pdf_renderer import PdfReportRenderer

__all__ = ["CsvReportRenderer", "PdfReportRenderer"]
