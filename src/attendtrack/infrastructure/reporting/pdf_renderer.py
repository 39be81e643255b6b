"""PDF report renderer using ReportLab."""

import io
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle


class PdfReportRenderer:
    """Renders rows as a single-table PDF document."""

    def __init__(
        self,
        max_rows: int = 500,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._max_rows = max_rows
        self._clock = clock

    def render(
        self, rows: Sequence[dict[str, Any]], *, title: str, subtitle: str
    ) -> bytes:
        buf = io.BytesIO()
        doc = SimpleDocTemplate(buf, pagesize=landscape(A4), title=title)
        styles = getSampleStyleSheet()

        elements = [
            Paragraph(title, styles["Title"]),
            Paragraph(subtitle, styles["Heading2"]),
            Paragraph(
                f"Generated: {self._clock().strftime('%Y-%m-%d %H:%M:%S %Z')}",
                styles["Normal"],
            ),
            Paragraph(f"Total Records: {len(rows)}", styles["Normal"]),
            Spacer(1, 12),
        ]

        if rows:
            headers = list(rows[0].keys())
            shown = rows[: self._max_rows]
            body = [[_cell(row.get(h)) for h in headers] for row in shown]
            table = Table([headers, *body], repeatRows=1)
            table.setStyle(
                TableStyle(
                    [
                        ("BACKGROUND", (0, 0), (-1, 0), colors.Color(41 / 255, 128 / 255, 185 / 255)),
                        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                        ("FONTSIZE", (0, 0), (-1, -1), 8),
                        ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.Color(245 / 255, 245 / 255, 245 / 255)]),
                        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                        ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ]
                )
            )
            elements.append(table)
            if len(rows) > len(shown):
                elements.append(Spacer(1, 8))
                elements.append(
                    Paragraph(
                        f"Showing first {len(shown)} of {len(rows)} records.",
                        styles["Normal"],
                    )
                )
        else:
            elements.append(
                Paragraph("No data available for the selected criteria.", styles["Normal"])
            )

        doc.build(elements)
        return buf.getvalue()


def _cell(value: Any) -> str:
    return "" if value is None else str(value)
