"""CSV report renderer."""

import csv
import io
from collections.abc import Sequence
from typing import Any

NO_DATA = "No data available"


class CsvReportRenderer:
    """Renders rows as CSV, header taken from the first row's keys.

    Fields containing a comma or quote are quoted, with inner quotes doubled.
    """

    def render(
        self, rows: Sequence[dict[str, Any]], *, title: str = "", subtitle: str = ""
    ) -> bytes:
        if not rows:
            return NO_DATA.encode("utf-8")

        headers = list(rows[0].keys())
        buf = io.StringIO()
        writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(headers)
        for row in rows:
            writer.writerow(["" if row.get(h) is None else row.get(h) for h in headers])
        return buf.getvalue().rstrip("\n").encode("utf-8")
