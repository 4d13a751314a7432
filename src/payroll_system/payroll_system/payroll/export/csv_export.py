from __future__ import annotations

import csv
import io

from ...common.numbers import format_number
from ...core.enums import ReportType
from ..model import ReportData


def report_filename(report_type: ReportType, month: str, extension: str = "csv") -> str:
    return f"{ReportType(report_type).value}_report_{month}.{extension}"


def render_csv(report: ReportData) -> str:
    """Header row as plain names, every data field double-quoted.

    Rows are separated by a bare newline with no trailing newline.
    """
    out = io.StringIO()
    writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for row in report.rows:
        writer.writerow([format_number(row.get(col)) for col in report.columns])

    lines = [",".join(report.columns)]
    body = out.getvalue()
    if body:
        lines.append(body[:-1])
    return "\n".join(lines)
