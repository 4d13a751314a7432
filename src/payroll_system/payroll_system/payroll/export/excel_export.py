from __future__ import annotations

import io

import pandas as pd

from ..model import ReportData


def render_xlsx(report: ReportData) -> bytes:
    """Write report rows to an in-memory Excel workbook (one sheet)."""
    df = pd.DataFrame(report.rows, columns=list(report.columns))

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=report.report_type.value.upper())
    return output.getvalue()
