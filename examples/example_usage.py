"""Example: use the service layer directly (no Flask).

Builds the PF report for a month and writes it next to this script.
"""

import sys
from pathlib import Path

from config import load_settings

from payroll_system.container import build_container
from payroll_system.core.exceptions import NoDataError
from payroll_system.payroll.export.csv_export import render_csv, report_filename


def main(month: str = "2024-02"):
    settings = load_settings()
    container = build_container(db_config=settings.DB_CONFIG, company_name=settings.COMPANY_NAME)

    try:
        report = container.payroll_report_service.build_pf_report(month)
    except NoDataError as e:
        print(e)
        return

    out_file = Path(__file__).resolve().parent / report_filename(report.report_type, report.month)
    out_file.write_text(render_csv(report), encoding="utf-8")
    print(f"OK: {len(report.items)} rows -> {out_file}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
