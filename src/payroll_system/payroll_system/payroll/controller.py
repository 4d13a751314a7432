from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file

from ..common.http import api_errors
from ..common.numbers import format_number
from ..container import Container
from .export.csv_export import render_csv, report_filename
from .export.excel_export import render_xlsx
from .export.pdf_export import payslip_filename, render_payslips_pdf, render_report_pdf

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def register(app: Flask, container: Container) -> None:
    service = container.payroll_report_service

    @app.route("/api/reports/<report_type>", methods=["GET"], endpoint="report_rows")
    @api_errors("Failed to generate report")
    def report_rows(report_type: str):
        report = service.build_report(report_type, request.args.get("month"))
        rows = [{col: format_number(row.get(col)) for col in report.columns} for row in report.rows]
        return jsonify(
            {
                "success": True,
                "report_type": report.report_type.value,
                "month": report.month,
                "columns": list(report.columns),
                "rows": rows,
            }
        )

    @app.route("/reports/<report_type>.csv", methods=["GET"], endpoint="report_csv")
    @api_errors("Failed to generate report")
    def report_csv(report_type: str):
        report = service.build_report(report_type, request.args.get("month"))
        filename = report_filename(report.report_type, report.month, "csv")
        return app.response_class(
            render_csv(report).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/reports/<report_type>.xlsx", methods=["GET"], endpoint="report_xlsx")
    @api_errors("Failed to generate report")
    def report_xlsx(report_type: str):
        report = service.build_report(report_type, request.args.get("month"))
        return send_file(
            io.BytesIO(render_xlsx(report)),
            mimetype=XLSX_MIMETYPE,
            as_attachment=True,
            download_name=report_filename(report.report_type, report.month, "xlsx"),
        )

    @app.route("/reports/<report_type>.pdf", methods=["GET"], endpoint="report_pdf")
    @api_errors("Failed to generate report")
    def report_pdf(report_type: str):
        report = service.build_report(report_type, request.args.get("month"))
        pdf = render_report_pdf(report, company_name=app.config["COMPANY_NAME"])
        return send_file(
            io.BytesIO(pdf),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=report_filename(report.report_type, report.month, "pdf"),
        )

    @app.route("/payslips.pdf", methods=["GET"], endpoint="payslips_pdf")
    @api_errors("Failed to generate payslips")
    def payslips_pdf():
        employee_ids = request.args.getlist("employee_id") or None
        batch = service.build_payslips(
            request.args.get("month"),
            employee_ids=employee_ids,
            branch_id=request.args.get("branch_id") or None,
        )
        return send_file(
            io.BytesIO(render_payslips_pdf(batch)),
            mimetype="application/pdf",
            as_attachment=True,
            download_name=payslip_filename(batch.month),
        )
