from __future__ import annotations

import io
from datetime import datetime
from typing import Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4 as A4_POINTS, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ...common.datetime_utils import month_label, now_local
from ...common.numbers import format_amount, format_number
from ..layout import A4, CONTENT_PADDING, TABLE_HEADER_HEIGHT, TABLE_ROW_HEIGHT, PageGeometry, PayslipBand, page_bands, paginate
from ..model import PayslipBatch, PayslipLineItem, ReportData


def payslip_filename(month: str) -> str:
    return f"payslips_{month}.pdf"


class _PageCanvas:
    """Draws on a reportlab canvas using top-left millimetre coordinates."""

    def __init__(self, canv: canvas.Canvas, geometry: PageGeometry):
        self._c = canv
        self._page_height = geometry.height

    def _y(self, y_mm: float) -> float:
        return (self._page_height - y_mm) * mm

    def font(self, size: float, *, bold: bool = False) -> None:
        self._c.setFont("Helvetica-Bold" if bold else "Helvetica", size)

    def text(self, x: float, y: float, value: str, *, align: str = "left") -> None:
        if align == "center":
            self._c.drawCentredString(x * mm, self._y(y), value)
        elif align == "right":
            self._c.drawRightString(x * mm, self._y(y), value)
        else:
            self._c.drawString(x * mm, self._y(y), value)

    def line(self, x1: float, y1: float, x2: float, y2: float, *, width: float) -> None:
        self._c.setLineWidth(width)
        self._c.line(x1 * mm, self._y(y1), x2 * mm, self._y(y2))

    def rect(self, x: float, y: float, w: float, h: float, *, width: float) -> None:
        self._c.setLineWidth(width)
        self._c.rect(x * mm, self._y(y + h), w * mm, h * mm, stroke=1, fill=0)


def _draw_payslip(page: _PageCanvas, band: PayslipBand, slip: PayslipLineItem, *, company_name: str, generated_at: datetime) -> None:
    employee = slip.employee
    outer = band.outer

    page.rect(outer.x, outer.y, outer.width, outer.height, width=1.0)

    # Header
    header = band.header
    page.font(10, bold=True)
    page.text(header.center_x, header.y + 5, company_name, align="center")
    page.font(8, bold=True)
    page.text(header.center_x, header.y + 10, "PAYSLIP", align="center")
    page.font(7, bold=True)
    page.text(header.center_x, header.y + 14.5, slip.branch_name or "", align="center")
    page.line(band.left_column_x, header.bottom + 1, outer.right - CONTENT_PADDING, header.bottom + 1, width=0.3)

    # Employee info
    join_date = employee.join_date.strftime("%Y-%m-%d") if employee.join_date else ""
    info_lines = [
        (f"Emp No: {employee.employee_id or ''}", f"Employee Name: {employee.name or ''}"),
        (f"Designation: {employee.position or ''}", f"Date of Join: {join_date}"),
        (f"Report Month: {month_label(slip.month)}", f"OT Hrs: {float(slip.stats.ot_hours):.1f} hrs"),
    ]
    page.font(7)
    info_y = band.info.y + 5
    for left, right in info_lines:
        page.text(band.left_column_x, info_y, left)
        page.text(band.right_column_x, info_y, right)
        info_y += 4.8

    # Earnings / deductions
    table = band.table
    amount_offset = band.column_width - 10
    head_y = table.y + TABLE_HEADER_HEIGHT - 1
    page.font(7, bold=True)
    for x, title in ((band.left_column_x, "Earnings"), (band.right_column_x, "Deductions")):
        page.text(x, head_y, title)
        page.text(x + amount_offset, head_y, "Amount", align="right")
        page.line(x, head_y + 1, x + band.column_width - 5, head_y + 1, width=0.2)

    page.font(6)
    row_y = head_y + TABLE_ROW_HEIGHT
    for (e_label, e_amount), (d_label, d_amount) in zip(slip.earnings(), slip.deductions()):
        page.text(band.left_column_x, row_y, e_label)
        page.text(band.left_column_x + amount_offset, row_y, format_amount(e_amount), align="right")
        page.text(band.right_column_x, row_y, d_label)
        page.text(band.right_column_x + amount_offset, row_y, format_amount(d_amount), align="right")
        row_y += TABLE_ROW_HEIGHT

    # Net pay
    net = band.net_pay
    page.rect(net.x, net.y, net.width, net.height, width=0.3)
    page.font(8, bold=True)
    page.text(outer.center_x, net.y + net.height / 2 + 1, f"NET PAY: {format_amount(slip.net_pay)}", align="center")

    # Totals
    totals_y = band.totals.y + 3
    page.font(7, bold=True)
    page.text(band.left_column_x, totals_y, "Total Earnings")
    page.text(band.left_column_x + amount_offset, totals_y, format_amount(slip.total_earnings), align="right")
    page.text(band.right_column_x, totals_y, "Total Deductions")
    page.text(band.right_column_x + amount_offset, totals_y, format_amount(slip.total_deductions), align="right")

    # Footer
    footer_y = band.footer.y + 4
    page.font(6)
    page.text(band.left_column_x, footer_y, f"Generated: {generated_at.strftime('%d/%m/%Y')}")
    page.text(outer.x + outer.width / 3, footer_y, f"PF: {employee.pf_number or 'N/A'}")
    page.text(band.right_column_x, footer_y, f"ESI: {employee.esi_number or 'N/A'}")


def render_payslips_pdf(
    batch: PayslipBatch,
    *,
    geometry: PageGeometry = A4,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Three payslips per A4 page, in the order given."""
    generated_at = generated_at or now_local()
    buff = io.BytesIO()
    canv = canvas.Canvas(buff, pagesize=(geometry.width * mm, geometry.height * mm))
    canv.setTitle(f"Payslips {batch.month}")

    page = _PageCanvas(canv, geometry)
    bands = page_bands(geometry)
    for chunk in paginate(batch.payslips, geometry.sections_per_page):
        for band, slip in zip(bands, chunk):
            _draw_payslip(page, band, slip, company_name=batch.company_name, generated_at=generated_at)
        canv.showPage()

    canv.save()
    return buff.getvalue()


def render_report_pdf(report: ReportData, *, company_name: str) -> bytes:
    """PF/ESI report as a landscape table."""
    buff = io.BytesIO()
    doc = SimpleDocTemplate(buff, pagesize=landscape(A4_POINTS), leftMargin=18, rightMargin=18, topMargin=18, bottomMargin=18)

    styles = getSampleStyleSheet()
    story = [
        Paragraph(f"<b>{escape(company_name)} - {escape(report.title)}</b>", styles["Title"]),
        Paragraph(f"Month: <b>{month_label(report.month)}</b>", styles["Normal"]),
        Spacer(1, 10),
    ]

    data = [list(report.columns)]
    for row in report.rows:
        data.append([format_number(row.get(col)) for col in report.columns])

    tbl = Table(data, repeatRows=1)
    tbl.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.whitesmoke),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.black),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, 0), 9),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.lightgrey),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("FONTSIZE", (0, 1), (-1, -1), 8),
        ("ALIGN", (3, 1), (-1, -1), "RIGHT"),
    ]))
    story.append(tbl)

    doc.build(story)
    return buff.getvalue()
