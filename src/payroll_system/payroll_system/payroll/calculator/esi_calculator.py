from __future__ import annotations

from ...attendance.model import MonthlyStats
from ...common.numbers import round_half_away
from ...core.constants import ESI_EMPLOYEE_RATE, ESI_EMPLOYER_RATE, ESI_WAGE_CEILING
from ...core.enums import ReportType
from ...employees.model import Employee
from ..model import ESI_COLUMNS, ESILineItem
from .base import ReportCalculator, prorated_earnings


class ESICalculator(ReportCalculator):
    """ESI on prorated gross; nothing is due once gross exceeds the ceiling."""

    report_type = ReportType.ESI
    columns = ESI_COLUMNS

    def calculate(self, employee: Employee, stats: MonthlyStats) -> ESILineItem:
        gross = prorated_earnings(employee, stats).gross
        if gross > ESI_WAGE_CEILING:
            employee_esi = employer_esi = 0
        else:
            employee_esi = round_half_away(gross * ESI_EMPLOYEE_RATE)
            employer_esi = round_half_away(gross * ESI_EMPLOYER_RATE)

        return ESILineItem(
            emp_no=employee.employee_id or "",
            name=employee.name or "",
            esi_number=employee.esi_number or "",
            days_present=stats.present_days,
            gross_earnings=gross,
            employee_esi=employee_esi,
            employer_esi=employer_esi,
        )
