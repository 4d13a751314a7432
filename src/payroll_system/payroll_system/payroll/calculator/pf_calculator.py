from __future__ import annotations

from ...attendance.model import MonthlyStats
from ...common.numbers import round_half_away
from ...core.constants import (
    PF_EMPLOYEE_CEILING,
    PF_EMPLOYEE_RATE,
    PF_EMPLOYER_EPF_RATE,
    PF_EMPLOYER_EPS_RATE,
)
from ...core.enums import ReportType
from ...employees.model import Employee
from ..model import PF_COLUMNS, PFLineItem
from .base import ReportCalculator, prorated_earnings


class PFCalculator(ReportCalculator):
    """PF on basic + DA + overtime; employee share capped at the ceiling.

    The employer's 12% is split into EPF and EPS, each rounded separately, so
    the two parts need not add up to round(basic * 12%).
    """

    report_type = ReportType.PF
    columns = PF_COLUMNS

    def calculate(self, employee: Employee, stats: MonthlyStats) -> PFLineItem:
        pf_basic = prorated_earnings(employee, stats).gross
        return PFLineItem(
            emp_no=employee.employee_id or "",
            name=employee.name or "",
            pf_number=employee.pf_number or "",
            days_present=stats.present_days,
            pf_basic=pf_basic,
            employee_contribution=min(round_half_away(pf_basic * PF_EMPLOYEE_RATE), PF_EMPLOYEE_CEILING),
            employer_epf=round_half_away(pf_basic * PF_EMPLOYER_EPF_RATE),
            employer_eps=round_half_away(pf_basic * PF_EMPLOYER_EPS_RATE),
        )
