from __future__ import annotations

from ...attendance.model import MonthlyStats
from ...common.numbers import round_half_away, to_number
from ...core.constants import ESI_EMPLOYEE_RATE, OT_RATE_PER_HOUR, PF_EMPLOYEE_CEILING, PF_EMPLOYEE_RATE
from ...employees.model import Employee
from ..model import PayslipLineItem


class PayslipCalculator:
    """Monthly payslip figures.

    PF here is taken on basic + HRA + allowances (overtime excluded) and ESI
    is charged on the monthly gross with no ceiling. Both differ from the
    PF/ESI report calculators on purpose until payroll confirms one rule.
    """

    def calculate(self, employee: Employee, stats: MonthlyStats, *, month: str, branch_name: str = "") -> PayslipLineItem:
        basic = to_number(employee.basic_salary)
        hra = to_number(employee.hra)
        allowances = to_number(employee.allowances)

        components = basic + hra + allowances
        gross = to_number(employee.gross_salary) or components or 0
        ot_amount = to_number(stats.ot_hours) * OT_RATE_PER_HOUR

        return PayslipLineItem(
            employee=employee,
            stats=stats,
            month=month,
            branch_name=branch_name,
            gross_earnings=gross,
            hra=hra,
            allowances=allowances,
            ot_amount=ot_amount,
            pf=min(round_half_away(components * PF_EMPLOYEE_RATE), PF_EMPLOYEE_CEILING),
            esi=round_half_away(gross * ESI_EMPLOYEE_RATE),
        )
