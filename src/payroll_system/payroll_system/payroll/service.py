from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..attendance.model import MonthlyStats
from ..attendance.service import AttendanceStatsService
from ..common.datetime_utils import month_label
from ..common.validators import require_month, require_report_type
from ..core.constants import DEFAULT_COMPANY_NAME
from ..core.enums import ReportType
from ..core.exceptions import NoDataError
from ..employees.model import Employee
from ..employees.repository import BranchRepository, EmployeeRepository
from .calculator.base import ReportCalculator
from .calculator.esi_calculator import ESICalculator
from .calculator.payslip_calculator import PayslipCalculator
from .calculator.pf_calculator import PFCalculator
from .model import PayslipBatch, ReportData


class PayrollReportService:
    def __init__(
        self,
        attendance_stats: AttendanceStatsService,
        employees: EmployeeRepository,
        branches: BranchRepository,
        *,
        calculators: Optional[Iterable[ReportCalculator]] = None,
        payslip_calculator: Optional[PayslipCalculator] = None,
        company_name: str = DEFAULT_COMPANY_NAME,
        logger: Optional[logging.Logger] = None,
    ):
        self._stats = attendance_stats
        self._employees = employees
        self._branches = branches
        calculators = calculators or (PFCalculator(), ESICalculator())
        self._calculators: dict[ReportType, ReportCalculator] = {c.report_type: c for c in calculators}
        self._payslip_calculator = payslip_calculator or PayslipCalculator()
        self._company_name = company_name
        self._log = logger or logging.getLogger(__name__)

    def build_report(self, report_type, month: Optional[str]) -> ReportData:
        """PF or ESI rows for every employee with attendance in the month.

        Employees with neither present days nor overtime are left out. Raises
        NoDataError when nobody qualifies, so no empty file gets produced.
        """
        month = require_month(month)
        rtype = require_report_type(report_type)
        calculator = self._calculators[rtype]

        stats = self._stats.all_month_stats(month)
        qualifying = self._with_payable_activity(self._employees.list_employees(), stats)
        if not qualifying:
            raise NoDataError(f"No employee data found for {month_label(month)}.")

        items = [calculator.calculate(employee, s) for employee, s in qualifying]
        self._log.info("%s report for %s: %d employees", rtype.value, month, len(items))
        return ReportData(report_type=rtype, month=month, columns=calculator.columns, items=items)

    def build_pf_report(self, month: Optional[str]) -> ReportData:
        return self.build_report(ReportType.PF, month)

    def build_esi_report(self, month: Optional[str]) -> ReportData:
        return self.build_report(ReportType.ESI, month)

    def build_payslips(
        self,
        month: Optional[str],
        *,
        employee_ids: Optional[Iterable[str]] = None,
        branch_id: Optional[str] = None,
    ) -> PayslipBatch:
        """Payslips for employees with at least one attendance row in the month.

        Overtime here also counts hours past the standard day between
        check-in and check-out.
        """
        month = require_month(month)
        stats = self._stats.all_month_stats(month, include_timestamp_overtime=True)

        employees = list(self._employees.list_employees(branch_id=branch_id))
        if employee_ids:
            wanted = {str(e) for e in employee_ids}
            employees = [e for e in employees if e.id in wanted]

        selected = [e for e in employees if e.id in stats]
        if not selected:
            raise NoDataError(f"No employee data found for {month_label(month)}.")

        branch_names = {b.id: b.name for b in self._branches.list_branches()}
        payslips = [
            self._payslip_calculator.calculate(
                employee,
                stats[employee.id],
                month=month,
                branch_name=branch_names.get(employee.branch_id or "", ""),
            )
            for employee in selected
        ]
        self._log.info("payslips for %s: %d employees", month, len(payslips))
        return PayslipBatch(month=month, company_name=self._company_name, payslips=payslips, branch_id=branch_id)

    @staticmethod
    def _with_payable_activity(
        employees: Iterable[Employee],
        stats: dict[str, MonthlyStats],
    ) -> list[tuple[Employee, MonthlyStats]]:
        out: list[tuple[Employee, MonthlyStats]] = []
        for employee in employees:
            s = stats.get(employee.id)
            if s and s.has_payable_activity:
                out.append((employee, s))
        return out
