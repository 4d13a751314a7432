from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import MonthlyStats
from ...common.numbers import round_half_away, to_number
from ...core.constants import OT_RATE_PER_HOUR
from ...core.enums import ReportType
from ...employees.model import Employee
from ..model import Earnings


def prorated_earnings(employee: Employee, stats: MonthlyStats) -> Earnings:
    """Per-day basic and DA times days present, plus overtime at the fixed rate.

    Each component is rounded on its own before summing.
    """
    present_days = to_number(stats.present_days)
    return Earnings(
        earned_basic=round_half_away(to_number(employee.basic_salary) * present_days),
        earned_da=round_half_away(to_number(employee.da_amount) * present_days),
        ot_amount=round_half_away(to_number(stats.ot_hours) * OT_RATE_PER_HOUR),
    )


class ReportCalculator(ABC):
    """Calculator interface (Strategy Pattern for statutory reports)."""

    report_type: ReportType
    columns: tuple[str, ...]

    @abstractmethod
    def calculate(self, employee: Employee, stats: MonthlyStats):
        raise NotImplementedError
