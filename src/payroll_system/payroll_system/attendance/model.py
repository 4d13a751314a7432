from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one attendance row (one employee, one day).

    Structured numeric columns are already coerced to numbers (0 when empty).
    A single row may also be a manual bulk entry carrying several days'
    worth of pre-aggregated values.
    """

    attendance_id: str
    employee_id: str
    work_date: date
    status: Optional[AttendanceStatus]
    check_in_time: Optional[time] = None
    check_out_time: Optional[time] = None
    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    food: float = 0
    uniform: float = 0
    deduction: float = 0
    notes: Optional[str] = None


@dataclass(frozen=True)
class MonthlyStats:
    """Read-model: one employee's attendance totals for one calendar month."""

    employee_id: str
    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    total_days: int = 0
    food: float = 0
    uniform: float = 0
    deduction: float = 0

    @property
    def has_payable_activity(self) -> bool:
        return self.present_days > 0 or self.ot_hours > 0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass
class StatsAccumulator:
    """Running totals for one employee during a single aggregation pass."""

    employee_id: str
    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    total_days: int = 0
    food: float = 0
    uniform: float = 0
    deduction: float = 0

    def freeze(self) -> MonthlyStats:
        return MonthlyStats(
            employee_id=self.employee_id,
            present_days=self.present_days,
            absent_days=self.absent_days,
            late_days=self.late_days,
            ot_hours=self.ot_hours,
            total_days=self.total_days,
            food=self.food,
            uniform=self.uniform,
            deduction=self.deduction,
        )
