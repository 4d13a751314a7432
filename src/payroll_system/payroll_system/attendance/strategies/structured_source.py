from __future__ import annotations

from dataclasses import dataclass

from ..model import AttendanceRecord, StatsAccumulator
from .base import AttendanceSource


@dataclass(frozen=True)
class StructuredSource(AttendanceSource):
    """Figures taken straight from the structured attendance columns."""

    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    food: float = 0
    uniform: float = 0
    deduction: float = 0

    name = "structured"

    @classmethod
    def from_record(cls, record: AttendanceRecord) -> "StructuredSource":
        return cls(
            present_days=record.present_days,
            absent_days=record.absent_days,
            late_days=record.late_days,
            ot_hours=record.ot_hours,
            food=record.food,
            uniform=record.uniform,
            deduction=record.deduction,
        )

    def apply(self, stats: StatsAccumulator) -> None:
        stats.present_days += self.present_days
        stats.absent_days += self.absent_days
        stats.late_days += self.late_days
        stats.ot_hours += self.ot_hours
        stats.food += self.food
        stats.uniform += self.uniform
        stats.deduction += self.deduction
