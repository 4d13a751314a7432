from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ...core.enums import AttendanceStatus
from ..model import StatsAccumulator
from .base import AttendanceSource, DirectAllowances


@dataclass(frozen=True)
class StatusOnlySource(AttendanceSource):
    """Last resort: count one day from the status column."""

    status: Optional[AttendanceStatus]
    allowances: DirectAllowances = field(default_factory=DirectAllowances)

    name = "status"

    def apply(self, stats: StatsAccumulator) -> None:
        self.allowances.apply(stats)
        if self.status == AttendanceStatus.PRESENT:
            stats.present_days += 1
        elif self.status == AttendanceStatus.ABSENT:
            stats.absent_days += 1
        elif self.status == AttendanceStatus.LATE:
            stats.late_days += 1
