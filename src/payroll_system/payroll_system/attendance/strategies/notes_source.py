from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional

from ...common.numbers import to_number
from ..model import StatsAccumulator
from .base import AttendanceSource, DirectAllowances


@dataclass(frozen=True)
class LegacyNotesSource(AttendanceSource):
    """Figures recovered from a JSON object stored in the ``notes`` column.

    Older manual entries kept their totals there before the structured
    columns existed. ``deduction`` was never written to notes.
    """

    present_days: float = 0
    absent_days: float = 0
    late_days: float = 0
    ot_hours: float = 0
    food: float = 0
    uniform: float = 0
    allowances: DirectAllowances = field(default_factory=DirectAllowances)

    name = "notes"

    @classmethod
    def parse(cls, notes: Optional[str]) -> Optional["LegacyNotesSource"]:
        """Return None when notes are empty, not JSON, or not a JSON object."""
        if not notes:
            return None
        try:
            payload = json.loads(notes)
        except (TypeError, ValueError, RecursionError):
            return None
        if not isinstance(payload, dict):
            return None

        return cls(
            present_days=to_number(payload.get("present_days")),
            absent_days=to_number(payload.get("absent_days")),
            late_days=to_number(payload.get("late_days")),
            ot_hours=to_number(payload.get("ot_hours")),
            food=to_number(payload.get("food")),
            uniform=to_number(payload.get("uniform")),
        )

    def apply(self, stats: StatsAccumulator) -> None:
        stats.present_days += self.present_days
        stats.absent_days += self.absent_days
        stats.late_days += self.late_days
        stats.ot_hours += self.ot_hours
        stats.food += self.food
        stats.uniform += self.uniform
        self.allowances.apply(stats)
