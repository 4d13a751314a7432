from __future__ import annotations

from dataclasses import dataclass, replace

from .model import AttendanceRecord
from .strategies.base import AttendanceSource, DirectAllowances
from .strategies.notes_source import LegacyNotesSource
from .strategies.status_source import StatusOnlySource
from .strategies.structured_source import StructuredSource


@dataclass
class AttendanceSourceFactory:
    """Factory Pattern: pick the single authoritative source for a record.

    Priority: structured columns, then JSON in ``notes``, then ``status``.
    Only the day and overtime counts decide the priority; a fallback source
    still carries the row's own food, uniform and deduction columns.
    """

    def for_record(self, record: AttendanceRecord) -> AttendanceSource:
        if record.present_days or record.absent_days or record.late_days or record.ot_hours:
            return StructuredSource.from_record(record)

        allowances = DirectAllowances(food=record.food, uniform=record.uniform, deduction=record.deduction)

        notes_source = LegacyNotesSource.parse(record.notes)
        if notes_source is not None:
            return replace(notes_source, allowances=allowances)

        return StatusOnlySource(status=record.status, allowances=allowances)
