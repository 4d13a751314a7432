from __future__ import annotations

from enum import Enum
from typing import Optional


class AttendanceStatus(str, Enum):
    """Daily attendance status as stored in the attendance table."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"

    @classmethod
    def parse(cls, value) -> Optional["AttendanceStatus"]:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return None


class ReportType(str, Enum):
    """Statutory report kinds that can be exported."""

    PF = "pf"
    ESI = "esi"
