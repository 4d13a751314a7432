from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Read access to daily attendance rows.

    Rows come back ordered by date, newest first. Storage failures are raised
    as-is; callers must not receive a partial list.
    """

    def fetch_attendance(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
