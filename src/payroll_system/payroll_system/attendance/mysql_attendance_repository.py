from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import clock_time, db_cursor, fetchall, optional_text, row_numbers
from .model import AttendanceRecord
from .repository import AttendanceRepository

_COUNT_COLUMNS = ("present_days", "absent_days", "late_days", "ot_hours", "food", "uniform", "deduction")


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def fetch_attendance(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceRecord]:
        clauses = ["a.date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if employee_id is not None:
            clauses.append("a.employee_id=%s")
            params.append(str(employee_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT
                    a.id, a.employee_id, a.date, a.status,
                    a.check_in_time, a.check_out_time,
                    a.present_days, a.absent_days, a.late_days, a.ot_hours,
                    a.food, a.uniform, a.deduction, a.notes
                FROM attendance a
                WHERE {where}
                ORDER BY a.date DESC
                """,
                tuple(params),
            )
            rows = fetchall(cur)
            return [self._to_record(r) for r in rows]

    @staticmethod
    def _to_record(r: dict[str, Any]) -> AttendanceRecord:
        return AttendanceRecord(
            attendance_id=str(r["id"]),
            employee_id=str(r["employee_id"]),
            work_date=r["date"],
            status=AttendanceStatus.parse(r.get("status")),
            check_in_time=clock_time(r.get("check_in_time")),
            check_out_time=clock_time(r.get("check_out_time")),
            notes=optional_text(r.get("notes")),
            **row_numbers(r, *_COUNT_COLUMNS),
        )
