from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import month_bounds
from .factory import AttendanceSourceFactory
from .model import AttendanceRecord, MonthlyStats, StatsAccumulator
from .overtime import timestamp_overtime_hours
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def aggregate_attendance(
    records: Iterable[AttendanceRecord],
    *,
    include_timestamp_overtime: bool,
    factory: Optional[AttendanceSourceFactory] = None,
    log: Optional[logging.Logger] = None,
) -> dict[str, MonthlyStats]:
    """Fold daily rows into one MonthlyStats per employee.

    Each row contributes through exactly one source (structured columns,
    notes JSON, or status). When ``include_timestamp_overtime`` is set, hours
    past the standard day between check-in and check-out are added on top.
    """
    factory = factory or AttendanceSourceFactory()
    log = log or logger
    totals: dict[str, StatsAccumulator] = {}

    for record in records:
        acc = totals.get(record.employee_id)
        if acc is None:
            acc = StatsAccumulator(employee_id=record.employee_id)
            totals[record.employee_id] = acc

        acc.total_days += 1
        source = factory.for_record(record)
        source.apply(acc)

        extra_ot = 0.0
        if include_timestamp_overtime:
            extra_ot = timestamp_overtime_hours(record.check_in_time, record.check_out_time)
            acc.ot_hours += extra_ot

        log.debug(
            "attendance %s employee=%s date=%s source=%s timestamp_ot=%.2f",
            record.attendance_id,
            record.employee_id,
            record.work_date,
            source.name,
            extra_ot,
        )

    return {employee_id: acc.freeze() for employee_id, acc in totals.items()}


class AttendanceStatsService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        *,
        source_factory: Optional[AttendanceSourceFactory] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._attendance = attendance
        self._factory = source_factory or AttendanceSourceFactory()
        self._log = logger or logging.getLogger(__name__)

    def employee_month_stats(self, employee_id: str, month: Optional[str] = None) -> MonthlyStats:
        """Stats for one employee; ``month=None`` means the current month."""
        start, end = month_bounds(month)
        self._log.debug("fetching attendance employee=%s range=%s..%s", employee_id, start, end)
        rows = self._attendance.fetch_attendance(start_date=start, end_date=end, employee_id=employee_id)

        stats = aggregate_attendance(
            rows,
            include_timestamp_overtime=True,
            factory=self._factory,
            log=self._log,
        )
        result = stats.get(str(employee_id)) or MonthlyStats(employee_id=str(employee_id))
        self._log.info(
            "employee %s %s..%s: present=%s absent=%s late=%s ot=%s",
            employee_id,
            start,
            end,
            result.present_days,
            result.absent_days,
            result.late_days,
            result.ot_hours,
        )
        return result

    def all_month_stats(
        self,
        month: Optional[str] = None,
        *,
        include_timestamp_overtime: bool = False,
    ) -> dict[str, MonthlyStats]:
        """Stats for every employee with at least one row in the month."""
        start, end = month_bounds(month)
        self._log.debug("fetching attendance for all employees range=%s..%s", start, end)
        rows = self._attendance.fetch_attendance(start_date=start, end_date=end)

        stats = aggregate_attendance(
            rows,
            include_timestamp_overtime=include_timestamp_overtime,
            factory=self._factory,
            log=self._log,
        )
        self._log.info("aggregated %d rows into %d employees for %s..%s", len(rows), len(stats), start, end)
        return stats
