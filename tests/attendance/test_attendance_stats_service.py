from __future__ import annotations

from datetime import date, time

import pytest

from payroll_system.attendance.model import AttendanceRecord, MonthlyStats
from payroll_system.attendance.overtime import timestamp_overtime_hours
from payroll_system.attendance.service import AttendanceStatsService, aggregate_attendance
from payroll_system.core.enums import AttendanceStatus
from payroll_system.core.exceptions import ValidationError


class FakeAttendanceRepo:
    def __init__(self, rows=None, error: Exception | None = None):
        self._rows = list(rows or [])
        self._error = error
        self.calls: list[dict] = []

    def fetch_attendance(self, *, start_date, end_date, employee_id=None):
        self.calls.append({"start_date": start_date, "end_date": end_date, "employee_id": employee_id})
        if self._error:
            raise self._error
        return [
            r
            for r in self._rows
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]


_seq = iter(range(1, 10_000))


def _row(employee_id: str, day: int, status=AttendanceStatus.PRESENT, **kwargs) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=f"a-{next(_seq)}",
        employee_id=employee_id,
        work_date=date(2024, 2, day),
        status=status,
        **kwargs,
    )


def test_timestamp_overtime_hours():
    assert timestamp_overtime_hours(time(8, 0), time(18, 30)) == pytest.approx(2.5)
    assert timestamp_overtime_hours(time(9, 0), time(17, 0)) == 0
    assert timestamp_overtime_hours(time(20, 0), time(6, 0)) == 0
    assert timestamp_overtime_hours(time(8, 0), None) == 0


def test_aggregate_groups_per_employee_and_counts_rows():
    rows = [
        _row("e-1", 1),
        _row("e-1", 2, AttendanceStatus.LATE),
        _row("e-1", 3, AttendanceStatus.ABSENT),
        _row("e-2", 1, present_days=24, ot_hours=6, food=100),
        _row("e-2", 2, notes='{"present_days": 1, "ot_hours": 2}'),
    ]

    stats = aggregate_attendance(rows, include_timestamp_overtime=False)

    assert set(stats) == {"e-1", "e-2"}
    assert stats["e-1"] == MonthlyStats(employee_id="e-1", present_days=1, absent_days=1, late_days=1, total_days=3)
    assert stats["e-2"].present_days == 25
    assert stats["e-2"].ot_hours == 8
    assert stats["e-2"].food == 100
    assert stats["e-2"].total_days == 2


def test_structured_rows_accumulate_additively():
    rows = [_row("e-1", 1, present_days=10), _row("e-1", 15, present_days=12, absent_days=1)]

    stats = aggregate_attendance(rows, include_timestamp_overtime=False)

    assert stats["e-1"].present_days == 22
    assert stats["e-1"].absent_days == 1


def test_timestamp_overtime_added_only_when_enabled():
    rows = [
        _row("e-1", 1, check_in_time=time(8, 0), check_out_time=time(19, 0)),
        _row("e-1", 2, present_days=1, ot_hours=1, check_in_time=time(8, 0), check_out_time=time(17, 0)),
    ]

    with_ts = aggregate_attendance(rows, include_timestamp_overtime=True)
    without_ts = aggregate_attendance(rows, include_timestamp_overtime=False)

    assert with_ts["e-1"].ot_hours == pytest.approx(1 + 3 + 1)
    assert without_ts["e-1"].ot_hours == pytest.approx(1)


def test_aggregation_result_is_immutable():
    stats = aggregate_attendance([_row("e-1", 1)], include_timestamp_overtime=False)
    with pytest.raises(AttributeError):
        stats["e-1"].present_days = 5


def test_employee_month_stats_reads_month_range_for_one_employee():
    repo = FakeAttendanceRepo(
        [
            _row("e-1", 1, check_in_time=time(8, 0), check_out_time=time(18, 0)),
            _row("e-1", 29),
            _row("e-2", 3),
        ]
    )
    svc = AttendanceStatsService(repo)

    stats = svc.employee_month_stats("e-1", "2024-02")

    assert repo.calls == [{"start_date": date(2024, 2, 1), "end_date": date(2024, 2, 29), "employee_id": "e-1"}]
    assert stats.present_days == 2
    assert stats.total_days == 2
    assert stats.ot_hours == pytest.approx(2)


def test_employee_without_rows_gets_empty_stats():
    svc = AttendanceStatsService(FakeAttendanceRepo([]))

    stats = svc.employee_month_stats("e-9", "2024-02")

    assert stats == MonthlyStats(employee_id="e-9")
    assert not stats.has_payable_activity


def test_all_month_stats_skips_timestamp_overtime_by_default():
    repo = FakeAttendanceRepo([_row("e-1", 5, check_in_time=time(8, 0), check_out_time=time(20, 0))])
    svc = AttendanceStatsService(repo)

    assert svc.all_month_stats("2024-02")["e-1"].ot_hours == 0
    assert svc.all_month_stats("2024-02", include_timestamp_overtime=True)["e-1"].ot_hours == pytest.approx(4)
    assert repo.calls[0]["employee_id"] is None


def test_storage_failure_propagates_without_partial_result():
    svc = AttendanceStatsService(FakeAttendanceRepo(error=IOError("connection reset")))

    with pytest.raises(IOError, match="connection reset"):
        svc.all_month_stats("2024-02")


def test_malformed_month_rejected_before_read():
    repo = FakeAttendanceRepo([])
    svc = AttendanceStatsService(repo)

    with pytest.raises(ValidationError):
        svc.all_month_stats("2024-13")
    assert repo.calls == []


def test_allowance_columns_counted_on_rows_without_day_counts():
    rows = [
        _row("e-1", 1, food=250, deduction=40),
        _row("e-1", 2, uniform=90, notes='{"present_days": 1}'),
        _row("e-1", 3, present_days=1, food=10),
    ]

    stats = aggregate_attendance(rows, include_timestamp_overtime=False)["e-1"]

    assert stats.present_days == 3
    assert stats.food == 260
    assert stats.uniform == 90
    assert stats.deduction == 40
