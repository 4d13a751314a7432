from datetime import date

import pytest

from payroll_system.attendance.factory import AttendanceSourceFactory
from payroll_system.attendance.model import AttendanceRecord, StatsAccumulator
from payroll_system.attendance.strategies.notes_source import LegacyNotesSource
from payroll_system.attendance.strategies.status_source import StatusOnlySource
from payroll_system.attendance.strategies.structured_source import StructuredSource
from payroll_system.core.enums import AttendanceStatus


def _record(**kwargs) -> AttendanceRecord:
    base = dict(
        attendance_id="a-1",
        employee_id="e-1",
        work_date=date(2024, 2, 1),
        status=AttendanceStatus.PRESENT,
    )
    base.update(kwargs)
    return AttendanceRecord(**base)


def _apply(record: AttendanceRecord) -> StatsAccumulator:
    acc = StatsAccumulator(employee_id=record.employee_id)
    AttendanceSourceFactory().for_record(record).apply(acc)
    return acc


def test_structured_columns_win_and_notes_are_ignored():
    record = _record(
        present_days=20,
        ot_hours=4,
        food=300,
        uniform=150,
        deduction=75,
        notes='{"present_days": 99, "ot_hours": 99, "food": 99}',
    )

    source = AttendanceSourceFactory().for_record(record)
    assert isinstance(source, StructuredSource)

    acc = _apply(record)
    assert acc.present_days == 20
    assert acc.ot_hours == 4
    assert acc.food == 300
    assert acc.uniform == 150
    assert acc.deduction == 75


def test_any_single_structured_count_is_enough():
    acc = _apply(_record(status=AttendanceStatus.ABSENT, late_days=2, notes='{"present_days": 5}'))
    assert (acc.present_days, acc.absent_days, acc.late_days) == (0, 0, 2)


def test_notes_json_used_when_structured_counts_are_zero():
    record = _record(
        food=500,  # allowances alone do not make the row structured
        deduction=25,
        notes='{"present_days": 22, "absent_days": 2, "late_days": 1, "ot_hours": 3.5, "food": 200, "uniform": "100", "deduction": 40}',
    )

    source = AttendanceSourceFactory().for_record(record)
    assert isinstance(source, LegacyNotesSource)

    acc = _apply(record)
    assert acc.present_days == 22
    assert acc.absent_days == 2
    assert acc.late_days == 1
    assert acc.ot_hours == 3.5
    assert acc.food == 700
    assert acc.uniform == 100
    assert acc.deduction == 25


def test_notes_missing_fields_default_to_zero():
    acc = _apply(_record(notes='{"ot_hours": "junk", "present_days": 3}'))
    assert acc.present_days == 3
    assert acc.ot_hours == 0
    assert acc.absent_days == 0


@pytest.mark.parametrize("notes", [None, "", "checked in at gate 2", "{broken", "[1, 2]", "null", "42", '"text"'])
def test_status_fallback_when_notes_unusable(notes):
    record = _record(status=AttendanceStatus.LATE, notes=notes)

    source = AttendanceSourceFactory().for_record(record)
    assert isinstance(source, StatusOnlySource)

    acc = _apply(record)
    assert (acc.present_days, acc.absent_days, acc.late_days) == (0, 0, 1)
    assert acc.ot_hours == 0


@pytest.mark.parametrize(
    "status, expected",
    [
        (AttendanceStatus.PRESENT, (1, 0, 0)),
        (AttendanceStatus.ABSENT, (0, 1, 0)),
        (AttendanceStatus.LATE, (0, 0, 1)),
        (None, (0, 0, 0)),
    ],
)
def test_status_counts_exactly_one_day(status, expected):
    acc = _apply(_record(status=status))
    assert (acc.present_days, acc.absent_days, acc.late_days) == expected


def test_status_parse_tolerates_case_and_unknown_values():
    assert AttendanceStatus.parse("Present") is AttendanceStatus.PRESENT
    assert AttendanceStatus.parse("half-day") is None
    assert AttendanceStatus.parse(None) is None


def test_status_fallback_keeps_direct_allowances():
    record = _record(food=250, uniform=80, deduction=40)

    source = AttendanceSourceFactory().for_record(record)
    assert isinstance(source, StatusOnlySource)

    acc = _apply(record)
    assert acc.present_days == 1
    assert (acc.food, acc.uniform, acc.deduction) == (250, 80, 40)


def test_deeply_nested_notes_fall_back_to_status():
    record = _record(notes="[" * 100_000)

    assert LegacyNotesSource.parse(record.notes) is None

    acc = _apply(record)
    assert acc.present_days == 1
