from __future__ import annotations

import time as time_module
from datetime import date, time

import pytest

from payroll_system.common.datetime_utils import current_month, elapsed_hours, month_bounds, month_label, parse_month
from payroll_system.core.exceptions import ValidationError


def test_month_bounds_leap_february():
    assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))


def test_month_bounds_non_leap_february():
    assert month_bounds("2023-02") == (date(2023, 2, 1), date(2023, 2, 28))


def test_month_bounds_december_rolls_into_next_year():
    assert month_bounds("2023-12") == (date(2023, 12, 1), date(2023, 12, 31))


def test_month_bounds_defaults_to_current_month(fixed_today):
    assert month_bounds(None, today=fixed_today) == (date(2024, 2, 1), date(2024, 2, 29))
    assert current_month(fixed_today) == "2024-02"


@pytest.mark.skipif(not hasattr(time_module, "tzset"), reason="tzset not available")
@pytest.mark.parametrize("tz", ["UTC", "Asia/Kolkata", "America/Los_Angeles", "Pacific/Kiritimati"])
def test_month_bounds_ignores_process_timezone(monkeypatch, tz):
    monkeypatch.setenv("TZ", tz)
    time_module.tzset()
    try:
        assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))
    finally:
        monkeypatch.undo()
        time_module.tzset()


@pytest.mark.parametrize("value", ["", "2024", "2024-13", "24-02", "2024/02", "abcd-ef", "2024-00"])
def test_parse_month_rejects_malformed(value):
    with pytest.raises(ValidationError):
        parse_month(value)


def test_parse_month_accepts_single_digit_month():
    assert parse_month("2024-2") == (2024, 2)


def test_month_label():
    assert month_label("2024-02") == "February 2024"


def test_elapsed_hours_same_day():
    assert elapsed_hours(time(8, 0), time(18, 30)) == pytest.approx(10.5)
    assert elapsed_hours(time(18, 0), time(8, 0)) == pytest.approx(-10.0)
