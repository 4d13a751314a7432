from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..core.exceptions import ValidationError


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def current_month(today: Optional[date] = None) -> str:
    today = today or now_local().date()
    return f"{today.year:04d}-{today.month:02d}"


def parse_month(value: str) -> tuple[int, int]:
    """Split a ``YYYY-MM`` selector into (year, month)."""
    text = (value or "").strip()
    parts = text.split("-")
    if len(parts) != 2 or len(parts[0]) != 4 or not parts[0].isdigit() or not parts[1].isdigit():
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM")
    return year, month


def month_bounds(month: Optional[str] = None, *, today: Optional[date] = None) -> tuple[date, date]:
    """Inclusive [first_day, last_day] of a calendar month.

    Works on plain calendar dates (first day of the next month minus one day),
    so the result never shifts with the process timezone. ``month=None`` means
    the current local month.
    """
    if month:
        year, mon = parse_month(month)
    else:
        today = today or now_local().date()
        year, mon = today.year, today.month

    first_day = date(year, mon, 1)
    if mon == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, mon + 1, 1)
    return first_day, next_month - timedelta(days=1)


def month_label(month: str) -> str:
    """``2024-02`` -> ``February 2024``."""
    year, mon = parse_month(month)
    return f"{calendar.month_name[mon]} {year}"


def elapsed_hours(start: time, end: time) -> float:
    """Hours between two clock times on the same day (negative if end < start)."""
    start_s = start.hour * 3600 + start.minute * 60 + start.second + start.microsecond / 1_000_000
    end_s = end.hour * 3600 + end.minute * 60 + end.second + end.microsecond / 1_000_000
    return (end_s - start_s) / 3600
