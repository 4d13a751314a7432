from __future__ import annotations

import math
from decimal import Decimal
from typing import Any


def to_number(value: Any) -> float:
    """Coerce a stored value to a number; anything non-numeric counts as 0."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float, Decimal)):
        number = float(value) if isinstance(value, Decimal) else value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            return 0
    else:
        return 0

    if isinstance(number, float) and not math.isfinite(number):
        return 0
    return number


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Python's built-in ``round`` does banker's rounding, which would drift from
    the amounts printed on earlier reports.
    """
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_number(value: Any) -> str:
    """Decimal text for exports: ``25`` rather than ``25.0``, ``25.5`` kept."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_amount(value: Any) -> str:
    """Two-decimal money text for printed payslips."""
    return f"{float(to_number(value)):.2f}"
