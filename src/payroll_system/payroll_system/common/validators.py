from __future__ import annotations

from ..core.enums import ReportType
from ..core.exceptions import ValidationError
from .datetime_utils import parse_month


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_month(value: str | None) -> str:
    """Normalise a ``YYYY-MM`` selector; a missing month aborts the operation."""
    if not value or not value.strip():
        raise ValidationError("Please select a month to generate the report.")
    year, month = parse_month(value)
    return f"{year:04d}-{month:02d}"


def require_report_type(value) -> ReportType:
    if isinstance(value, ReportType):
        return value
    try:
        return ReportType(str(value or "").strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown report type {value!r}")
