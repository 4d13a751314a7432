from __future__ import annotations

from datetime import time
from typing import Optional

from ..common.datetime_utils import elapsed_hours
from ..core.constants import STANDARD_WORK_HOURS


def timestamp_overtime_hours(
    check_in: Optional[time],
    check_out: Optional[time],
    *,
    standard_hours: float = STANDARD_WORK_HOURS,
) -> float:
    """Hours worked beyond the standard day, from same-day clock times.

    No cross-midnight handling: a check-out earlier than the check-in yields 0.
    """
    if check_in is None or check_out is None:
        return 0
    worked = elapsed_hours(check_in, check_out)
    return max(worked - standard_hours, 0)
