from __future__ import annotations

from contextlib import contextmanager
from datetime import time, timedelta
from typing import Any, Optional

from ..common.numbers import to_number
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One short-lived connection per read; rolled back if the body raises."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> list[dict[str, Any]]:
    return list(cur.fetchall() or [])


def row_numbers(row: dict[str, Any], *columns: str) -> dict[str, float]:
    """DECIMAL / NULL / text columns of a row as plain numbers (missing -> 0)."""
    return {col: to_number(row.get(col)) for col in columns}


def optional_number(value: Any) -> Optional[float]:
    """Like ``to_number`` but keeps SQL NULL as None."""
    return None if value is None else to_number(value)


def optional_text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def clock_time(value: Any) -> Optional[time]:
    """Check-in / check-out TIME column as a ``time``.

    mysql-connector hands TIME back as ``timedelta`` (``time`` or text from
    other drivers and fixtures). Empty values mean the clock was not punched.
    """
    if value is None or value == "":
        return None
    if isinstance(value, time):
        return value
    if isinstance(value, timedelta):
        seconds = int(value.total_seconds()) % 86400
        return time(seconds // 3600, seconds % 3600 // 60, seconds % 60)
    if isinstance(value, str):
        hh, mm, *rest = value.strip().split(":") + ["0"]
        return time(int(hh), int(mm), int(float(rest[0] or 0)))
    raise TypeError(f"Unsupported TIME value: {value!r}")
