from __future__ import annotations

from datetime import date, datetime

import pytest


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 2, 15, 9, 30, 0)


@pytest.fixture
def fixed_today(fixed_now) -> date:
    return fixed_now.date()


@pytest.fixture
def testing_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")
    monkeypatch.setenv("AUTO_SEED_DB", "0")
