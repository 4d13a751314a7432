import importlib
import os
from types import ModuleType


def get_settings_module() -> str:
    # APP_ENV picks the settings module; anything unknown falls back to development.
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())


def describe_db(db_config: dict) -> str:
    """``user@host:port/database`` for log lines (never the password)."""
    return (
        f"{db_config.get('user')}@{db_config.get('host')}:"
        f"{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
