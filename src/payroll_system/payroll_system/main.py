from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import describe_db, get_settings_module, load_settings

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.constants import DEFAULT_COMPANY_NAME
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .employees.controller import register as register_employees
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = load_settings()
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["COMPANY_NAME"] = getattr(settings, "COMPANY_NAME", DEFAULT_COMPANY_NAME)

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info("settings=%s db=%s", settings_module, describe_db(db_config))

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
            logger.info("schema ready (tables=%d)", len(list_tables(db_config)))
        if bool(getattr(settings, "AUTO_SEED_DB", False)):
            apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
            logger.info("demo seed ready")

        container = build_container(db_config=db_config, company_name=app.config["COMPANY_NAME"])

    register_attendance(app, container)
    register_employees(app, container)
    register_payroll(app, container)

    return app
