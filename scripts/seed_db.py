"""Load the demo branches, employees and February 2024 attendance."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import describe_db, load_settings

from payroll_system.database.bootstrap import apply_seed_sql

if __name__ == "__main__":
    db_config = dict(load_settings().DB_CONFIG)
    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    print(f"OK: demo data loaded -> {describe_db(db_config)}")
