"""Create the payroll database and apply database/schema.sql.

Usage: python scripts/init_db.py [--seed]
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import describe_db, load_settings

from payroll_system.database.bootstrap import apply_schema, apply_seed_sql, list_tables


def main(argv: list[str]) -> None:
    db_config = dict(load_settings().DB_CONFIG)

    apply_schema(db_config, schema_path=REPO_ROOT / "database" / "schema.sql")
    if "--seed" in argv:
        apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")

    tables = list_tables(db_config)
    print(f"OK: schema ready -> {describe_db(db_config)} (tables={', '.join(sorted(tables))})")


if __name__ == "__main__":
    main(sys.argv[1:])
