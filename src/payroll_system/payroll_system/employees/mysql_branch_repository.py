from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Branch
from .repository import BranchRepository


class MySQLBranchRepository(BranchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_branches(self) -> Sequence[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM branches ORDER BY name ASC")
            return [Branch(id=str(r["id"]), name=r["name"]) for r in fetchall(cur)]

    def get_by_id(self, branch_id: str) -> Optional[Branch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT id, name FROM branches WHERE id=%s", (str(branch_id),))
            row = fetchone(cur)
            if not row:
                return None
            return Branch(id=str(row["id"]), name=row["name"])

    def delete_by_id(self, branch_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM branches WHERE id=%s", (str(branch_id),))
            return cur.rowcount > 0
