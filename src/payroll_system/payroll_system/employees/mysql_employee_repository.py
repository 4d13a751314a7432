from __future__ import annotations

from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_number, row_numbers
from .model import Employee
from .repository import EmployeeRepository

_EMPLOYEE_COLUMNS = """
    id, employee_id, name, position, join_date,
    basic_salary, da_amount, hra, allowances, gross_salary,
    pf_number, esi_number, branch_id
"""


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_employees(self, *, branch_id: Optional[str] = None) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            if branch_id is not None:
                cur.execute(
                    f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE branch_id=%s ORDER BY employee_id ASC",
                    (str(branch_id),),
                )
            else:
                cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees ORDER BY employee_id ASC")
            return [self._to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE id=%s", (str(employee_id),))
            row = fetchone(cur)
            if not row:
                return None
            return self._to_employee(row)

    @staticmethod
    def _to_employee(r: dict[str, Any]) -> Employee:
        return Employee(
            id=str(r["id"]),
            employee_id=str(r.get("employee_id") or ""),
            name=r.get("name") or "",
            position=r.get("position"),
            join_date=r.get("join_date"),
            gross_salary=optional_number(r.get("gross_salary")),
            pf_number=r.get("pf_number"),
            esi_number=r.get("esi_number"),
            branch_id=r.get("branch_id"),
            **row_numbers(r, "basic_salary", "da_amount", "hra", "allowances"),
        )
