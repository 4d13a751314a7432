from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: static payroll attributes of an employee.

    ``id`` is the storage key referenced by attendance rows; ``employee_id``
    is the printed employee number (Emp.No). Salary figures are per-day rates
    for ``basic_salary`` and ``da_amount`` and monthly amounts for the rest.
    """

    id: str
    employee_id: str
    name: str
    position: Optional[str] = None
    join_date: Optional[date] = None
    basic_salary: float = 0
    da_amount: float = 0
    hra: float = 0
    allowances: float = 0
    gross_salary: Optional[float] = None
    pf_number: Optional[str] = None
    esi_number: Optional[str] = None
    branch_id: Optional[str] = None

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "name": self.name,
            "position": self.position,
            "join_date": self.join_date.strftime("%Y-%m-%d") if self.join_date else None,
            "basic_salary": self.basic_salary,
            "da_amount": self.da_amount,
            "hra": self.hra,
            "allowances": self.allowances,
            "gross_salary": self.gross_salary,
            "pf_number": self.pf_number,
            "esi_number": self.esi_number,
            "branch_id": self.branch_id,
        }


@dataclass(frozen=True)
class Branch:
    id: str
    name: str
