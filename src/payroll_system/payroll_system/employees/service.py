from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Branch, Employee
from .repository import BranchRepository, EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self, *, branch_id: Optional[str] = None) -> Sequence[Employee]:
        return self._employees.list_employees(branch_id=branch_id)

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(require_non_empty(employee_id, "employee_id"))
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee


class BranchService:
    def __init__(self, branches: BranchRepository):
        self._branches = branches

    def list_branches(self) -> Sequence[Branch]:
        return self._branches.list_branches()

    def delete_branch(self, branch_id: str) -> None:
        """Delete a branch; its employees keep their records with no branch."""
        branch_id = require_non_empty(branch_id, "branch_id")
        if not self._branches.delete_by_id(branch_id):
            raise NotFoundError(f"Branch {branch_id} not found")
        logger.info("branch %s deleted", branch_id)
