from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Branch, Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_employees(self, *, branch_id: Optional[str] = None) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError


class BranchRepository(Protocol):
    def list_branches(self) -> Sequence[Branch]:
        raise NotImplementedError

    def get_by_id(self, branch_id: str) -> Optional[Branch]:
        raise NotImplementedError

    def delete_by_id(self, branch_id: str) -> bool:
        raise NotImplementedError
