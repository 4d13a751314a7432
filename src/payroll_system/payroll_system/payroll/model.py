from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import MonthlyStats
from ..core.enums import ReportType
from ..employees.model import Employee

PF_COLUMNS = (
    "Emp.No",
    "Employee Name",
    "PF NO",
    "Days Present",
    "Basic+DA",
    "PF.Basic",
    "Emp.12 Amt",
    "E.P.F",
    "E.P.S",
    "Total Employer",
)

ESI_COLUMNS = (
    "Emp.No",
    "Employee Name",
    "ESI NO",
    "Days Present",
    "Gross Earnings",
    "Employee ESI (0.75%)",
    "Employer ESI (3.25%)",
    "Total ESI",
)


@dataclass(frozen=True)
class Earnings:
    """Attendance-prorated earnings shared by the PF and ESI reports."""

    earned_basic: int
    earned_da: int
    ot_amount: int

    @property
    def gross(self) -> int:
        return self.earned_basic + self.earned_da + self.ot_amount


@dataclass(frozen=True)
class PFLineItem:
    emp_no: str
    name: str
    pf_number: str
    days_present: float
    pf_basic: int
    employee_contribution: int
    employer_epf: int
    employer_eps: int

    @property
    def total_employer(self) -> int:
        return self.employer_epf + self.employer_eps

    def as_row(self) -> dict:
        return {
            "Emp.No": self.emp_no,
            "Employee Name": self.name,
            "PF NO": self.pf_number,
            "Days Present": self.days_present,
            "Basic+DA": self.pf_basic,
            "PF.Basic": self.pf_basic,
            "Emp.12 Amt": self.employee_contribution,
            "E.P.F": self.employer_epf,
            "E.P.S": self.employer_eps,
            "Total Employer": self.total_employer,
        }


@dataclass(frozen=True)
class ESILineItem:
    emp_no: str
    name: str
    esi_number: str
    days_present: float
    gross_earnings: int
    employee_esi: int
    employer_esi: int

    @property
    def total_esi(self) -> int:
        return self.employee_esi + self.employer_esi

    def as_row(self) -> dict:
        return {
            "Emp.No": self.emp_no,
            "Employee Name": self.name,
            "ESI NO": self.esi_number,
            "Days Present": self.days_present,
            "Gross Earnings": self.gross_earnings,
            "Employee ESI (0.75%)": self.employee_esi,
            "Employer ESI (3.25%)": self.employer_esi,
            "Total ESI": self.total_esi,
        }


@dataclass(frozen=True)
class PayslipLineItem:
    """One printable payslip (one employee, one month).

    Uses the monthly gross salary rather than the attendance-prorated
    earnings of the PF/ESI reports.
    """

    employee: Employee
    stats: MonthlyStats
    month: str
    branch_name: str
    gross_earnings: float
    hra: float
    allowances: float
    ot_amount: float
    pf: int
    esi: int
    conveyance: float = 0
    advance: float = 0
    food: float = 0
    other: float = 0

    @property
    def total_earnings(self) -> float:
        return self.gross_earnings + self.ot_amount

    @property
    def total_deductions(self) -> float:
        return self.pf + self.esi

    @property
    def net_pay(self) -> float:
        return self.gross_earnings + self.ot_amount - (self.pf + self.esi)

    def earnings(self) -> list[tuple[str, float]]:
        return [
            ("Basic + D.A", self.gross_earnings),
            ("HRA", self.hra),
            ("Conveyance", self.conveyance),
            ("Other Allowance", self.allowances),
            ("Overtime Amount", self.ot_amount),
        ]

    def deductions(self) -> list[tuple[str, float]]:
        return [
            ("PF", self.pf),
            ("ESI", self.esi),
            ("Advance", self.advance),
            ("Food Allowance", self.food),
            ("Other", self.other),
        ]


@dataclass(frozen=True)
class ReportData:
    report_type: ReportType
    month: str
    columns: tuple[str, ...]
    items: list = field(default_factory=list)

    @property
    def rows(self) -> list[dict]:
        return [item.as_row() for item in self.items]

    @property
    def title(self) -> str:
        return f"{self.report_type.value.upper()} Report"


@dataclass(frozen=True)
class PayslipBatch:
    month: str
    company_name: str
    payslips: list[PayslipLineItem] = field(default_factory=list)
    branch_id: Optional[str] = None
