from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceSourceFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceStatsService
from .core.constants import DEFAULT_COMPANY_NAME
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_branch_repository import MySQLBranchRepository
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import BranchRepository, EmployeeRepository
from .employees.service import BranchService, EmployeeService
from .payroll.service import PayrollReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository
    employees_repo: EmployeeRepository
    branches_repo: BranchRepository

    attendance_stats_service: AttendanceStatsService
    employee_service: EmployeeService
    branch_service: BranchService
    payroll_report_service: PayrollReportService


def wire_services(
    *,
    attendance_repo: AttendanceRepository,
    employees_repo: EmployeeRepository,
    branches_repo: BranchRepository,
    conn: Optional[DatabaseConnection] = None,
    company_name: str = DEFAULT_COMPANY_NAME,
) -> Container:
    attendance_stats_service = AttendanceStatsService(attendance_repo, source_factory=AttendanceSourceFactory())
    employee_service = EmployeeService(employees_repo)
    branch_service = BranchService(branches_repo)
    payroll_report_service = PayrollReportService(
        attendance_stats_service,
        employees_repo,
        branches_repo,
        company_name=company_name,
    )

    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        employees_repo=employees_repo,
        branches_repo=branches_repo,
        attendance_stats_service=attendance_stats_service,
        employee_service=employee_service,
        branch_service=branch_service,
        payroll_report_service=payroll_report_service,
    )


def build_container(*, db_config: dict, company_name: str = DEFAULT_COMPANY_NAME) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_services(
        attendance_repo=MySQLAttendanceRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        branches_repo=MySQLBranchRepository(conn),
        conn=conn,
        company_name=company_name,
    )
