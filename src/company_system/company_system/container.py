from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Any, Mapping, Optional

from .assignments.service import AssignmentService
from .core.constants import DEFAULT_REPORT_TIMEOUT_MS
from .core.policy import CapacityPolicy
from .database.connection import DBConfig, DatabaseConnection
from .database.unit_of_work import MySQLUnitOfWork
from .departments.service import DepartmentService
from .employees.service import EmployeeService
from .projects.service import ProjectService
from .reports.engine import ReportEngine
from .reports.service import ReportService
from .validation.validator import ConstraintValidator


@dataclass(frozen=True)
class Container:
    policy: CapacityPolicy

    department_service: DepartmentService
    employee_service: EmployeeService
    project_service: ProjectService
    assignment_service: AssignmentService
    report_service: ReportService


def build_container(
    *,
    db_config: dict,
    capacity_settings: Mapping[str, Any],
    report_timeout_ms: Optional[int] = DEFAULT_REPORT_TIMEOUT_MS,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    policy = CapacityPolicy.from_settings(capacity_settings)

    write_uow = partial(MySQLUnitOfWork, conn)
    read_uow = partial(MySQLUnitOfWork, conn, read_only=True, max_execution_ms=report_timeout_ms)

    validator = ConstraintValidator(policy)

    return Container(
        policy=policy,
        department_service=DepartmentService(write_uow, validator),
        employee_service=EmployeeService(write_uow, validator),
        project_service=ProjectService(write_uow, validator),
        assignment_service=AssignmentService(write_uow, validator),
        report_service=ReportService(read_uow, ReportEngine(policy)),
    )
