from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Sequence

from ..assignments.model import Assignment
from ..core.enums import Sex
from ..departments.model import Department
from ..employees.model import Employee
from ..projects.model import Project


@dataclass(frozen=True)
class StoreSnapshot:
    """All four collections read inside one consistent transaction."""

    departments: Sequence[Department] = field(default_factory=tuple)
    employees: Sequence[Employee] = field(default_factory=tuple)
    projects: Sequence[Project] = field(default_factory=tuple)
    assignments: Sequence[Assignment] = field(default_factory=tuple)


@dataclass(frozen=True)
class DepartmentHeadcount:
    dept_no: int
    dept_name: str
    employee_count: int


@dataclass(frozen=True)
class ResidualRoleRow:
    first_name: str
    last_name: str
    position: str
    sex: Sex
    dept_no: int


@dataclass(frozen=True)
class RetirementRow:
    emp_no: int
    first_name: str
    last_name: str
    position: str
    sex: Sex
    dept_no: int
    date_of_birth: date
    age: int


@dataclass(frozen=True)
class EmployeeContactRow:
    first_name: str
    last_name: str
    address: str


@dataclass(frozen=True)
class ManagerRetirementRow:
    first_name: str
    last_name: str
    position: str
    address: str
    age: int


@dataclass(frozen=True)
class EmployeeAgeRow:
    full_name: str
    dept_no: int
    age: int


@dataclass(frozen=True)
class EmployeeProjectHours:
    full_name: str
    project_name: str
    total_hours: int


@dataclass(frozen=True)
class ManagerAgeRow:
    full_name: str
    position: str
    date_of_birth: date
    age: int


@dataclass(frozen=True)
class ManagerProjectRow:
    manager_name: str
    position: str
    sex: Sex
    project_name: str
    dept_no: int


@dataclass(frozen=True)
class HoursRange:
    max_hours: int
    min_hours: int
