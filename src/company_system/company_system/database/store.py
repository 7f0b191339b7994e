from __future__ import annotations

from typing import Protocol

from ..assignments.repository import AssignmentRepository
from ..departments.repository import DepartmentRepository
from ..employees.repository import EmployeeRepository
from ..projects.repository import ProjectRepository


class Store(Protocol):
    """Read/write access to the four entity collections inside one transaction."""

    departments: DepartmentRepository
    employees: EmployeeRepository
    projects: ProjectRepository
    assignments: AssignmentRepository
