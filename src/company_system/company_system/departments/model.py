from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    """Domain entity: department, managed by exactly one employee."""

    dept_no: int
    name: str
    manager_emp_no: int


@dataclass(frozen=True)
class DepartmentEdit:
    """Fields a department update may change."""

    name: str
    manager_emp_no: int
