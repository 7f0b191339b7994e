from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

from src.company_system.company_system.assignments.model import Assignment, AssignmentEdit
from src.company_system.company_system.core.enums import Sex
from src.company_system.company_system.core.policy import CapacityPolicy
from src.company_system.company_system.departments.model import Department, DepartmentEdit
from src.company_system.company_system.employees.model import Employee, EmployeeEdit
from src.company_system.company_system.projects.model import Project, ProjectEdit


def make_policy(**overrides) -> CapacityPolicy:
    values = dict(
        max_employees_in_constrained_department=10,
        max_projects_per_department=2,
        max_hours_per_assignment=40,
        max_assignments_per_employee=3,
        retirement_age=60,
        capacity_constrained_dept_no=1,
    )
    values.update(overrides)
    return CapacityPolicy(**values)


def make_employee(emp_no: int, dept_no: int = 1, **overrides) -> Employee:
    values = dict(
        emp_no=emp_no,
        first_name=f"First{emp_no}",
        last_name=f"Last{emp_no}",
        address="1 Main St, Jakarta, Indonesia",
        date_of_birth=date(1990, 1, 1),
        sex=Sex.MALE,
        position="Developer",
        dept_no=dept_no,
    )
    values.update(overrides)
    return Employee(**values)


class InMemoryDepartments:
    def __init__(self):
        self.rows: dict[int, Department] = {}

    def get_by_id(self, dept_no: int) -> Optional[Department]:
        return self.rows.get(dept_no)

    def list_page(self, *, offset: int, limit: int):
        return self.list_all()[offset : offset + limit]

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def exists(self, dept_no: int) -> bool:
        return dept_no in self.rows

    def exists_with_name(self, name: str, *, exclude_dept_no=None) -> bool:
        return any(d.name == name and d.dept_no != exclude_dept_no for d in self.rows.values())

    def exists_with_manager(self, manager_emp_no: int, *, exclude_dept_no=None) -> bool:
        return any(d.manager_emp_no == manager_emp_no and d.dept_no != exclude_dept_no for d in self.rows.values())

    def next_id(self) -> int:
        return max(self.rows, default=0) + 1

    def insert(self, department: Department) -> int:
        self.rows[department.dept_no] = department
        return department.dept_no

    def update(self, dept_no: int, edit: DepartmentEdit) -> bool:
        self.rows[dept_no] = Department(dept_no=dept_no, name=edit.name, manager_emp_no=edit.manager_emp_no)
        return True

    def delete(self, dept_no: int) -> bool:
        return self.rows.pop(dept_no, None) is not None


class InMemoryEmployees:
    def __init__(self):
        self.rows: dict[int, Employee] = {}

    def get_by_id(self, emp_no: int) -> Optional[Employee]:
        return self.rows.get(emp_no)

    def list_page(self, *, offset: int, limit: int):
        return self.list_all()[offset : offset + limit]

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def exists(self, emp_no: int) -> bool:
        return emp_no in self.rows

    def count_in_department(self, dept_no: int) -> int:
        return sum(1 for e in self.rows.values() if e.dept_no == dept_no)

    def insert(self, employee: Employee) -> int:
        emp_no = max(self.rows, default=0) + 1
        self.rows[emp_no] = replace(employee, emp_no=emp_no)
        return emp_no

    def update(self, emp_no: int, edit: EmployeeEdit) -> bool:
        self.rows[emp_no] = Employee(emp_no=emp_no, **vars(edit))
        return True

    def delete(self, emp_no: int) -> bool:
        return self.rows.pop(emp_no, None) is not None


class InMemoryProjects:
    def __init__(self):
        self.rows: dict[int, Project] = {}

    def get_by_id(self, proj_no: int) -> Optional[Project]:
        return self.rows.get(proj_no)

    def list_page(self, *, offset: int, limit: int):
        return self.list_all()[offset : offset + limit]

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def exists(self, proj_no: int) -> bool:
        return proj_no in self.rows

    def exists_with_name(self, name: str, *, exclude_proj_no=None) -> bool:
        return any(p.name == name and p.proj_no != exclude_proj_no for p in self.rows.values())

    def count_in_department(self, dept_no: int) -> int:
        return sum(1 for p in self.rows.values() if p.dept_no == dept_no)

    def next_id(self) -> int:
        return max(self.rows, default=0) + 1

    def insert(self, project: Project) -> int:
        self.rows[project.proj_no] = project
        return project.proj_no

    def update(self, proj_no: int, edit: ProjectEdit) -> bool:
        self.rows[proj_no] = Project(proj_no=proj_no, name=edit.name, dept_no=edit.dept_no)
        return True

    def delete(self, proj_no: int) -> bool:
        return self.rows.pop(proj_no, None) is not None


class InMemoryAssignments:
    def __init__(self):
        self.rows: dict[tuple[int, int], Assignment] = {}

    def get(self, emp_no: int, proj_no: int) -> Optional[Assignment]:
        return self.rows.get((emp_no, proj_no))

    def list_page(self, *, offset: int, limit: int):
        return self.list_all()[offset : offset + limit]

    def list_all(self):
        return [self.rows[k] for k in sorted(self.rows)]

    def exists(self, emp_no: int, proj_no: int) -> bool:
        return (emp_no, proj_no) in self.rows

    def count_for_employee(self, emp_no: int) -> int:
        return sum(1 for (e, _) in self.rows if e == emp_no)

    def insert(self, assignment: Assignment) -> None:
        self.rows[(assignment.emp_no, assignment.proj_no)] = assignment

    def update(self, emp_no: int, proj_no: int, edit: AssignmentEdit) -> bool:
        self.rows[(emp_no, proj_no)] = Assignment(emp_no, proj_no, edit.date_worked, edit.hours_worked)
        return True

    def delete(self, emp_no: int, proj_no: int) -> bool:
        return self.rows.pop((emp_no, proj_no), None) is not None


class InMemoryStore:
    def __init__(self):
        self.departments = InMemoryDepartments()
        self.employees = InMemoryEmployees()
        self.projects = InMemoryProjects()
        self.assignments = InMemoryAssignments()

    def add_department(self, dept_no: int, name: str, manager_emp_no: int) -> Department:
        return self._put(self.departments, Department(dept_no, name, manager_emp_no), dept_no)

    def add_employee(self, employee: Employee) -> Employee:
        return self._put(self.employees, employee, employee.emp_no)

    def add_project(self, proj_no: int, name: str, dept_no: int) -> Project:
        return self._put(self.projects, Project(proj_no, name, dept_no), proj_no)

    def add_assignment(self, emp_no: int, proj_no: int, hours: Optional[int] = None) -> Assignment:
        return self._put(self.assignments, Assignment(emp_no, proj_no, None, hours), (emp_no, proj_no))

    @staticmethod
    def _put(repo, row, key):
        repo.rows[key] = row
        return row


class FakeUnitOfWork:
    """Hands out the store's repositories and records how the block ended."""

    def __init__(self, store: InMemoryStore):
        self._store = store
        self.departments = store.departments
        self.employees = store.employees
        self.projects = store.projects
        self.assignments = store.assignments
        self.commits = 0
        self.rollbacks = 0

    def __call__(self) -> "FakeUnitOfWork":
        return self

    def __enter__(self) -> "FakeUnitOfWork":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.commits += 1
        else:
            self.rollbacks += 1
