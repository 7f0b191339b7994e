from __future__ import annotations

from typing import Optional

from ..assignments.model import Assignment, AssignmentEdit
from ..common.validators import is_blank
from ..core.enums import ErrorKind
from ..core.policy import CapacityPolicy
from ..database.store import Store
from ..departments.model import Department, DepartmentEdit
from ..employees.model import Employee, EmployeeEdit
from ..projects.model import Project, ProjectEdit
from .decision import ACCEPTED, Decision


def _null(what: str) -> Decision:
    return Decision.reject(ErrorKind.NULL_INPUT, f"{what} data cannot be null.")


def _bad_id(*values: Optional[int]) -> bool:
    return any(v is None or int(v) <= 0 for v in values)


class ConstraintValidator:
    """Accept/reject decisions for proposed mutations.

    Every method only reads from ``store`` and returns a Decision; nothing is written.
    Checks run in a fixed order and the first failing one decides the outcome.
    """

    def __init__(self, policy: CapacityPolicy):
        self._policy = policy

    # Departments

    def validate_add_department(self, department: Optional[Department], store: Store) -> Decision:
        if department is None:
            return _null("Department")
        if department.dept_no < 0:
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid department number.")
        if is_blank(department.name):
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "Department name cannot be empty.")
        if not store.employees.exists(department.manager_emp_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                f"Manager employee {department.manager_emp_no} does not exist.",
            )
        if department.dept_no and store.departments.exists(department.dept_no):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Department {department.dept_no} already exists.")
        if store.departments.exists_with_name(department.name):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Department name '{department.name}' is already used.")
        if store.departments.exists_with_manager(department.manager_emp_no):
            return Decision.reject(
                ErrorKind.DUPLICATE_KEY,
                f"Employee {department.manager_emp_no} already manages another department.",
            )
        return ACCEPTED

    def validate_update_department(self, dept_no: int, edit: Optional[DepartmentEdit], store: Store) -> Decision:
        if edit is None:
            return _null("Department")
        if _bad_id(dept_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid department number.")
        if not store.departments.exists(dept_no):
            return Decision.reject(ErrorKind.NOT_FOUND, f"Department {dept_no} not found.")
        if store.departments.exists_with_manager(edit.manager_emp_no, exclude_dept_no=dept_no):
            return Decision.reject(
                ErrorKind.DUPLICATE_KEY,
                f"Employee {edit.manager_emp_no} already manages another department.",
            )
        if is_blank(edit.name):
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "Department name cannot be empty.")
        if store.departments.exists_with_name(edit.name, exclude_dept_no=dept_no):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Department name '{edit.name}' is already used.")
        if not store.employees.exists(edit.manager_emp_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                f"Manager employee {edit.manager_emp_no} does not exist.",
            )
        return ACCEPTED

    def validate_delete_department(self, dept_no: int, store: Store) -> Decision:
        if _bad_id(dept_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid department number.")
        if not store.departments.exists(dept_no):
            return Decision.reject(ErrorKind.NOT_FOUND, f"Department {dept_no} not found.")
        return ACCEPTED

    # Employees

    def _check_employee_fields(self, first_name, last_name, position, dept_no) -> Optional[Decision]:
        if is_blank(first_name):
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "First name cannot be empty.")
        if is_blank(last_name):
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "Last name cannot be empty.")
        if is_blank(position):
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "Position cannot be empty.")
        if dept_no is None or dept_no <= 0:
            return Decision.reject(ErrorKind.MISSING_REQUIRED_FIELD, "Invalid department number.")
        return None

    def _department_is_full(self, dept_no: int, store: Store) -> bool:
        if dept_no != self._policy.capacity_constrained_dept_no:
            return False
        headcount = store.employees.count_in_department(dept_no)
        return headcount >= self._policy.max_employees_in_constrained_department

    def validate_add_employee(self, employee: Optional[Employee], store: Store) -> Decision:
        if employee is None:
            return _null("Employee")
        failed = self._check_employee_fields(employee.first_name, employee.last_name, employee.position, employee.dept_no)
        if failed:
            return failed
        if not store.departments.exists(employee.dept_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                "The specified department does not exist.",
            )
        if self._department_is_full(employee.dept_no, store):
            limit = self._policy.max_employees_in_constrained_department
            return Decision.reject(
                ErrorKind.CAPACITY_EXCEEDED,
                f"The department already has the maximum number of employees {limit}.",
            )
        return ACCEPTED

    def validate_update_employee(self, emp_no: int, edit: Optional[EmployeeEdit], store: Store) -> Decision:
        if edit is None:
            return _null("Employee")
        if _bad_id(emp_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid employee number.")
        current = store.employees.get_by_id(emp_no)
        if current is None:
            return Decision.reject(ErrorKind.NOT_FOUND, f"Employee {emp_no} not found.")
        failed = self._check_employee_fields(edit.first_name, edit.last_name, edit.position, edit.dept_no)
        if failed:
            return failed
        if not store.departments.exists(edit.dept_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                "The specified department does not exist.",
            )
        if edit.dept_no != current.dept_no and self._department_is_full(edit.dept_no, store):
            limit = self._policy.max_employees_in_constrained_department
            return Decision.reject(
                ErrorKind.CAPACITY_EXCEEDED,
                f"The department already has the maximum number of employees {limit}.",
            )
        return ACCEPTED

    def validate_delete_employee(self, emp_no: int, store: Store) -> Decision:
        if _bad_id(emp_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid employee number.")
        if not store.employees.exists(emp_no):
            return Decision.reject(ErrorKind.NOT_FOUND, f"Employee {emp_no} not found.")
        return ACCEPTED

    # Projects

    def _projects_full(self, dept_no: int, store: Store) -> Optional[Decision]:
        limit = self._policy.max_projects_per_department
        if store.projects.count_in_department(dept_no) >= limit:
            return Decision.reject(
                ErrorKind.CAPACITY_EXCEEDED,
                f"The department already has the maximum number of projects ({limit}).",
            )
        return None

    def validate_add_project(self, project: Optional[Project], store: Store) -> Decision:
        if project is None:
            return _null("Project")
        if project.proj_no < 0:
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid project number.")
        if project.proj_no and store.projects.exists(project.proj_no):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Project {project.proj_no} already exists.")
        if store.projects.exists_with_name(project.name):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Project name '{project.name}' is already used.")
        if not store.departments.exists(project.dept_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                "The specified department does not exist.",
            )
        return self._projects_full(project.dept_no, store) or ACCEPTED

    def validate_update_project(self, proj_no: int, edit: Optional[ProjectEdit], store: Store) -> Decision:
        if edit is None:
            return _null("Project")
        if _bad_id(proj_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid project number.")
        current = store.projects.get_by_id(proj_no)
        if current is None:
            return Decision.reject(ErrorKind.NOT_FOUND, f"Project {proj_no} not found.")
        if store.projects.exists_with_name(edit.name, exclude_proj_no=proj_no):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, f"Project name '{edit.name}' is already used.")
        if not store.departments.exists(edit.dept_no):
            return Decision.reject(
                ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
                "The specified department does not exist.",
            )
        if edit.dept_no != current.dept_no:
            return self._projects_full(edit.dept_no, store) or ACCEPTED
        return ACCEPTED

    def validate_delete_project(self, proj_no: int, store: Store) -> Decision:
        if _bad_id(proj_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid project number.")
        if not store.projects.exists(proj_no):
            return Decision.reject(ErrorKind.NOT_FOUND, f"Project {proj_no} not found.")
        return ACCEPTED

    # Assignments

    def _check_hours(self, hours: Optional[int]) -> Optional[Decision]:
        if hours is None:
            return None
        if hours < 0:
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Hours worked cannot be negative.")
        limit = self._policy.max_hours_per_assignment
        if hours > limit:
            return Decision.reject(ErrorKind.CAPACITY_EXCEEDED, f"Hours worked cannot be more than {limit} hours.")
        return None

    def _check_references(self, emp_no: int, proj_no: int, store: Store) -> Optional[Decision]:
        if not store.employees.exists(emp_no) or not store.projects.exists(proj_no):
            return Decision.reject(ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION, "Employee or Project not found.")
        return None

    def validate_add_assignment(self, assignment: Optional[Assignment], store: Store) -> Decision:
        if assignment is None:
            return _null("Workson")
        if _bad_id(assignment.emp_no, assignment.proj_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid employee or project number.")
        if store.assignments.exists(assignment.emp_no, assignment.proj_no):
            return Decision.reject(ErrorKind.DUPLICATE_KEY, "Workson already exists.")
        failed = self._check_hours(assignment.hours_worked)
        if failed:
            return failed
        limit = self._policy.max_assignments_per_employee
        if store.assignments.count_for_employee(assignment.emp_no) >= limit:
            return Decision.reject(
                ErrorKind.CAPACITY_EXCEEDED,
                f"An employee can be assigned a maximum of {limit} projects.",
            )
        return self._check_references(assignment.emp_no, assignment.proj_no, store) or ACCEPTED

    def validate_update_assignment(
        self, emp_no: int, proj_no: int, edit: Optional[AssignmentEdit], store: Store
    ) -> Decision:
        if edit is None:
            return _null("Workson")
        if _bad_id(emp_no, proj_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid employee or project number.")
        if not store.assignments.exists(emp_no, proj_no):
            return Decision.reject(ErrorKind.NOT_FOUND, "Workson not found.")
        failed = self._check_references(emp_no, proj_no, store)
        if failed:
            return failed
        return self._check_hours(edit.hours_worked) or ACCEPTED

    def validate_delete_assignment(self, emp_no: int, proj_no: int, store: Store) -> Decision:
        if _bad_id(emp_no, proj_no):
            return Decision.reject(ErrorKind.INVALID_ARGUMENT, "Invalid employee or project number.")
        if not store.assignments.exists(emp_no, proj_no):
            return Decision.reject(ErrorKind.NOT_FOUND, "Workson not found.")
        return ACCEPTED
