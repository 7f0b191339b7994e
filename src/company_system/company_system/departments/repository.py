from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Department, DepartmentEdit


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    Note (DIP): services and the validator depend on this interface, never on a concrete DB.
    """

    def get_by_id(self, dept_no: int) -> Optional[Department]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Department]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def exists(self, dept_no: int) -> bool:
        raise NotImplementedError

    def exists_with_name(self, name: str, *, exclude_dept_no: Optional[int] = None) -> bool:
        raise NotImplementedError

    def exists_with_manager(self, manager_emp_no: int, *, exclude_dept_no: Optional[int] = None) -> bool:
        raise NotImplementedError

    def next_id(self) -> int:
        """Highest dept_no + 1 (1 when empty)."""

        raise NotImplementedError

    def insert(self, department: Department) -> int:
        raise NotImplementedError

    def update(self, dept_no: int, edit: DepartmentEdit) -> bool:
        raise NotImplementedError

    def delete(self, dept_no: int) -> bool:
        raise NotImplementedError
