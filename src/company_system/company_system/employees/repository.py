from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeEdit


class EmployeeRepository(Protocol):
    def get_by_id(self, emp_no: int) -> Optional[Employee]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def exists(self, emp_no: int) -> bool:
        raise NotImplementedError

    def count_in_department(self, dept_no: int) -> int:
        raise NotImplementedError

    def insert(self, employee: Employee) -> int:
        """Insert and return the store-assigned emp_no."""

        raise NotImplementedError

    def update(self, emp_no: int, edit: EmployeeEdit) -> bool:
        raise NotImplementedError

    def delete(self, emp_no: int) -> bool:
        raise NotImplementedError
