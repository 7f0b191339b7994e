from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Assignment, AssignmentEdit


class AssignmentRepository(Protocol):
    def get(self, emp_no: int, proj_no: int) -> Optional[Assignment]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Assignment]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Assignment]:
        raise NotImplementedError

    def exists(self, emp_no: int, proj_no: int) -> bool:
        raise NotImplementedError

    def count_for_employee(self, emp_no: int) -> int:
        raise NotImplementedError

    def insert(self, assignment: Assignment) -> None:
        raise NotImplementedError

    def update(self, emp_no: int, proj_no: int, edit: AssignmentEdit) -> bool:
        raise NotImplementedError

    def delete(self, emp_no: int, proj_no: int) -> bool:
        raise NotImplementedError
