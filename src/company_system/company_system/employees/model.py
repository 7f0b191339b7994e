from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import Sex


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee.

    ``emp_no`` is assigned by the store; new employees carry 0 until inserted.
    """

    emp_no: int
    first_name: str
    last_name: str
    address: str
    date_of_birth: date
    sex: Sex
    position: str
    dept_no: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class EmployeeEdit:
    first_name: str
    last_name: str
    address: str
    date_of_birth: date
    sex: Sex
    position: str
    dept_no: int
