from __future__ import annotations

from datetime import date

import pytest

from src.company_system.company_system.core.enums import Sex
from src.company_system.company_system.employees.mysql_employee_repository import _to_employee


def _row(sex):
    return {
        "empno": 7,
        "fname": "Li",
        "lname": "Wei",
        "address": "Shanghai, China",
        "dob": date(1979, 5, 9),
        "sex": sex,
        "position": "Supervisor",
        "deptno": None,
    }


@pytest.mark.parametrize("stored, expected", [("Female", Sex.FEMALE), (" female ", Sex.FEMALE), ("MALE", Sex.MALE)])
def test_stored_sex_is_normalized(stored, expected):
    employee = _to_employee(_row(stored))
    assert employee.sex == expected
    assert employee.dept_no == 0
