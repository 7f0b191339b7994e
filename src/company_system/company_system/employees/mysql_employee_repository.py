from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Sex
from ..database.mysql_base import execute_write, fetch_scalar, fetchall, fetchone
from .model import Employee, EmployeeEdit
from .repository import EmployeeRepository

_COLUMNS = "empno, fname, lname, address, dob, sex, position, deptno"


def _to_employee(r: dict) -> Employee:
    return Employee(
        emp_no=int(r["empno"]),
        first_name=r["fname"],
        last_name=r["lname"],
        address=r.get("address") or "",
        date_of_birth=r["dob"],
        sex=Sex(str(r["sex"]).strip().capitalize()),
        position=r["position"],
        dept_no=int(r.get("deptno") or 0),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, emp_no: int) -> Optional[Employee]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM employee WHERE empno=%s", (emp_no,))
        row = fetchone(self._cur)
        return _to_employee(row) if row else None

    def list_page(self, *, offset: int, limit: int) -> Sequence[Employee]:
        self._cur.execute(
            f"SELECT {_COLUMNS} FROM employee ORDER BY empno LIMIT %s OFFSET %s",
            (int(limit), int(offset)),
        )
        return [_to_employee(r) for r in fetchall(self._cur)]

    def list_all(self) -> Sequence[Employee]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM employee ORDER BY empno")
        return [_to_employee(r) for r in fetchall(self._cur)]

    def exists(self, emp_no: int) -> bool:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM employee WHERE empno=%s", (emp_no,)) > 0

    def count_in_department(self, dept_no: int) -> int:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM employee WHERE deptno=%s", (dept_no,))

    def insert(self, employee: Employee) -> int:
        execute_write(
            self._cur,
            """
            INSERT INTO employee(fname, lname, address, dob, sex, position, deptno)
            VALUES(%s,%s,%s,%s,%s,%s,%s)
            """,
            (
                employee.first_name.strip(),
                employee.last_name.strip(),
                employee.address or "",
                employee.date_of_birth,
                employee.sex.value,
                employee.position.strip(),
                employee.dept_no,
            ),
        )
        return int(self._cur.lastrowid)

    def update(self, emp_no: int, edit: EmployeeEdit) -> bool:
        execute_write(
            self._cur,
            """
            UPDATE employee
            SET fname=%s, lname=%s, address=%s, dob=%s, sex=%s, position=%s, deptno=%s
            WHERE empno=%s
            """,
            (
                edit.first_name.strip(),
                edit.last_name.strip(),
                edit.address or "",
                edit.date_of_birth,
                edit.sex.value,
                edit.position.strip(),
                edit.dept_no,
                emp_no,
            ),
        )
        return True

    def delete(self, emp_no: int) -> bool:
        return execute_write(self._cur, "DELETE FROM employee WHERE empno=%s", (emp_no,)) > 0
