from __future__ import annotations

from typing import Optional, Sequence

from ..database.mysql_base import execute_write, fetch_scalar, fetchall, fetchone
from .model import Department, DepartmentEdit
from .repository import DepartmentRepository

_COLUMNS = "deptno, deptname, mgrempno"


def _to_department(r: dict) -> Department:
    return Department(dept_no=int(r["deptno"]), name=r["deptname"], manager_emp_no=int(r["mgrempno"]))


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, dept_no: int) -> Optional[Department]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM department WHERE deptno=%s", (dept_no,))
        row = fetchone(self._cur)
        return _to_department(row) if row else None

    def list_page(self, *, offset: int, limit: int) -> Sequence[Department]:
        self._cur.execute(
            f"SELECT {_COLUMNS} FROM department ORDER BY deptno LIMIT %s OFFSET %s",
            (int(limit), int(offset)),
        )
        return [_to_department(r) for r in fetchall(self._cur)]

    def list_all(self) -> Sequence[Department]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM department ORDER BY deptno")
        return [_to_department(r) for r in fetchall(self._cur)]

    def exists(self, dept_no: int) -> bool:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM department WHERE deptno=%s", (dept_no,)) > 0

    def exists_with_name(self, name: str, *, exclude_dept_no: Optional[int] = None) -> bool:
        return (
            fetch_scalar(
                self._cur,
                "SELECT COUNT(*) AS n FROM department WHERE deptname=%s AND deptno<>%s",
                (name, exclude_dept_no or 0),
            )
            > 0
        )

    def exists_with_manager(self, manager_emp_no: int, *, exclude_dept_no: Optional[int] = None) -> bool:
        return (
            fetch_scalar(
                self._cur,
                "SELECT COUNT(*) AS n FROM department WHERE mgrempno=%s AND deptno<>%s",
                (manager_emp_no, exclude_dept_no or 0),
            )
            > 0
        )

    def next_id(self) -> int:
        return fetch_scalar(self._cur, "SELECT COALESCE(MAX(deptno), 0) AS n FROM department") + 1

    def insert(self, department: Department) -> int:
        execute_write(
            self._cur,
            "INSERT INTO department(deptno, deptname, mgrempno) VALUES(%s,%s,%s)",
            (department.dept_no, department.name, department.manager_emp_no),
        )
        return department.dept_no

    def update(self, dept_no: int, edit: DepartmentEdit) -> bool:
        # rowcount stays 0 when values are unchanged, so existence is checked by the caller
        execute_write(
            self._cur,
            "UPDATE department SET deptname=%s, mgrempno=%s WHERE deptno=%s",
            (edit.name, edit.manager_emp_no, dept_no),
        )
        return True

    def delete(self, dept_no: int) -> bool:
        return execute_write(self._cur, "DELETE FROM department WHERE deptno=%s", (dept_no,)) > 0
