from __future__ import annotations

from typing import Optional, Sequence

from ..database.mysql_base import execute_write, fetch_scalar, fetchall, fetchone
from .model import Assignment, AssignmentEdit
from .repository import AssignmentRepository

_COLUMNS = "empno, projno, dateworked, hoursworked"


def _to_assignment(r: dict) -> Assignment:
    hours = r.get("hoursworked")
    return Assignment(
        emp_no=int(r["empno"]),
        proj_no=int(r["projno"]),
        date_worked=r.get("dateworked"),
        hours_worked=int(hours) if hours is not None else None,
    )


class MySQLAssignmentRepository(AssignmentRepository):
    def __init__(self, cur):
        self._cur = cur

    def get(self, emp_no: int, proj_no: int) -> Optional[Assignment]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM workson WHERE empno=%s AND projno=%s", (emp_no, proj_no))
        row = fetchone(self._cur)
        return _to_assignment(row) if row else None

    def list_page(self, *, offset: int, limit: int) -> Sequence[Assignment]:
        self._cur.execute(
            f"SELECT {_COLUMNS} FROM workson ORDER BY empno, projno LIMIT %s OFFSET %s",
            (int(limit), int(offset)),
        )
        return [_to_assignment(r) for r in fetchall(self._cur)]

    def list_all(self) -> Sequence[Assignment]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM workson ORDER BY empno, projno")
        return [_to_assignment(r) for r in fetchall(self._cur)]

    def exists(self, emp_no: int, proj_no: int) -> bool:
        return (
            fetch_scalar(
                self._cur,
                "SELECT COUNT(*) AS n FROM workson WHERE empno=%s AND projno=%s",
                (emp_no, proj_no),
            )
            > 0
        )

    def count_for_employee(self, emp_no: int) -> int:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM workson WHERE empno=%s", (emp_no,))

    def insert(self, assignment: Assignment) -> None:
        execute_write(
            self._cur,
            "INSERT INTO workson(empno, projno, dateworked, hoursworked) VALUES(%s,%s,%s,%s)",
            (assignment.emp_no, assignment.proj_no, assignment.date_worked, assignment.hours_worked),
        )

    def update(self, emp_no: int, proj_no: int, edit: AssignmentEdit) -> bool:
        execute_write(
            self._cur,
            "UPDATE workson SET dateworked=%s, hoursworked=%s WHERE empno=%s AND projno=%s",
            (edit.date_worked, edit.hours_worked, emp_no, proj_no),
        )
        return True

    def delete(self, emp_no: int, proj_no: int) -> bool:
        return (
            execute_write(self._cur, "DELETE FROM workson WHERE empno=%s AND projno=%s", (emp_no, proj_no)) > 0
        )
