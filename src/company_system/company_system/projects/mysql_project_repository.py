from __future__ import annotations

from typing import Optional, Sequence

from ..database.mysql_base import execute_write, fetch_scalar, fetchall, fetchone
from .model import Project, ProjectEdit
from .repository import ProjectRepository

_COLUMNS = "projno, projname, deptno"


def _to_project(r: dict) -> Project:
    return Project(proj_no=int(r["projno"]), name=r.get("projname") or "", dept_no=int(r["deptno"]))


class MySQLProjectRepository(ProjectRepository):
    def __init__(self, cur):
        self._cur = cur

    def get_by_id(self, proj_no: int) -> Optional[Project]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM project WHERE projno=%s", (proj_no,))
        row = fetchone(self._cur)
        return _to_project(row) if row else None

    def list_page(self, *, offset: int, limit: int) -> Sequence[Project]:
        self._cur.execute(
            f"SELECT {_COLUMNS} FROM project ORDER BY projno LIMIT %s OFFSET %s",
            (int(limit), int(offset)),
        )
        return [_to_project(r) for r in fetchall(self._cur)]

    def list_all(self) -> Sequence[Project]:
        self._cur.execute(f"SELECT {_COLUMNS} FROM project ORDER BY projno")
        return [_to_project(r) for r in fetchall(self._cur)]

    def exists(self, proj_no: int) -> bool:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM project WHERE projno=%s", (proj_no,)) > 0

    def exists_with_name(self, name: str, *, exclude_proj_no: Optional[int] = None) -> bool:
        return (
            fetch_scalar(
                self._cur,
                "SELECT COUNT(*) AS n FROM project WHERE projname=%s AND projno<>%s",
                (name, exclude_proj_no or 0),
            )
            > 0
        )

    def count_in_department(self, dept_no: int) -> int:
        return fetch_scalar(self._cur, "SELECT COUNT(*) AS n FROM project WHERE deptno=%s", (dept_no,))

    def next_id(self) -> int:
        return fetch_scalar(self._cur, "SELECT COALESCE(MAX(projno), 0) AS n FROM project") + 1

    def insert(self, project: Project) -> int:
        execute_write(
            self._cur,
            "INSERT INTO project(projno, projname, deptno) VALUES(%s,%s,%s)",
            (project.proj_no, project.name, project.dept_no),
        )
        return project.proj_no

    def update(self, proj_no: int, edit: ProjectEdit) -> bool:
        execute_write(
            self._cur,
            "UPDATE project SET projname=%s, deptno=%s WHERE projno=%s",
            (edit.name, edit.dept_no, proj_no),
        )
        return True

    def delete(self, proj_no: int) -> bool:
        return execute_write(self._cur, "DELETE FROM project WHERE projno=%s", (proj_no,)) > 0
