from __future__ import annotations

from typing import Optional, Protocol

from ..assignments.mysql_assignment_repository import MySQLAssignmentRepository
from ..departments.mysql_department_repository import MySQLDepartmentRepository
from ..employees.mysql_employee_repository import MySQLEmployeeRepository
from ..projects.mysql_project_repository import MySQLProjectRepository
from .connection import DatabaseConnection
from .store import Store


class UnitOfWork(Store, Protocol):
    """One transaction over the four entity collections.

    The validator reads through these repositories and the service writes through
    the same ones, so accept-decision and write commit or roll back together.
    """

    def __enter__(self) -> "UnitOfWork":
        raise NotImplementedError

    def __exit__(self, exc_type, exc, tb) -> None:
        raise NotImplementedError


class MySQLUnitOfWork:
    """Write transactions run SERIALIZABLE; read-only ones take a consistent snapshot.

    ``max_execution_ms`` caps every SELECT in the session (MySQL MAX_EXECUTION_TIME),
    which is how long-running report scans get cancelled.
    """

    def __init__(
        self,
        conn_factory: DatabaseConnection,
        *,
        read_only: bool = False,
        max_execution_ms: Optional[int] = None,
    ):
        self._conn_factory = conn_factory
        self._read_only = read_only
        self._max_execution_ms = max_execution_ms
        self._conn = None
        self._cur = None

    def __enter__(self) -> "MySQLUnitOfWork":
        conn = self._conn_factory.connect()
        try:
            cur = conn.cursor(dictionary=True)
            if self._max_execution_ms:
                cur.execute("SET SESSION MAX_EXECUTION_TIME=%s", (int(self._max_execution_ms),))
            if self._read_only:
                conn.start_transaction(consistent_snapshot=True, readonly=True)
            else:
                conn.start_transaction(isolation_level="SERIALIZABLE")
        except Exception:
            conn.close()
            raise

        self._conn = conn
        self._cur = cur
        self.departments = MySQLDepartmentRepository(cur)
        self.employees = MySQLEmployeeRepository(cur)
        self.projects = MySQLProjectRepository(cur)
        self.assignments = MySQLAssignmentRepository(cur)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None and not self._read_only:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            try:
                self._cur.close()
            finally:
                self._conn.close()
                self._conn = None
                self._cur = None
