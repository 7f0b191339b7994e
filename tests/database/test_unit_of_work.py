from __future__ import annotations

import mysql.connector
import pytest

from src.company_system.company_system.core.enums import ErrorKind
from src.company_system.company_system.core.exceptions import ConstraintViolationError
from src.company_system.company_system.database.bootstrap import _iter_sql_statements
from src.company_system.company_system.database.connection import DBConfig
from src.company_system.company_system.database.mysql_base import execute_write
from src.company_system.company_system.database.unit_of_work import MySQLUnitOfWork


class FakeCursor:
    def __init__(self, error=None):
        self.executed = []
        self.rowcount = 1
        self.closed = False
        self._error = error

    def execute(self, sql, params=()):
        self.executed.append((sql, params))
        if self._error is not None:
            raise self._error

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self):
        self.cur = FakeCursor()
        self.started = None
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        assert dictionary
        return self.cur

    def start_transaction(self, **kwargs):
        self.started = kwargs

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnectionFactory:
    def __init__(self):
        self.conn = FakeConnection()

    def connect(self):
        return self.conn


def test_write_unit_commits_on_success():
    factory = FakeConnectionFactory()
    with MySQLUnitOfWork(factory) as uow:
        assert uow.departments is not None
    conn = factory.conn
    assert conn.started == {"isolation_level": "SERIALIZABLE"}
    assert conn.committed and not conn.rolled_back
    assert conn.closed and conn.cur.closed


def test_write_unit_rolls_back_on_error():
    factory = FakeConnectionFactory()
    with pytest.raises(RuntimeError):
        with MySQLUnitOfWork(factory):
            raise RuntimeError("boom")
    assert factory.conn.rolled_back
    assert not factory.conn.committed


def test_read_only_unit_sets_timeout_and_never_commits():
    factory = FakeConnectionFactory()
    with MySQLUnitOfWork(factory, read_only=True, max_execution_ms=2500):
        pass
    conn = factory.conn
    assert conn.started == {"consistent_snapshot": True, "readonly": True}
    assert conn.cur.executed == [("SET SESSION MAX_EXECUTION_TIME=%s", (2500,))]
    assert conn.rolled_back and not conn.committed


@pytest.mark.parametrize(
    "errno, kind",
    [
        (1062, ErrorKind.DUPLICATE_KEY),
        (1451, ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION),
        (1452, ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION),
        (1048, ErrorKind.MISSING_REQUIRED_FIELD),
    ],
)
def test_integrity_errors_map_to_kinds(errno, kind):
    cur = FakeCursor(error=mysql.connector.IntegrityError(msg="constraint", errno=errno))
    with pytest.raises(ConstraintViolationError) as info:
        execute_write(cur, "INSERT INTO department VALUES (%s)", (1,))
    assert info.value.kind == kind


def test_sql_splitter_keeps_quoted_semicolons():
    sql = "-- comment line\nINSERT INTO t VALUES ('a;b');\n\nSELECT 1;"
    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", "SELECT 1"]


def test_db_config_from_settings_mapping():
    config = DBConfig.from_mapping({"host": "db", "port": "3307", "user": "app", "database": "company_db_test"})
    assert (config.host, config.port, config.user, config.password) == ("db", 3307, "app", "")
    assert config.database == "company_db_test"
