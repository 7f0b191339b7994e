from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import ErrorKind
from ..core.exceptions import ConstraintViolationError

_ERRNO_KINDS = {
    errorcode.ER_DUP_ENTRY: ErrorKind.DUPLICATE_KEY,
    errorcode.ER_ROW_IS_REFERENCED_2: ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
    errorcode.ER_NO_REFERENCED_ROW_2: ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION,
    errorcode.ER_BAD_NULL_ERROR: ErrorKind.MISSING_REQUIRED_FIELD,
}


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def fetch_scalar(cur, sql: str, params: Sequence[Any] = ()) -> int:
    cur.execute(sql, tuple(params))
    row = fetchone(cur)
    if not row:
        return 0
    value = next(iter(row.values()))
    return int(value or 0)


def execute_write(cur, sql: str, params: Sequence[Any]) -> int:
    """Run an INSERT/UPDATE/DELETE; store constraint failures surface as ConstraintViolationError."""
    try:
        cur.execute(sql, tuple(params))
    except mysql.connector.IntegrityError as e:
        kind = _ERRNO_KINDS.get(e.errno, ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION)
        raise ConstraintViolationError(kind, e.msg or str(e)) from e
    return cur.rowcount
