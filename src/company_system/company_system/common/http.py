from __future__ import annotations

import dataclasses
import logging
import re
from datetime import date
from enum import Enum
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request

from ..core.enums import ErrorKind
from ..core.exceptions import InvalidArgumentError
from ..validation.decision import OperationResult
from .datetime_utils import parse_optional_date

logger = logging.getLogger(__name__)

_WHOLE_NUMBER = re.compile(r"^\s*[+-]?\d+\s*$")

STATUS_BY_KIND = {
    ErrorKind.NULL_INPUT: 400,
    ErrorKind.MISSING_REQUIRED_FIELD: 400,
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DUPLICATE_KEY: 409,
    ErrorKind.REFERENTIAL_INTEGRITY_VIOLATION: 422,
    ErrorKind.CAPACITY_EXCEEDED: 422,
}


def to_json(value: Any) -> Any:
    """Dataclasses, dates and enums into plain JSON values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_json(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    return value


def json_body() -> Optional[dict]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


def int_field(data: Mapping[str, Any], key: str, *, default: Optional[int] = None) -> int:
    raw = data.get(key)
    if raw is None or raw == "":
        if default is None:
            raise InvalidArgumentError(f"'{key}' is required.")
        return default
    # JSON floats and booleans are not ids or hours; query strings must be whole numbers.
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str) and _WHOLE_NUMBER.match(raw):
        return int(raw)
    raise InvalidArgumentError(f"'{key}' must be an integer.")


def optional_int_field(data: Mapping[str, Any], key: str) -> Optional[int]:
    if data.get(key) in (None, ""):
        return None
    return int_field(data, key)


def str_field(data: Mapping[str, Any], key: str) -> str:
    raw = data.get(key)
    return "" if raw is None else str(raw)


def date_field(data: Mapping[str, Any], key: str) -> Optional[date]:
    try:
        return parse_optional_date(data.get(key))
    except ValueError:
        raise InvalidArgumentError(f"'{key}' must be a date (YYYY-MM-DD).")


def result_response(result: OperationResult, *, success_status: int = 200):
    if result.accepted:
        return jsonify({"success": True, "key": to_json(result.key)}), success_status
    decision = result.decision
    return (
        jsonify({"success": False, "error": decision.kind.value, "message": decision.reason}),
        STATUS_BY_KIND.get(decision.kind, 400),
    )


def not_found(message: str):
    return jsonify({"success": False, "error": ErrorKind.NOT_FOUND.value, "message": message}), 404


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(InvalidArgumentError)
    def invalid_argument(e: InvalidArgumentError):
        return jsonify({"success": False, "error": ErrorKind.INVALID_ARGUMENT.value, "message": str(e)}), 400

    @app.errorhandler(Exception)
    def unexpected(e: Exception):
        # Let Flask render its own HTTP errors (404 route, 405 method).
        code = getattr(e, "code", None)
        if isinstance(code, int) and code < 500:
            return jsonify({"success": False, "message": str(e)}), code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return jsonify({"success": False, "message": str(e)}), 500
        return jsonify({"success": False, "message": "Internal server error"}), 500
