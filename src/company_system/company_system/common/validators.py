from __future__ import annotations

from typing import Optional

from ..core.exceptions import InvalidArgumentError


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def require_positive_id(value: int, field_name: str) -> int:
    if value is None or int(value) <= 0:
        raise InvalidArgumentError(f"Invalid {field_name}.")
    return int(value)
