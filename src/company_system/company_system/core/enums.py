from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Why a proposed mutation was rejected."""

    NULL_INPUT = "NullInput"
    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    NOT_FOUND = "NotFound"
    DUPLICATE_KEY = "DuplicateKey"
    REFERENTIAL_INTEGRITY_VIOLATION = "ReferentialIntegrityViolation"
    CAPACITY_EXCEEDED = "CapacityExceeded"
    INVALID_ARGUMENT = "InvalidArgument"


class Sex(str, Enum):
    """Employee sex as stored in the employee table."""

    MALE = "Male"
    FEMALE = "Female"
