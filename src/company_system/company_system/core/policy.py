from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .constants import (
    DEFAULT_CONSTRAINED_DEPT_NO,
    DEFAULT_RESIDENCY_COUNTRIES,
    KEY_CONSTRAINED_DEPT,
    KEY_MAX_EMPLOYEES,
    KEY_MAX_HOURS_WORKED,
    KEY_MAX_PROJECTS_PER_DEPT,
    KEY_MAX_PROJECTS_PER_EMPLOYEE,
    KEY_RESIDENCY_COUNTRIES,
    KEY_RETIREMENT_AGE,
)
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class CapacityPolicy:
    """Thresholds injected into the validator and the report engine.

    Built once at startup from settings; never read from globals at decision time.
    """

    max_employees_in_constrained_department: int
    max_projects_per_department: int
    max_hours_per_assignment: int
    max_assignments_per_employee: int
    retirement_age: int
    capacity_constrained_dept_no: int = DEFAULT_CONSTRAINED_DEPT_NO
    residency_countries: tuple[str, ...] = DEFAULT_RESIDENCY_COUNTRIES

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "CapacityPolicy":
        countries = settings.get(KEY_RESIDENCY_COUNTRIES)
        if countries is None:
            residency = DEFAULT_RESIDENCY_COUNTRIES
        else:
            residency = _parse_countries(countries)

        constrained = settings.get(KEY_CONSTRAINED_DEPT)
        return cls(
            max_employees_in_constrained_department=_require_int(settings, KEY_MAX_EMPLOYEES),
            max_projects_per_department=_require_int(settings, KEY_MAX_PROJECTS_PER_DEPT),
            max_hours_per_assignment=_require_int(settings, KEY_MAX_HOURS_WORKED),
            max_assignments_per_employee=_require_int(settings, KEY_MAX_PROJECTS_PER_EMPLOYEE),
            retirement_age=_require_int(settings, KEY_RETIREMENT_AGE),
            capacity_constrained_dept_no=(
                DEFAULT_CONSTRAINED_DEPT_NO if constrained is None else _require_int(settings, KEY_CONSTRAINED_DEPT)
            ),
            residency_countries=residency,
        )


def _require_int(settings: Mapping[str, Any], key: str) -> int:
    if key not in settings or settings[key] is None:
        raise ConfigurationError(f"Missing capacity setting: {key}")
    raw = settings[key]
    try:
        value = int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(f"Capacity setting {key} is not an integer: {raw!r}")
    if value < 0:
        raise ConfigurationError(f"Capacity setting {key} must not be negative: {value}")
    return value


def _parse_countries(raw: Any) -> tuple[str, ...]:
    if isinstance(raw, str):
        items = raw.split(",")
    else:
        items = list(raw)
    countries = tuple(dict.fromkeys(str(c).strip() for c in items if str(c).strip()))
    if not countries:
        raise ConfigurationError(f"Setting {KEY_RESIDENCY_COUNTRIES} must name at least one country")
    return countries
