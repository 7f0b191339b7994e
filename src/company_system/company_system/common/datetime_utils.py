from __future__ import annotations

from datetime import date
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return date.fromisoformat(value.strip())


def parse_optional_date(value: Optional[str]) -> Optional[date]:
    if value is None or not str(value).strip():
        return None
    return parse_iso_date(str(value))


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def year_age(dob: date, today: date) -> int:
    """Age by calendar year only (no month/day correction)."""
    return today.year - dob.year


def birthday_in_year(dob: date, year: int) -> date:
    # 29 Feb falls back to 28 Feb in common years.
    try:
        return dob.replace(year=year)
    except ValueError:
        return dob.replace(year=year, day=28)


def precise_age(dob: date, today: date) -> int:
    """Completed years on ``today``; one less while this year's birthday is still ahead."""
    age = today.year - dob.year
    if today < birthday_in_year(dob, today.year):
        age -= 1
    return age
