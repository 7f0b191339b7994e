from __future__ import annotations

from datetime import date

import pytest

from src.company_system.company_system.common.datetime_utils import precise_age, year_age
from src.company_system.company_system.common.pagination import parse_page_request
from src.company_system.company_system.core.exceptions import InvalidArgumentError


def test_page_request_offset():
    page = parse_page_request({"pageNumber": "3", "pageSize": "20"})
    assert (page.offset, page.limit) == (40, 20)


@pytest.mark.parametrize(
    "args",
    [
        {"pageNumber": "0", "pageSize": "10"},
        {"pageNumber": "1", "pageSize": "0"},
        {"pageNumber": "-2", "pageSize": "10"},
        {"pageNumber": "one", "pageSize": "10"},
        {"pageSize": "10"},
    ],
)
def test_page_request_rejects_bad_values(args):
    with pytest.raises(InvalidArgumentError):
        parse_page_request(args)


def test_year_age_ignores_month_and_day():
    assert year_age(date(1964, 12, 31), date(2024, 1, 1)) == 60


def test_precise_age(fixed_today):
    assert precise_age(date(2000, 6, 15), fixed_today) == 24
    assert precise_age(date(2000, 6, 16), fixed_today) == 23
