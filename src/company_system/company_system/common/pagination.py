from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class PageRequest:
    page_number: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


def parse_page_request(args: Mapping[str, str]) -> PageRequest:
    """Read ``pageNumber``/``pageSize`` query args; both must be integers >= 1."""
    try:
        page_number = int(args.get("pageNumber", ""))
        page_size = int(args.get("pageSize", ""))
    except (TypeError, ValueError):
        raise InvalidArgumentError("Page number and page size must be integers.")
    if page_number < 1 or page_size < 1:
        raise InvalidArgumentError("Page number and page size must be greater than zero.")
    return PageRequest(page_number=page_number, page_size=page_size)
