from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Assignment:
    """Domain entity: an employee working on a project (the ``workson`` row)."""

    emp_no: int
    proj_no: int
    date_worked: Optional[date] = None
    hours_worked: Optional[int] = None


@dataclass(frozen=True)
class AssignmentEdit:
    date_worked: Optional[date] = None
    hours_worked: Optional[int] = None
