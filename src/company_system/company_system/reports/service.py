from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Iterable, Optional

from ..core.enums import Sex
from ..database.unit_of_work import UnitOfWork
from .engine import ReportEngine
from .model import StoreSnapshot

logger = logging.getLogger(__name__)


class ReportService:
    """Use case: read reports.

    Each call reads one snapshot inside a read-only unit of work, then hands it to the engine.
    """

    def __init__(self, uow_factory: Callable[[], UnitOfWork], engine: ReportEngine):
        self._uow_factory = uow_factory
        self._engine = engine

    def snapshot(self) -> StoreSnapshot:
        with self._uow_factory() as uow:
            snap = StoreSnapshot(
                departments=tuple(uow.departments.list_all()),
                employees=tuple(uow.employees.list_all()),
                projects=tuple(uow.projects.list_all()),
                assignments=tuple(uow.assignments.list_all()),
            )
        logger.debug(
            "Loaded snapshot: %s departments, %s employees, %s projects, %s assignments",
            len(snap.departments),
            len(snap.employees),
            len(snap.projects),
            len(snap.assignments),
        )
        return snap

    def residency(self, countries: Optional[Iterable[str]] = None):
        return self._engine.residency(self.snapshot(), countries)

    def born_between(self, start: Optional[date] = None, end: Optional[date] = None):
        kwargs = {k: v for k, v in (("start", start), ("end", end)) if v is not None}
        return self._engine.born_between(self.snapshot(), **kwargs)

    def by_sex_born_after(self, sex: Optional[Sex] = None, born_after: Optional[date] = None):
        kwargs = {k: v for k, v in (("sex", sex), ("born_after", born_after)) if v is not None}
        return self._engine.by_sex_born_after(self.snapshot(), **kwargs)

    def managers(self, sex: Optional[Sex] = None):
        return self._engine.managers(self.snapshot(), sex)

    def non_managers(self):
        return self._engine.non_managers(self.snapshot())

    def residual_roles(self):
        return self._engine.residual_roles(self.snapshot())

    def department_headcount(self, threshold: Optional[int] = None):
        if threshold is None:
            return self._engine.department_headcount(self.snapshot())
        return self._engine.department_headcount(self.snapshot(), threshold)

    def department_contacts(self, dept_no: Optional[int] = None):
        return self._engine.department_contacts(self.snapshot(), dept_no)

    def retirement_eligible(self, today: Optional[date] = None):
        return self._engine.retirement_eligible(self.snapshot(), today)

    def managers_retiring(self, today: Optional[date] = None):
        return self._engine.managers_retiring(self.snapshot(), today)

    def female_manager_count(self) -> int:
        return self._engine.female_manager_count(self.snapshot())

    def employee_ages(self, today: Optional[date] = None):
        return self._engine.employee_ages(self.snapshot(), today)

    def managers_under_age(self, threshold: Optional[int] = None, today: Optional[date] = None):
        if threshold is None:
            return self._engine.managers_under_age(self.snapshot(), today=today)
        return self._engine.managers_under_age(self.snapshot(), threshold, today)

    def hours_by_employee_project(self):
        return self._engine.hours_by_employee_project(self.snapshot())

    def hours_by_employee(self) -> dict[str, int]:
        return self._engine.hours_by_employee(self.snapshot())

    def hours_range(self):
        return self._engine.hours_range(self.snapshot())

    def unassigned_projects(self):
        return self._engine.unassigned_projects(self.snapshot())

    def projects_in_departments(self, dept_names: Optional[Iterable[str]] = None):
        return self._engine.projects_in_departments(self.snapshot(), dept_names)

    def female_managers_with_projects(self):
        return self._engine.female_managers_with_projects(self.snapshot())
