from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Callable, Iterable, Optional

from ..common.datetime_utils import precise_age, today_local, year_age
from ..core.constants import (
    DEFAULT_BIRTH_RANGE_END,
    DEFAULT_BIRTH_RANGE_START,
    DEFAULT_BORN_AFTER,
    DEFAULT_HEADCOUNT_THRESHOLD,
    DEFAULT_MANAGER_AGE_THRESHOLD,
    DEFAULT_PROJECT_DEPT_NAMES,
    MANAGER_KEYWORD,
    SUPERVISOR_KEYWORD,
)
from ..core.enums import Sex
from ..core.policy import CapacityPolicy
from ..employees.model import Employee
from ..projects.model import Project
from .model import (
    DepartmentHeadcount,
    EmployeeAgeRow,
    EmployeeContactRow,
    EmployeeProjectHours,
    HoursRange,
    ManagerAgeRow,
    ManagerProjectRow,
    ManagerRetirementRow,
    ResidualRoleRow,
    RetirementRow,
    StoreSnapshot,
)


def _by_name(e: Employee):
    return (e.last_name, e.first_name, e.emp_no)


def _by_id(e: Employee):
    return e.emp_no


def _has_manager_title(e: Employee) -> bool:
    return MANAGER_KEYWORD in (e.position or "")


def _manager_ids(snapshot: StoreSnapshot) -> set[int]:
    return {d.manager_emp_no for d in snapshot.departments}


class ReportEngine:
    """Read-only views over a StoreSnapshot.

    Every report is a pure function of the snapshot, the policy and ``today``.
    Results are always sorted explicitly; an empty snapshot yields empty results.
    """

    def __init__(self, policy: CapacityPolicy, *, today_provider: Callable[[], date] = today_local):
        self._policy = policy
        self._today = today_provider

    def _resolve_today(self, today: Optional[date]) -> date:
        return today or self._today()

    # Employee filters

    def residency(self, snapshot: StoreSnapshot, countries: Optional[Iterable[str]] = None) -> list[Employee]:
        names = tuple(countries) if countries is not None else self._policy.residency_countries
        rows = [e for e in snapshot.employees if any(c in (e.address or "") for c in names)]
        return sorted(rows, key=_by_name)

    def born_between(
        self,
        snapshot: StoreSnapshot,
        start: date = DEFAULT_BIRTH_RANGE_START,
        end: date = DEFAULT_BIRTH_RANGE_END,
    ) -> list[Employee]:
        rows = [e for e in snapshot.employees if start <= e.date_of_birth <= end]
        return sorted(rows, key=_by_id)

    def by_sex_born_after(
        self,
        snapshot: StoreSnapshot,
        sex: Sex = Sex.FEMALE,
        born_after: date = DEFAULT_BORN_AFTER,
    ) -> list[Employee]:
        rows = [e for e in snapshot.employees if e.sex == sex and e.date_of_birth > born_after]
        return sorted(rows, key=_by_id)

    def managers(self, snapshot: StoreSnapshot, sex: Optional[Sex] = None) -> list[Employee]:
        ids = _manager_ids(snapshot)
        rows = [e for e in snapshot.employees if e.emp_no in ids and (sex is None or e.sex == sex)]
        return sorted(rows, key=_by_name)

    def non_managers(self, snapshot: StoreSnapshot) -> list[Employee]:
        ids = _manager_ids(snapshot)
        return sorted((e for e in snapshot.employees if e.emp_no not in ids), key=_by_id)

    def residual_roles(self, snapshot: StoreSnapshot) -> list[ResidualRoleRow]:
        rows = []
        for e in self.non_managers(snapshot):
            position = e.position or ""
            if MANAGER_KEYWORD in position or SUPERVISOR_KEYWORD in position:
                continue
            rows.append(
                ResidualRoleRow(
                    first_name=e.first_name,
                    last_name=e.last_name,
                    position=e.position,
                    sex=e.sex,
                    dept_no=e.dept_no,
                )
            )
        return rows

    # Department aggregates

    def department_headcount(
        self, snapshot: StoreSnapshot, threshold: int = DEFAULT_HEADCOUNT_THRESHOLD
    ) -> list[DepartmentHeadcount]:
        counts = Counter(e.dept_no for e in snapshot.employees)
        names = {d.dept_no: d.name for d in snapshot.departments}
        rows = [
            DepartmentHeadcount(dept_no=dept_no, dept_name=names[dept_no], employee_count=n)
            for dept_no, n in counts.items()
            if n > threshold and dept_no in names
        ]
        return sorted(rows, key=lambda r: r.dept_no)

    def department_contacts(self, snapshot: StoreSnapshot, dept_no: Optional[int] = None) -> list[EmployeeContactRow]:
        target = dept_no if dept_no is not None else self._policy.capacity_constrained_dept_no
        rows = sorted((e for e in snapshot.employees if e.dept_no == target), key=_by_id)
        return [EmployeeContactRow(first_name=e.first_name, last_name=e.last_name, address=e.address) for e in rows]

    # Ages

    def retirement_eligible(self, snapshot: StoreSnapshot, today: Optional[date] = None) -> list[RetirementRow]:
        today = self._resolve_today(today)
        limit = self._policy.retirement_age
        rows = []
        for e in sorted(snapshot.employees, key=_by_id):
            age = year_age(e.date_of_birth, today)
            if age < limit:
                continue
            rows.append(
                RetirementRow(
                    emp_no=e.emp_no,
                    first_name=e.first_name,
                    last_name=e.last_name,
                    position=e.position,
                    sex=e.sex,
                    dept_no=e.dept_no,
                    date_of_birth=e.date_of_birth,
                    age=age,
                )
            )
        return rows

    def managers_retiring(self, snapshot: StoreSnapshot, today: Optional[date] = None) -> list[ManagerRetirementRow]:
        addresses = {e.emp_no: e.address for e in snapshot.employees}
        return [
            ManagerRetirementRow(
                first_name=r.first_name,
                last_name=r.last_name,
                position=r.position,
                address=addresses[r.emp_no],
                age=r.age,
            )
            for r in self.retirement_eligible(snapshot, today)
            if MANAGER_KEYWORD in (r.position or "")
        ]

    def female_manager_count(self, snapshot: StoreSnapshot) -> int:
        return sum(1 for e in snapshot.employees if e.sex == Sex.FEMALE and _has_manager_title(e))

    def employee_ages(self, snapshot: StoreSnapshot, today: Optional[date] = None) -> list[EmployeeAgeRow]:
        today = self._resolve_today(today)
        return [
            EmployeeAgeRow(full_name=e.full_name, dept_no=e.dept_no, age=precise_age(e.date_of_birth, today))
            for e in sorted(snapshot.employees, key=_by_id)
        ]

    def managers_under_age(
        self,
        snapshot: StoreSnapshot,
        threshold: int = DEFAULT_MANAGER_AGE_THRESHOLD,
        today: Optional[date] = None,
    ) -> list[ManagerAgeRow]:
        today = self._resolve_today(today)
        rows = []
        for e in sorted(snapshot.employees, key=_by_id):
            if not _has_manager_title(e):
                continue
            age = precise_age(e.date_of_birth, today)
            if age < threshold:
                rows.append(ManagerAgeRow(full_name=e.full_name, position=e.position, date_of_birth=e.date_of_birth, age=age))
        return rows

    # Hours

    def hours_by_employee_project(self, snapshot: StoreSnapshot) -> list[EmployeeProjectHours]:
        employees = {e.emp_no: e for e in snapshot.employees}
        projects = {p.proj_no: p for p in snapshot.projects}
        totals: dict[tuple[int, int], int] = defaultdict(int)
        for a in snapshot.assignments:
            if a.emp_no in employees and a.proj_no in projects:
                totals[(a.emp_no, a.proj_no)] += a.hours_worked or 0
        return [
            EmployeeProjectHours(
                full_name=employees[emp_no].full_name,
                project_name=projects[proj_no].name,
                total_hours=total,
            )
            for (emp_no, proj_no), total in sorted(totals.items())
        ]

    def hours_by_employee(self, snapshot: StoreSnapshot) -> dict[str, int]:
        totals: dict[str, int] = defaultdict(int)
        for row in self.hours_by_employee_project(snapshot):
            totals[row.full_name] += row.total_hours
        return dict(sorted(totals.items()))

    def hours_range(self, snapshot: StoreSnapshot) -> HoursRange:
        hours = [a.hours_worked for a in snapshot.assignments if a.hours_worked is not None]
        if not hours:
            return HoursRange(max_hours=0, min_hours=0)
        return HoursRange(max_hours=max(hours), min_hours=min(hours))

    # Projects

    def unassigned_projects(self, snapshot: StoreSnapshot) -> list[Project]:
        used = {a.proj_no for a in snapshot.assignments}
        return sorted((p for p in snapshot.projects if p.proj_no not in used), key=lambda p: p.proj_no)

    def projects_in_departments(
        self, snapshot: StoreSnapshot, dept_names: Optional[Iterable[str]] = None
    ) -> list[Project]:
        wanted = set(dept_names if dept_names is not None else DEFAULT_PROJECT_DEPT_NAMES)
        dept_nos = {d.dept_no for d in snapshot.departments if d.name in wanted}
        return sorted((p for p in snapshot.projects if p.dept_no in dept_nos), key=lambda p: p.proj_no)

    def female_managers_with_projects(self, snapshot: StoreSnapshot) -> list[ManagerProjectRow]:
        managers = {
            e.emp_no: e for e in snapshot.employees if e.sex == Sex.FEMALE and _has_manager_title(e)
        }
        keyed = []
        for d in snapshot.departments:
            e = managers.get(d.manager_emp_no)
            if e is None:
                continue
            for p in snapshot.projects:
                if p.dept_no != d.dept_no:
                    continue
                keyed.append(
                    (
                        (d.dept_no, p.proj_no),
                        ManagerProjectRow(
                            manager_name=e.full_name,
                            position=e.position,
                            sex=e.sex,
                            project_name=p.name,
                            dept_no=d.dept_no,
                        ),
                    )
                )
        return [row for _, row in sorted(keyed, key=lambda k: k[0])]
