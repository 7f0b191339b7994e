from __future__ import annotations

from datetime import date

import pytest

from src.company_system.company_system.assignments.model import Assignment
from src.company_system.company_system.core.enums import Sex
from src.company_system.company_system.departments.model import Department
from src.company_system.company_system.projects.model import Project
from src.company_system.company_system.reports.engine import ReportEngine
from src.company_system.company_system.reports.model import HoursRange, StoreSnapshot
from tests.fakes import make_employee, make_policy


@pytest.fixture
def engine(fixed_today):
    return ReportEngine(make_policy(), today_provider=lambda: fixed_today)


@pytest.fixture
def snapshot():
    employees = (
        make_employee(1, 1, first_name="Rina", last_name="Wijaya", sex=Sex.FEMALE, position="IT Manager",
                      date_of_birth=date(1960, 12, 31), address="Jakarta, Indonesia"),
        make_employee(2, 5, first_name="Carlos", last_name="Silva", position="HR Manager",
                      date_of_birth=date(1985, 7, 2), address="123 Main St, Brazil"),
        make_employee(3, 7, first_name="Anya", last_name="Petrova", sex=Sex.FEMALE, position="Planning Manager",
                      date_of_birth=date(1992, 11, 20), address="Moscow, Russia"),
        make_employee(4, 1, first_name="Budi", last_name="Santoso", position="Developer",
                      date_of_birth=date(1988, 1, 30), address="123 Main St, France"),
        make_employee(5, 5, first_name="Li", last_name="Wei", sex=Sex.FEMALE, position="Supervisor",
                      date_of_birth=date(1979, 5, 9), address="Shanghai, China"),
        make_employee(6, 1, first_name="Ana", last_name="Silva", sex=Sex.FEMALE, position="Analyst",
                      date_of_birth=date(1995, 3, 3), address="Rio, Brazil"),
    )
    departments = (Department(1, "IT", 1), Department(5, "HR", 2), Department(7, "Planning", 3))
    projects = (Project(1, "Payroll", 1), Project(2, "Recruiting", 5), Project(3, "Annual Plan", 7), Project(4, "Roadmap", 7))
    assignments = (
        Assignment(4, 1, hours_worked=6),
        Assignment(4, 2, hours_worked=10),
        Assignment(5, 2, hours_worked=4),
        Assignment(1, 1, hours_worked=None),
    )
    return StoreSnapshot(departments, employees, projects, assignments)


def _ids(rows):
    return [e.emp_no for e in rows]


def test_residency_filters_by_country_and_orders_by_name(engine, snapshot):
    rows = engine.residency(snapshot)
    # Budi lives in France; Rina in Indonesia.
    assert _ids(rows) == [3, 6, 2, 5]
    assert [(e.last_name, e.first_name) for e in rows] == [
        ("Petrova", "Anya"),
        ("Silva", "Ana"),
        ("Silva", "Carlos"),
        ("Wei", "Li"),
    ]


def test_residency_with_explicit_countries(engine, snapshot):
    assert _ids(engine.residency(snapshot, ["France"])) == [4]


def test_born_between_is_inclusive(engine, snapshot):
    assert _ids(engine.born_between(snapshot)) == [2, 4]
    assert _ids(engine.born_between(snapshot, date(1960, 12, 31), date(1979, 5, 9))) == [1, 5]


def test_by_sex_born_after_is_exclusive(engine, snapshot):
    assert _ids(engine.by_sex_born_after(snapshot)) == [3, 6]
    assert _ids(engine.by_sex_born_after(snapshot, Sex.FEMALE, date(1995, 3, 3))) == []


def test_manager_set_and_complement(engine, snapshot):
    assert _ids(engine.managers(snapshot)) == [3, 2, 1]
    assert _ids(engine.managers(snapshot, Sex.FEMALE)) == [3, 1]
    assert _ids(engine.non_managers(snapshot)) == [4, 5, 6]


def test_residual_roles_drop_supervisors(engine, snapshot):
    rows = engine.residual_roles(snapshot)
    assert [(r.first_name, r.position) for r in rows] == [("Budi", "Developer"), ("Ana", "Analyst")]


def test_department_headcount_threshold(engine):
    employees = [make_employee(i, 1) for i in range(1, 11)] + [make_employee(i, 2) for i in range(11, 22)]
    snap = StoreSnapshot(
        departments=(Department(1, "Ten", 1), Department(2, "Eleven", 11)),
        employees=tuple(employees),
    )
    rows = engine.department_headcount(snap)
    assert [(r.dept_no, r.dept_name, r.employee_count) for r in rows] == [(2, "Eleven", 11)]


def test_department_contacts_defaults_to_constrained_department(engine, snapshot):
    rows = engine.department_contacts(snapshot)
    assert [(r.first_name, r.address) for r in rows] == [
        ("Rina", "Jakarta, Indonesia"),
        ("Budi", "123 Main St, France"),
        ("Ana", "Rio, Brazil"),
    ]
    assert [r.first_name for r in engine.department_contacts(snapshot, 7)] == ["Anya"]


def test_retirement_uses_year_only_age(engine, snapshot, fixed_today):
    # Born 1960-12-31: 63 by the calendar, 64 by year only.
    rows = engine.retirement_eligible(snapshot)
    assert [(r.emp_no, r.age) for r in rows] == [(1, 64)]
    assert engine.retirement_eligible(snapshot, date(2019, 1, 1)) == []


def test_managers_retiring(engine, snapshot):
    rows = engine.managers_retiring(snapshot)
    assert [(r.first_name, r.position, r.address) for r in rows] == [("Rina", "IT Manager", "Jakarta, Indonesia")]


def test_female_manager_count(engine, snapshot):
    # Li is a Supervisor, Ana an Analyst.
    assert engine.female_manager_count(snapshot) == 2


@pytest.mark.parametrize("today, expected", [(date(2024, 6, 14), 23), (date(2024, 6, 15), 24)])
def test_precise_age_birthday_boundary(engine, today, expected):
    snap = StoreSnapshot(employees=(make_employee(1, date_of_birth=date(2000, 6, 15)),))
    assert engine.employee_ages(snap, today)[0].age == expected


def test_precise_age_leap_day_birthday(engine):
    snap = StoreSnapshot(employees=(make_employee(1, date_of_birth=date(2000, 2, 29)),))
    assert engine.employee_ages(snap, date(2023, 2, 27))[0].age == 22
    assert engine.employee_ages(snap, date(2023, 2, 28))[0].age == 23


def test_managers_under_age(engine, snapshot):
    rows = engine.managers_under_age(snapshot)
    assert [(r.full_name, r.age) for r in rows] == [("Carlos Silva", 38), ("Anya Petrova", 31)]


def test_hours_by_employee_project(engine, snapshot):
    rows = engine.hours_by_employee_project(snapshot)
    assert [(r.full_name, r.project_name, r.total_hours) for r in rows] == [
        ("Rina Wijaya", "Payroll", 0),
        ("Budi Santoso", "Payroll", 6),
        ("Budi Santoso", "Recruiting", 10),
        ("Li Wei", "Recruiting", 4),
    ]


def test_hours_by_employee(engine, snapshot):
    assert engine.hours_by_employee(snapshot) == {"Budi Santoso": 16, "Li Wei": 4, "Rina Wijaya": 0}
    assert list(engine.hours_by_employee(snapshot)) == ["Budi Santoso", "Li Wei", "Rina Wijaya"]


def test_hours_range(engine, snapshot):
    assert engine.hours_range(snapshot) == HoursRange(max_hours=10, min_hours=4)
    assert engine.hours_range(StoreSnapshot()) == HoursRange(0, 0)


def test_projects_reports(engine, snapshot):
    assert [p.proj_no for p in engine.unassigned_projects(snapshot)] == [3, 4]
    assert [p.name for p in engine.projects_in_departments(snapshot)] == ["Annual Plan", "Roadmap"]
    assert [p.name for p in engine.projects_in_departments(snapshot, ["IT", "HR"])] == ["Payroll", "Recruiting"]


def test_female_managers_with_projects(engine, snapshot):
    rows = engine.female_managers_with_projects(snapshot)
    assert [(r.manager_name, r.project_name, r.dept_no) for r in rows] == [
        ("Rina Wijaya", "Payroll", 1),
        ("Anya Petrova", "Annual Plan", 7),
        ("Anya Petrova", "Roadmap", 7),
    ]


def test_empty_snapshot_yields_empty_results(engine):
    empty = StoreSnapshot()
    assert engine.residency(empty) == []
    assert engine.department_headcount(empty) == []
    assert engine.hours_by_employee(empty) == {}
    assert engine.female_managers_with_projects(empty) == []


def test_reports_are_repeatable(engine, snapshot):
    assert engine.residency(snapshot) == engine.residency(snapshot)
    assert engine.hours_by_employee_project(snapshot) == engine.hours_by_employee_project(snapshot)
