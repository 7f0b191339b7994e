from __future__ import annotations

from src.company_system.company_system.reports.engine import ReportEngine
from src.company_system.company_system.reports.service import ReportService
from tests.fakes import make_employee


def test_reports_read_one_snapshot_per_call(store, uow, policy, fixed_today):
    store.add_employee(make_employee(1, address="Rua Augusta, Brazil"))
    store.add_employee(make_employee(2, address="Rue de Rivoli, France"))
    service = ReportService(uow, ReportEngine(policy, today_provider=lambda: fixed_today))

    assert [e.emp_no for e in service.residency()] == [1]
    assert service.residency() == service.residency()

    store.add_employee(make_employee(3, address="Mumbai, India"))
    assert [e.emp_no for e in service.residency()] == [1, 3]


def test_snapshot_copies_all_collections(store, uow, policy):
    store.add_employee(make_employee(1))
    store.add_department(1, "IT", 1)
    store.add_project(1, "Payroll", 1)
    store.add_assignment(1, 1, 5)

    snap = ReportService(uow, ReportEngine(policy)).snapshot()

    assert (len(snap.departments), len(snap.employees), len(snap.projects), len(snap.assignments)) == (1, 1, 1, 1)


def test_service_fills_report_defaults(store, uow, policy):
    store.add_employee(make_employee(1))
    store.add_department(1, "IT", 1)
    store.add_project(1, "Payroll", 1)
    store.add_project(2, "Roadmap", 1)
    store.add_assignment(1, 1, 5)
    service = ReportService(uow, ReportEngine(policy))

    assert service.hours_range().max_hours == 5
    assert [p.proj_no for p in service.unassigned_projects()] == [2]
    assert service.department_headcount() == []
    assert service.projects_in_departments() == []
