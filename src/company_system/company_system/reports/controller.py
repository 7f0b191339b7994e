from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import date_field, optional_int_field, to_json
from ..container import Container
from ..core.enums import Sex
from ..core.exceptions import InvalidArgumentError


def _list_arg(name: str) -> Optional[list[str]]:
    raw = request.args.get(name)
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]


def _sex_arg() -> Optional[Sex]:
    raw = request.args.get("sex")
    if not raw:
        return None
    try:
        return Sex(raw.strip().capitalize())
    except ValueError:
        raise InvalidArgumentError("'sex' must be Male or Female.")


def register(app: Flask, container: Container) -> None:
    reports = container.report_service
    prefix = "/api/v1/reports"

    @app.route(f"{prefix}/residency", endpoint="report_residency")
    def report_residency():
        return jsonify(to_json(reports.residency(_list_arg("countries"))))

    @app.route(f"{prefix}/born-between", endpoint="report_born_between")
    def report_born_between():
        args = request.args
        return jsonify(to_json(reports.born_between(date_field(args, "start"), date_field(args, "end"))))

    @app.route(f"{prefix}/by-sex-born-after", endpoint="report_by_sex_born_after")
    def report_by_sex_born_after():
        return jsonify(to_json(reports.by_sex_born_after(_sex_arg(), date_field(request.args, "bornAfter"))))

    @app.route(f"{prefix}/managers", endpoint="report_managers")
    def report_managers():
        return jsonify(to_json(reports.managers(_sex_arg())))

    @app.route(f"{prefix}/non-managers", endpoint="report_non_managers")
    def report_non_managers():
        return jsonify(to_json(reports.non_managers()))

    @app.route(f"{prefix}/residual-roles", endpoint="report_residual_roles")
    def report_residual_roles():
        return jsonify(to_json(reports.residual_roles()))

    @app.route(f"{prefix}/department-headcount", endpoint="report_department_headcount")
    def report_department_headcount():
        return jsonify(to_json(reports.department_headcount(optional_int_field(request.args, "threshold"))))

    @app.route(f"{prefix}/department-contacts", endpoint="report_department_contacts")
    def report_department_contacts():
        return jsonify(to_json(reports.department_contacts(optional_int_field(request.args, "deptNo"))))

    @app.route(f"{prefix}/retirement", endpoint="report_retirement")
    def report_retirement():
        return jsonify(to_json(reports.retirement_eligible(date_field(request.args, "today"))))

    @app.route(f"{prefix}/managers-retiring", endpoint="report_managers_retiring")
    def report_managers_retiring():
        return jsonify(to_json(reports.managers_retiring(date_field(request.args, "today"))))

    @app.route(f"{prefix}/female-manager-count", endpoint="report_female_manager_count")
    def report_female_manager_count():
        return jsonify({"count": reports.female_manager_count()})

    @app.route(f"{prefix}/employee-ages", endpoint="report_employee_ages")
    def report_employee_ages():
        return jsonify(to_json(reports.employee_ages(date_field(request.args, "today"))))

    @app.route(f"{prefix}/managers-under-age", endpoint="report_managers_under_age")
    def report_managers_under_age():
        args = request.args
        rows = reports.managers_under_age(optional_int_field(args, "threshold"), date_field(args, "today"))
        return jsonify(to_json(rows))

    @app.route(f"{prefix}/hours-by-employee-project", endpoint="report_hours_by_employee_project")
    def report_hours_by_employee_project():
        return jsonify(to_json(reports.hours_by_employee_project()))

    @app.route(f"{prefix}/hours-by-employee", endpoint="report_hours_by_employee")
    def report_hours_by_employee():
        return jsonify(reports.hours_by_employee())

    @app.route(f"{prefix}/hours-range", endpoint="report_hours_range")
    def report_hours_range():
        return jsonify(to_json(reports.hours_range()))

    @app.route(f"{prefix}/unassigned-projects", endpoint="report_unassigned_projects")
    def report_unassigned_projects():
        return jsonify(to_json(reports.unassigned_projects()))

    @app.route(f"{prefix}/projects-by-department", endpoint="report_projects_by_department")
    def report_projects_by_department():
        return jsonify(to_json(reports.projects_in_departments(_list_arg("deptNames"))))

    @app.route(f"{prefix}/female-managers-projects", endpoint="report_female_managers_projects")
    def report_female_managers_projects():
        return jsonify(to_json(reports.female_managers_with_projects()))
