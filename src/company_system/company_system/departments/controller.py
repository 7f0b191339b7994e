from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import int_field, json_body, not_found, result_response, str_field, to_json
from ..common.pagination import parse_page_request
from ..container import Container
from .model import Department, DepartmentEdit


def _department_from(data: Optional[dict]) -> Optional[Department]:
    if data is None:
        return None
    return Department(
        dept_no=int_field(data, "deptno", default=0),
        name=str_field(data, "deptname").strip(),
        manager_emp_no=int_field(data, "mgrempno"),
    )


def _edit_from(data: Optional[dict]) -> Optional[DepartmentEdit]:
    if data is None:
        return None
    return DepartmentEdit(name=str_field(data, "deptname").strip(), manager_emp_no=int_field(data, "mgrempno"))


def register(app: Flask, container: Container) -> None:
    service = container.department_service

    @app.route("/api/v1/departments", methods=["GET"], endpoint="list_departments")
    def list_departments():
        page = parse_page_request(request.args)
        return jsonify(to_json(list(service.list(page))))

    @app.route("/api/v1/departments/<int(signed=True):dept_no>", methods=["GET"], endpoint="get_department")
    def get_department(dept_no: int):
        department = service.get(dept_no)
        if department is None:
            return not_found(f"Department {dept_no} not found.")
        return jsonify(to_json(department))

    @app.route("/api/v1/departments", methods=["POST"], endpoint="add_department")
    def add_department():
        return result_response(service.add(_department_from(json_body())), success_status=201)

    @app.route("/api/v1/departments/<int(signed=True):dept_no>", methods=["PUT"], endpoint="update_department")
    def update_department(dept_no: int):
        return result_response(service.update(dept_no, _edit_from(json_body())))

    @app.route("/api/v1/departments/<int(signed=True):dept_no>", methods=["DELETE"], endpoint="delete_department")
    def delete_department(dept_no: int):
        return result_response(service.delete(dept_no))
