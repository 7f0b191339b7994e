from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import date_field, int_field, json_body, not_found, result_response, str_field, to_json
from ..common.pagination import parse_page_request
from ..container import Container
from ..core.enums import Sex
from ..core.exceptions import InvalidArgumentError
from .model import Employee, EmployeeEdit


def _sex_from(data: dict) -> Sex:
    try:
        return Sex(str_field(data, "sex").strip().capitalize())
    except ValueError:
        raise InvalidArgumentError("'sex' must be Male or Female.")


def _edit_from(data: Optional[dict]) -> Optional[EmployeeEdit]:
    if data is None:
        return None
    dob = date_field(data, "dob")
    if dob is None:
        raise InvalidArgumentError("'dob' is required.")
    return EmployeeEdit(
        first_name=str_field(data, "fname").strip(),
        last_name=str_field(data, "lname").strip(),
        address=str_field(data, "address").strip(),
        date_of_birth=dob,
        sex=_sex_from(data),
        position=str_field(data, "position").strip(),
        dept_no=int_field(data, "deptno", default=0),
    )


def _employee_from(data: Optional[dict]) -> Optional[Employee]:
    edit = _edit_from(data)
    if edit is None:
        return None
    return Employee(emp_no=0, **vars(edit))


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    @app.route("/api/v1/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        page = parse_page_request(request.args)
        return jsonify(to_json(list(service.list(page))))

    @app.route("/api/v1/employees/<int(signed=True):emp_no>", methods=["GET"], endpoint="get_employee")
    def get_employee(emp_no: int):
        employee = service.get(emp_no)
        if employee is None:
            return not_found(f"Employee {emp_no} not found.")
        return jsonify(to_json(employee))

    @app.route("/api/v1/employees", methods=["POST"], endpoint="add_employee")
    def add_employee():
        return result_response(service.add(_employee_from(json_body())), success_status=201)

    @app.route("/api/v1/employees/<int(signed=True):emp_no>", methods=["PUT"], endpoint="update_employee")
    def update_employee(emp_no: int):
        return result_response(service.update(emp_no, _edit_from(json_body())))

    @app.route("/api/v1/employees/<int(signed=True):emp_no>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(emp_no: int):
        return result_response(service.delete(emp_no))
