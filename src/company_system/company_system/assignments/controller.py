from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import date_field, int_field, json_body, not_found, optional_int_field, result_response, to_json
from ..common.pagination import parse_page_request
from ..container import Container
from .model import Assignment, AssignmentEdit

_ITEM = "/api/v1/workson/<int(signed=True):emp_no>/<int(signed=True):proj_no>"


def _assignment_from(data: Optional[dict]) -> Optional[Assignment]:
    if data is None:
        return None
    return Assignment(
        emp_no=int_field(data, "empno"),
        proj_no=int_field(data, "projno"),
        date_worked=date_field(data, "dateworked"),
        hours_worked=optional_int_field(data, "hoursworked"),
    )


def _edit_from(data: Optional[dict]) -> Optional[AssignmentEdit]:
    if data is None:
        return None
    return AssignmentEdit(date_worked=date_field(data, "dateworked"), hours_worked=optional_int_field(data, "hoursworked"))


def register(app: Flask, container: Container) -> None:
    service = container.assignment_service

    @app.route("/api/v1/workson", methods=["GET"], endpoint="list_workson")
    def list_workson():
        page = parse_page_request(request.args)
        return jsonify(to_json(list(service.list(page))))

    @app.route(_ITEM, methods=["GET"], endpoint="get_workson")
    def get_workson(emp_no: int, proj_no: int):
        assignment = service.get(emp_no, proj_no)
        if assignment is None:
            return not_found("Workson not found.")
        return jsonify(to_json(assignment))

    @app.route("/api/v1/workson", methods=["POST"], endpoint="add_workson")
    def add_workson():
        return result_response(service.add(_assignment_from(json_body())), success_status=201)

    @app.route(_ITEM, methods=["PUT"], endpoint="update_workson")
    def update_workson(emp_no: int, proj_no: int):
        return result_response(service.update(emp_no, proj_no, _edit_from(json_body())))

    @app.route(_ITEM, methods=["DELETE"], endpoint="delete_workson")
    def delete_workson(emp_no: int, proj_no: int):
        return result_response(service.delete(emp_no, proj_no))
