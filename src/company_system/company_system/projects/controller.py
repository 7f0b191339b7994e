from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify, request

from ..common.http import int_field, json_body, not_found, result_response, str_field, to_json
from ..common.pagination import parse_page_request
from ..container import Container
from .model import Project, ProjectEdit


def _project_from(data: Optional[dict]) -> Optional[Project]:
    if data is None:
        return None
    return Project(
        proj_no=int_field(data, "projno", default=0),
        name=str_field(data, "projname").strip(),
        dept_no=int_field(data, "deptno"),
    )


def _edit_from(data: Optional[dict]) -> Optional[ProjectEdit]:
    if data is None:
        return None
    return ProjectEdit(name=str_field(data, "projname").strip(), dept_no=int_field(data, "deptno"))


def register(app: Flask, container: Container) -> None:
    service = container.project_service

    @app.route("/api/v1/projects", methods=["GET"], endpoint="list_projects")
    def list_projects():
        page = parse_page_request(request.args)
        return jsonify(to_json(list(service.list(page))))

    @app.route("/api/v1/projects/<int(signed=True):proj_no>", methods=["GET"], endpoint="get_project")
    def get_project(proj_no: int):
        project = service.get(proj_no)
        if project is None:
            return not_found(f"Project {proj_no} not found.")
        return jsonify(to_json(project))

    @app.route("/api/v1/projects", methods=["POST"], endpoint="add_project")
    def add_project():
        return result_response(service.add(_project_from(json_body())), success_status=201)

    @app.route("/api/v1/projects/<int(signed=True):proj_no>", methods=["PUT"], endpoint="update_project")
    def update_project(proj_no: int):
        return result_response(service.update(proj_no, _edit_from(json_body())))

    @app.route("/api/v1/projects/<int(signed=True):proj_no>", methods=["DELETE"], endpoint="delete_project")
    def delete_project(proj_no: int):
        return result_response(service.delete(proj_no))
