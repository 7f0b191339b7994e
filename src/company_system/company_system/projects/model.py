from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Project:
    """Domain entity: project owned by a department.

    ``proj_no`` of 0 asks the service to assign ``max + 1``.
    """

    proj_no: int
    name: str
    dept_no: int


@dataclass(frozen=True)
class ProjectEdit:
    name: str
    dept_no: int
