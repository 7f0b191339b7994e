from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project, ProjectEdit


class ProjectRepository(Protocol):
    def get_by_id(self, proj_no: int) -> Optional[Project]:
        raise NotImplementedError

    def list_page(self, *, offset: int, limit: int) -> Sequence[Project]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def exists(self, proj_no: int) -> bool:
        raise NotImplementedError

    def exists_with_name(self, name: str, *, exclude_proj_no: Optional[int] = None) -> bool:
        raise NotImplementedError

    def count_in_department(self, dept_no: int) -> int:
        raise NotImplementedError

    def next_id(self) -> int:
        raise NotImplementedError

    def insert(self, project: Project) -> int:
        raise NotImplementedError

    def update(self, proj_no: int, edit: ProjectEdit) -> bool:
        raise NotImplementedError

    def delete(self, proj_no: int) -> bool:
        raise NotImplementedError
