from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Optional, Sequence

from ..common.pagination import PageRequest
from ..common.validators import require_positive_id
from ..core.exceptions import ConstraintViolationError
from ..database.unit_of_work import UnitOfWork
from ..validation.decision import Decision, OperationResult
from ..validation.validator import ConstraintValidator
from .model import Project, ProjectEdit

logger = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, uow_factory: Callable[[], UnitOfWork], validator: ConstraintValidator):
        self._uow_factory = uow_factory
        self._validator = validator

    def get(self, proj_no: int) -> Optional[Project]:
        proj_no = require_positive_id(proj_no, "project number")
        with self._uow_factory() as uow:
            return uow.projects.get_by_id(proj_no)

    def list(self, page: PageRequest) -> Sequence[Project]:
        with self._uow_factory() as uow:
            return uow.projects.list_page(offset=page.offset, limit=page.limit)

    def add(self, project: Optional[Project]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_add_project(project, uow)
                if not decision.accepted:
                    logger.info("Rejected project add: %s (%s)", decision.reason, decision.kind.value)
                    return OperationResult(decision)
                if project.proj_no == 0:
                    project = replace(project, proj_no=uow.projects.next_id())
                proj_no = uow.projects.insert(project)
        except ConstraintViolationError as e:
            logger.warning("Store rejected project add: %s", e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Added project %s (%s) to department %s", proj_no, project.name, project.dept_no)
        return OperationResult(Decision.accept(), key=proj_no)

    def update(self, proj_no: int, edit: Optional[ProjectEdit]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_update_project(proj_no, edit, uow)
                if not decision.accepted:
                    logger.info("Rejected project %s update: %s", proj_no, decision.reason)
                    return OperationResult(decision)
                uow.projects.update(proj_no, edit)
        except ConstraintViolationError as e:
            logger.warning("Store rejected project %s update: %s", proj_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Updated project %s", proj_no)
        return OperationResult(Decision.accept(), key=proj_no)

    def delete(self, proj_no: int) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_delete_project(proj_no, uow)
                if not decision.accepted:
                    logger.info("Rejected project %s delete: %s", proj_no, decision.reason)
                    return OperationResult(decision)
                uow.projects.delete(proj_no)
        except ConstraintViolationError as e:
            logger.warning("Store rejected project %s delete: %s", proj_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Deleted project %s", proj_no)
        return OperationResult(Decision.accept(), key=proj_no)
