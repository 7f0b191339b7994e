from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.pagination import PageRequest
from ..common.validators import require_positive_id
from ..core.exceptions import ConstraintViolationError
from ..database.unit_of_work import UnitOfWork
from ..validation.decision import Decision, OperationResult
from ..validation.validator import ConstraintValidator
from .model import Assignment, AssignmentEdit

logger = logging.getLogger(__name__)


class AssignmentService:
    """Use case: assign employees to projects and record their hours."""

    def __init__(self, uow_factory: Callable[[], UnitOfWork], validator: ConstraintValidator):
        self._uow_factory = uow_factory
        self._validator = validator

    def get(self, emp_no: int, proj_no: int) -> Optional[Assignment]:
        emp_no = require_positive_id(emp_no, "employee number")
        proj_no = require_positive_id(proj_no, "project number")
        with self._uow_factory() as uow:
            return uow.assignments.get(emp_no, proj_no)

    def list(self, page: PageRequest) -> Sequence[Assignment]:
        with self._uow_factory() as uow:
            return uow.assignments.list_page(offset=page.offset, limit=page.limit)

    def add(self, assignment: Optional[Assignment]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_add_assignment(assignment, uow)
                if not decision.accepted:
                    logger.info("Rejected workson add: %s (%s)", decision.reason, decision.kind.value)
                    return OperationResult(decision)
                uow.assignments.insert(assignment)
        except ConstraintViolationError as e:
            logger.warning("Store rejected workson add: %s", e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        key = (assignment.emp_no, assignment.proj_no)
        logger.info("Assigned employee %s to project %s", *key)
        return OperationResult(Decision.accept(), key=key)

    def update(self, emp_no: int, proj_no: int, edit: Optional[AssignmentEdit]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_update_assignment(emp_no, proj_no, edit, uow)
                if not decision.accepted:
                    logger.info("Rejected workson (%s, %s) update: %s", emp_no, proj_no, decision.reason)
                    return OperationResult(decision)
                uow.assignments.update(emp_no, proj_no, edit)
        except ConstraintViolationError as e:
            logger.warning("Store rejected workson (%s, %s) update: %s", emp_no, proj_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Updated workson (%s, %s)", emp_no, proj_no)
        return OperationResult(Decision.accept(), key=(emp_no, proj_no))

    def delete(self, emp_no: int, proj_no: int) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_delete_assignment(emp_no, proj_no, uow)
                if not decision.accepted:
                    logger.info("Rejected workson (%s, %s) delete: %s", emp_no, proj_no, decision.reason)
                    return OperationResult(decision)
                uow.assignments.delete(emp_no, proj_no)
        except ConstraintViolationError as e:
            logger.warning("Store rejected workson (%s, %s) delete: %s", emp_no, proj_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Deleted workson (%s, %s)", emp_no, proj_no)
        return OperationResult(Decision.accept(), key=(emp_no, proj_no))
