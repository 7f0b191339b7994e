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
from .model import Department, DepartmentEdit

logger = logging.getLogger(__name__)


class DepartmentService:
    """Use case: manage departments.

    Validation and the write share one unit of work; a store constraint hit during
    the write becomes a rejection, same as a validator rejection.
    """

    def __init__(self, uow_factory: Callable[[], UnitOfWork], validator: ConstraintValidator):
        self._uow_factory = uow_factory
        self._validator = validator

    def get(self, dept_no: int) -> Optional[Department]:
        dept_no = require_positive_id(dept_no, "department number")
        with self._uow_factory() as uow:
            return uow.departments.get_by_id(dept_no)

    def list(self, page: PageRequest) -> Sequence[Department]:
        with self._uow_factory() as uow:
            return uow.departments.list_page(offset=page.offset, limit=page.limit)

    def add(self, department: Optional[Department]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_add_department(department, uow)
                if not decision.accepted:
                    logger.info("Rejected department add: %s (%s)", decision.reason, decision.kind.value)
                    return OperationResult(decision)
                if department.dept_no == 0:
                    department = replace(department, dept_no=uow.departments.next_id())
                dept_no = uow.departments.insert(department)
        except ConstraintViolationError as e:
            logger.warning("Store rejected department add: %s", e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Added department %s (%s)", dept_no, department.name)
        return OperationResult(Decision.accept(), key=dept_no)

    def update(self, dept_no: int, edit: Optional[DepartmentEdit]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_update_department(dept_no, edit, uow)
                if not decision.accepted:
                    logger.info("Rejected department %s update: %s", dept_no, decision.reason)
                    return OperationResult(decision)
                uow.departments.update(dept_no, edit)
        except ConstraintViolationError as e:
            logger.warning("Store rejected department %s update: %s", dept_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Updated department %s", dept_no)
        return OperationResult(Decision.accept(), key=dept_no)

    def delete(self, dept_no: int) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_delete_department(dept_no, uow)
                if not decision.accepted:
                    logger.info("Rejected department %s delete: %s", dept_no, decision.reason)
                    return OperationResult(decision)
                uow.departments.delete(dept_no)
        except ConstraintViolationError as e:
            logger.warning("Store rejected department %s delete: %s", dept_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Deleted department %s", dept_no)
        return OperationResult(Decision.accept(), key=dept_no)
