from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.pagination import PageRequest
from ..common.validators import require_positive_id
from ..core.exceptions import ConstraintViolationError
from ..database.unit_of_work import UnitOfWork
from ..validation.decision import Decision, OperationResult
from ..validation.validator import ConstraintValidator
from .model import Employee, EmployeeEdit

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employees. Employee numbers come from the store."""

    def __init__(self, uow_factory: Callable[[], UnitOfWork], validator: ConstraintValidator):
        self._uow_factory = uow_factory
        self._validator = validator

    def get(self, emp_no: int) -> Optional[Employee]:
        emp_no = require_positive_id(emp_no, "employee number")
        with self._uow_factory() as uow:
            return uow.employees.get_by_id(emp_no)

    def list(self, page: PageRequest) -> Sequence[Employee]:
        with self._uow_factory() as uow:
            return uow.employees.list_page(offset=page.offset, limit=page.limit)

    def add(self, employee: Optional[Employee]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_add_employee(employee, uow)
                if not decision.accepted:
                    logger.info("Rejected employee add: %s (%s)", decision.reason, decision.kind.value)
                    return OperationResult(decision)
                emp_no = uow.employees.insert(employee)
        except ConstraintViolationError as e:
            logger.warning("Store rejected employee add: %s", e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Added employee %s to department %s", emp_no, employee.dept_no)
        return OperationResult(Decision.accept(), key=emp_no)

    def update(self, emp_no: int, edit: Optional[EmployeeEdit]) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_update_employee(emp_no, edit, uow)
                if not decision.accepted:
                    logger.info("Rejected employee %s update: %s", emp_no, decision.reason)
                    return OperationResult(decision)
                uow.employees.update(emp_no, edit)
        except ConstraintViolationError as e:
            logger.warning("Store rejected employee %s update: %s", emp_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Updated employee %s", emp_no)
        return OperationResult(Decision.accept(), key=emp_no)

    def delete(self, emp_no: int) -> OperationResult:
        try:
            with self._uow_factory() as uow:
                decision = self._validator.validate_delete_employee(emp_no, uow)
                if not decision.accepted:
                    logger.info("Rejected employee %s delete: %s", emp_no, decision.reason)
                    return OperationResult(decision)
                uow.employees.delete(emp_no)
        except ConstraintViolationError as e:
            logger.warning("Store rejected employee %s delete: %s", emp_no, e)
            return OperationResult(Decision.reject(e.kind, str(e)))
        logger.info("Deleted employee %s", emp_no)
        return OperationResult(Decision.accept(), key=emp_no)
