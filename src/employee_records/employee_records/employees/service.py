from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence, Union

from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateKeyError, NotFoundError
from ..core.result import OperationResult, result_boundary
from .model import Employee
from .repository import EmployeeSheetRepository

logger = logging.getLogger(__name__)

EmployeeInput = Union[Employee, Mapping[str, Any]]


def _as_employee(value: EmployeeInput) -> Employee:
    if isinstance(value, Employee):
        return value
    return Employee.from_dict(value)


class EmployeeService:
    """Use case: manage employee records (list/replace/add/update/delete)."""

    def __init__(self, repo: EmployeeSheetRepository):
        self._repo = repo

    @result_boundary("Failed to load employees")
    def list_all(self) -> OperationResult:
        self._repo.ensure_headers()
        employees = self._repo.list_all()
        return OperationResult.ok(employees=[e.to_dict() for e in employees])

    @result_boundary("Failed to save employees")
    def replace_all(self, employees: Sequence[EmployeeInput]) -> OperationResult:
        records = [_as_employee(e) for e in (employees or [])]
        self._repo.ensure_headers()
        count = self._repo.replace_all(records)
        logger.info("replaced employee table with %d records", count)
        return OperationResult.ok(count=count)

    @result_boundary("Failed to add employee")
    def add(self, employee: EmployeeInput) -> OperationResult:
        employee = _as_employee(employee)
        require_non_empty(employee.emp_id, "Employee ID is required")

        self._repo.ensure_headers()
        if any(e.emp_id == employee.emp_id for e in self._repo.list_all()):
            raise DuplicateKeyError("Employee ID already exists")

        self._repo.append(employee)
        logger.info("added employee %s", employee.emp_id)
        return OperationResult.ok()

    @result_boundary("Failed to update employee")
    def update(self, employee: EmployeeInput, original_emp_id: str) -> OperationResult:
        employee = _as_employee(employee)
        require_non_empty(employee.emp_id, "Employee ID is required")

        self._repo.ensure_headers()
        row = self._repo.find_row(original_emp_id)
        if row is None:
            raise NotFoundError("Employee not found")

        if employee.emp_id != original_emp_id and self._repo.find_row(employee.emp_id) is not None:
            raise DuplicateKeyError("Employee ID already exists")

        self._repo.overwrite_row(row, employee)
        logger.info("updated employee %s (row %d)", employee.emp_id, row)
        return OperationResult.ok()

    @result_boundary("Failed to delete employee")
    def delete(self, emp_id: str) -> OperationResult:
        # No header check on delete.
        row = self._repo.find_row(emp_id)
        if row is None:
            raise NotFoundError("Employee not found")

        self._repo.delete_row(row)
        logger.info("deleted employee %s (row %d)", emp_id, row)
        return OperationResult.ok()
