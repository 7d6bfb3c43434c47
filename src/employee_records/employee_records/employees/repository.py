from __future__ import annotations

from typing import Optional, Sequence

from ..common.validators import is_blank
from ..core.constants import DATA_START_ROW, NUM_COLUMNS
from ..sheets.table import TabularStore
from .model import Employee
from .schema import ensure_headers


class EmployeeSheetRepository:
    """Row-level access to the employee table.

    Lookups are linear scans of the ``empId`` column, top to bottom. Rows
    with a blank ID cell are filler and never match.
    """

    def __init__(self, table: TabularStore):
        self._table = table

    def ensure_headers(self) -> bool:
        return ensure_headers(self._table)

    def _data_row_count(self) -> int:
        return max(self._table.last_row() - DATA_START_ROW + 1, 0)

    def list_all(self) -> list[Employee]:
        count = self._data_row_count()
        if count == 0:
            return []
        rows = self._table.get_values(DATA_START_ROW, 1, count, NUM_COLUMNS)
        return [Employee.from_row(r) for r in rows if r and not is_blank(r[0])]

    def find_row(self, emp_id: Optional[str]) -> Optional[int]:
        """1-based row index of the first row whose ID cell equals ``emp_id``."""
        if is_blank(emp_id):
            return None
        count = self._data_row_count()
        if count == 0:
            return None
        ids = self._table.get_values(DATA_START_ROW, 1, count, 1)
        for offset, cells in enumerate(ids):
            if not cells or is_blank(cells[0]):
                continue
            if str(cells[0]) == emp_id:
                return DATA_START_ROW + offset
        return None

    def replace_all(self, employees: Sequence[Employee]) -> int:
        count = self._data_row_count()
        if count:
            self._table.clear(DATA_START_ROW, 1, count, NUM_COLUMNS)
        if employees:
            self._table.set_values(DATA_START_ROW, 1, [e.to_row() for e in employees])
        return len(employees)

    def append(self, employee: Employee) -> None:
        self._table.append_row(employee.to_row())

    def overwrite_row(self, row: int, employee: Employee) -> None:
        self._table.set_values(row, 1, [employee.to_row()])

    def delete_row(self, row: int) -> None:
        self._table.delete_row(row)
