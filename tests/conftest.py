from __future__ import annotations

from typing import Any, Sequence

import pytest

from employee_records.container import build_container
from employee_records.core.constants import EMPLOYEE_HEADERS
from employee_records.core.exceptions import BackingStoreError
from employee_records.employees.repository import EmployeeSheetRepository
from employee_records.employees.service import EmployeeService
from employee_records.photos.service import PhotoService


class FakeTable:
    """In-memory spreadsheet: ``rows[0]`` is row 1."""

    def __init__(self, rows: Sequence[Sequence[Any]] = ()):
        self.rows: list[list[Any]] = [list(r) for r in rows]
        self.writes: list[tuple] = []
        self.formatted = 0
        self.fail_with: Exception | None = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _ensure(self, row: int, num_cols: int) -> None:
        while len(self.rows) < row:
            self.rows.append([])
        r = self.rows[row - 1]
        r.extend([""] * (num_cols - len(r)))

    def get_values(self, row, col, num_rows, num_cols):
        self._check()
        out = []
        for i in range(row, row + num_rows):
            src = self.rows[i - 1] if i <= len(self.rows) else []
            out.append([src[c - 1] if c <= len(src) else "" for c in range(col, col + num_cols)])
        return out

    def set_values(self, row, col, values):
        self._check()
        self.writes.append(("set", row, col, [list(v) for v in values]))
        for offset, cells in enumerate(values):
            self._ensure(row + offset, col + len(cells) - 1)
            for j, v in enumerate(cells):
                self.rows[row + offset - 1][col - 1 + j] = v

    def clear(self, row, col, num_rows, num_cols):
        self._check()
        self.writes.append(("clear", row, col, num_rows, num_cols))
        for i in range(row, min(row + num_rows, len(self.rows) + 1)):
            r = self.rows[i - 1]
            for c in range(col, min(col + num_cols, len(r) + 1)):
                r[c - 1] = ""

    def append_row(self, values):
        self._check()
        self.writes.append(("append", list(values)))
        last = self.last_row()
        del self.rows[last:]
        self.rows.append(list(values))

    def delete_row(self, row):
        self._check()
        self.writes.append(("delete", row))
        if row <= len(self.rows):
            del self.rows[row - 1]

    def last_row(self):
        self._check()
        for i in range(len(self.rows), 0, -1):
            if any(v not in (None, "") for v in self.rows[i - 1]):
                return i
        return 0

    def format_header(self, num_cols):
        self.formatted += 1

    def data_rows(self):
        return [list(r) for r in self.rows[1 : self.last_row()]]


class FakeFileStore:
    def __init__(self, folders: dict[str, list[str]] | None = None):
        self.folders: dict[str, list[str]] = folders or {}
        self.files: dict[str, dict] = {}
        self.created_folders: list[str] = []
        self._next_id = 1
        self.fail_with: Exception | None = None

    def _new_id(self, prefix: str) -> str:
        fid = f"{prefix}{self._next_id}"
        self._next_id += 1
        return fid

    def find_folders(self, name):
        return list(self.folders.get(name, []))

    def create_folder(self, name):
        fid = self._new_id("folder-")
        self.folders.setdefault(name, []).append(fid)
        self.created_folders.append(name)
        return fid

    def create_file(self, folder_id, filename, mime_type, data):
        if self.fail_with is not None:
            raise self.fail_with
        fid = self._new_id("file-")
        self.files[fid] = {"folder": folder_id, "name": filename, "mime": mime_type, "data": data}
        return fid

    def view_url(self, file_id):
        return f"https://drive.google.com/uc?export=view&id={file_id}"


class Settings:
    SECRET_KEY = "test-secret"
    DEBUG = False
    TESTING = True
    TABLE_BACKEND = "mysql"
    PHOTO_BACKEND = "local"
    PHOTO_FOLDER_NAME = "Employee Photos"


@pytest.fixture
def table():
    return FakeTable([list(EMPLOYEE_HEADERS)])


@pytest.fixture
def files():
    return FakeFileStore()


@pytest.fixture
def employee_service(table):
    return EmployeeService(EmployeeSheetRepository(table))


@pytest.fixture
def photo_service(files):
    return PhotoService(files, folder_name="Employee Photos", clock=lambda: 1700000000.5)


@pytest.fixture
def container(table, files):
    return build_container(settings=Settings, table=table, files=files)


@pytest.fixture
def store_failure():
    return BackingStoreError("quota exceeded")
