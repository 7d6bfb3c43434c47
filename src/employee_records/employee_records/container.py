from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .core.constants import (
    DEFAULT_PHOTO_FOLDER_NAME,
    DEFAULT_SHEET_NAME,
    DEFAULT_SHEET_TABLE,
    NUM_COLUMNS,
)
from .core.enums import PhotoBackend, TableBackend
from .database.connection import DBConfig, DatabaseConnection
from .employees.repository import EmployeeSheetRepository
from .employees.service import EmployeeService
from .photos.file_store import FileStore
from .photos.service import PhotoService
from .sheets.table import TabularStore


@dataclass(frozen=True)
class Container:
    table: TabularStore
    files: FileStore

    employees_repo: EmployeeSheetRepository

    employee_service: EmployeeService
    photo_service: PhotoService


def build_table(settings: Any) -> TabularStore:
    backend = TableBackend(getattr(settings, "TABLE_BACKEND", TableBackend.MYSQL.value))

    if backend == TableBackend.GOOGLE_SHEETS:
        from .google.services import build_sheets_service
        from .sheets.google_sheets_table import GoogleSheetsTabularStore

        service = build_sheets_service(getattr(settings, "GOOGLE_CREDENTIALS_FILE", ""))
        return GoogleSheetsTabularStore(
            service,
            spreadsheet_id=str(getattr(settings, "GOOGLE_SPREADSHEET_ID")),
            sheet_name=str(getattr(settings, "GOOGLE_SHEET_NAME", DEFAULT_SHEET_NAME)),
            num_cols=NUM_COLUMNS,
        )

    from .sheets.mysql_table import MySQLTabularStore

    conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
    return MySQLTabularStore(conn, table=str(getattr(settings, "SHEET_TABLE", DEFAULT_SHEET_TABLE)))


def build_file_store(settings: Any) -> FileStore:
    backend = PhotoBackend(getattr(settings, "PHOTO_BACKEND", PhotoBackend.LOCAL.value))

    if backend == PhotoBackend.GOOGLE_DRIVE:
        from .google.services import build_drive_service
        from .photos.google_drive_store import GoogleDriveFileStore

        return GoogleDriveFileStore(build_drive_service(getattr(settings, "GOOGLE_CREDENTIALS_FILE", "")))

    from .photos.local_store import LocalFileStore

    return LocalFileStore(getattr(settings, "PHOTO_ROOT", "instance/photos"))


def build_container(
    *,
    settings: Any,
    table: Optional[TabularStore] = None,
    files: Optional[FileStore] = None,
) -> Container:
    table = table if table is not None else build_table(settings)
    files = files if files is not None else build_file_store(settings)

    employees_repo = EmployeeSheetRepository(table)

    employee_service = EmployeeService(employees_repo)
    photo_service = PhotoService(
        files,
        folder_name=str(getattr(settings, "PHOTO_FOLDER_NAME", DEFAULT_PHOTO_FOLDER_NAME)),
    )

    return Container(
        table=table,
        files=files,
        employees_repo=employees_repo,
        employee_service=employee_service,
        photo_service=photo_service,
    )
