from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Loại lỗi trả về trong kết quả thao tác (không ném ra ngoài service)."""

    DUPLICATE_KEY = "DuplicateKey"
    NOT_FOUND = "NotFound"
    INVALID_FORMAT = "InvalidFormat"
    MISSING_INPUT = "MissingInput"
    BACKING_STORE_FAILURE = "BackingStoreFailure"


class TableBackend(str, Enum):
    MYSQL = "mysql"
    GOOGLE_SHEETS = "google_sheets"


class PhotoBackend(str, Enum):
    LOCAL = "local"
    GOOGLE_DRIVE = "google_drive"
