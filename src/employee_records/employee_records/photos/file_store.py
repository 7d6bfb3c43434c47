from __future__ import annotations

from typing import Protocol


class FileStore(Protocol):
    """Giao diện kho tệp (file store) cho ảnh nhân viên.

    Implementations raise ``BackingStoreError`` on I/O failures.
    """

    def find_folders(self, name: str) -> list[str]:
        """IDs of every folder named exactly ``name`` (may be empty)."""
        raise NotImplementedError

    def create_folder(self, name: str) -> str:
        raise NotImplementedError

    def create_file(self, folder_id: str, filename: str, mime_type: str, data: bytes) -> str:
        """Store ``data`` as a new file in ``folder_id`` and return its ID."""
        raise NotImplementedError

    def view_url(self, file_id: str) -> str:
        raise NotImplementedError
