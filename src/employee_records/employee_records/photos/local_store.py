from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from ..core.exceptions import BackingStoreError
from .file_store import FileStore

logger = logging.getLogger(__name__)


class LocalFileStore(FileStore):
    """Photo files under a local directory.

    A folder ID is the folder name; a file ID is ``<folder>/<filename>``.
    """

    def __init__(self, root: str | Path, *, url_prefix: str = "/photos"):
        self._root = Path(root)
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def root(self) -> Path:
        return self._root

    def find_folders(self, name: str) -> list[str]:
        return [name] if (self._root / name).is_dir() else []

    def create_folder(self, name: str) -> str:
        try:
            (self._root / name).mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BackingStoreError(f"Cannot create folder {name!r}: {e}") from e
        logger.info("created photo folder %s", self._root / name)
        return name

    def create_file(self, folder_id: str, filename: str, mime_type: str, data: bytes) -> str:
        target = self._root / folder_id / filename
        try:
            with open(target, "xb") as f:
                f.write(data)
        except OSError as e:
            raise BackingStoreError(f"Cannot write {target}: {e}") from e
        return f"{folder_id}/{filename}"

    def resolve(self, file_id: str) -> Path:
        """Absolute path of ``file_id``; rejects IDs escaping the root."""
        root = self._root.resolve()
        path = (root / file_id).resolve()
        if root not in path.parents:
            raise ValueError(f"Invalid photo id: {file_id!r}")
        return path

    def view_url(self, file_id: str) -> str:
        return f"{self._url_prefix}/{quote(file_id)}"
