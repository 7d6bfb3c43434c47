from __future__ import annotations

import logging

from googleapiclient.http import MediaInMemoryUpload

from ..core.constants import DRIVE_VIEW_URL
from ..google.services import execute
from .file_store import FileStore

logger = logging.getLogger(__name__)

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace("'", "\\'")


class GoogleDriveFileStore(FileStore):
    """Photo files on Google Drive (Drive v3 API)."""

    def __init__(self, service):
        self._service = service

    def find_folders(self, name: str) -> list[str]:
        query = f"name = '{_quote(name)}' and mimeType = '{FOLDER_MIME_TYPE}' and trashed = false"
        result = execute(
            self._service.files().list(q=query, spaces="drive", fields="files(id, name)", orderBy="createdTime"),
            action="Find Drive folder",
        )
        return [f["id"] for f in result.get("files", []) if f.get("name") == name]

    def create_folder(self, name: str) -> str:
        folder_metadata = {"name": name, "mimeType": FOLDER_MIME_TYPE}
        folder = execute(
            self._service.files().create(body=folder_metadata, fields="id"),
            action="Create Drive folder",
        )
        logger.info("created Drive folder %r (%s)", name, folder.get("id"))
        return folder["id"]

    def create_file(self, folder_id: str, filename: str, mime_type: str, data: bytes) -> str:
        file_metadata = {"name": filename, "parents": [folder_id]}
        media = MediaInMemoryUpload(data, mimetype=mime_type)
        created = execute(
            self._service.files().create(body=file_metadata, media_body=media, fields="id,name"),
            action="Upload photo to Drive",
        )
        return created["id"]

    def view_url(self, file_id: str) -> str:
        return DRIVE_VIEW_URL.format(file_id=file_id)
