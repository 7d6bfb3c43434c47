from __future__ import annotations

import base64
import binascii
import logging
import re
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.validators import sanitize_filename_part
from ..core.constants import DEFAULT_PHOTO_EXTENSION, DEFAULT_PHOTO_FOLDER_NAME
from ..core.exceptions import InvalidFormatError, MissingInputError
from ..core.result import OperationResult, result_boundary
from .file_store import FileStore

logger = logging.getLogger(__name__)

_DATA_URL = re.compile(r"^data:(image/([A-Za-z0-9.+-]*));base64,(.+)$", re.DOTALL)


@dataclass(frozen=True)
class DecodedImage:
    mime_type: str
    extension: str
    data: bytes


def decode_data_url(payload: Optional[str]) -> DecodedImage:
    """Parse ``data:image/<subtype>;base64,<body>`` into raw bytes."""
    if not payload:
        raise MissingInputError("No image data provided")
    if not isinstance(payload, str):
        raise InvalidFormatError("Invalid image data format")

    match = _DATA_URL.match(payload.strip())
    if not match:
        raise InvalidFormatError("Invalid image data format")

    mime_type, subtype, body = match.groups()
    try:
        data = base64.b64decode(re.sub(r"\s+", "", body), validate=True)
    except (binascii.Error, ValueError):
        raise InvalidFormatError("Invalid image data format")

    return DecodedImage(mime_type=mime_type, extension=subtype or DEFAULT_PHOTO_EXTENSION, data=data)


def photo_filename(emp_id: Optional[str], extension: str, *, millis: int) -> str:
    return f"{sanitize_filename_part(emp_id)}_{millis}.{extension}"


class PhotoService:
    """Use case: store an uploaded employee photo and hand back its reference.

    The returned ``photoId`` is not written to the employee table here; the
    caller attaches it through add/update.
    """

    def __init__(
        self,
        files: FileStore,
        *,
        folder_name: str = DEFAULT_PHOTO_FOLDER_NAME,
        clock: Callable[[], float] = time.time,
    ):
        self._files = files
        self._folder_name = folder_name
        self._clock = clock

    def _folder_id(self) -> str:
        existing = self._files.find_folders(self._folder_name)
        if existing:
            return existing[0]
        return self._files.create_folder(self._folder_name)

    @result_boundary("Failed to upload photo")
    def upload_photo(self, payload: Optional[str], emp_id: Optional[str] = None) -> OperationResult:
        image = decode_data_url(payload)
        filename = photo_filename(emp_id, image.extension, millis=int(self._clock() * 1000))

        photo_id = self._files.create_file(self._folder_id(), filename, image.mime_type, image.data)
        logger.info("stored photo %s as %s", filename, photo_id)
        return OperationResult.ok(photoId=photo_id, viewUrl=self._files.view_url(photo_id))
