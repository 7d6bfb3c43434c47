"""Google API client construction (Sheets v4, Drive v3)."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..core.exceptions import BackingStoreError

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
DRIVE_SCOPES = ["https://www.googleapis.com/auth/drive.file"]

GOOGLE_API_ERRORS = (HttpError, GoogleAuthError, OSError)


def load_credentials(credentials_path: str, scopes: Iterable[str]):
    """Service-account credentials from a JSON key file."""
    if not credentials_path:
        raise ValueError("GOOGLE_CREDENTIALS_FILE is not configured")
    return service_account.Credentials.from_service_account_file(credentials_path, scopes=list(scopes))


def build_sheets_service(credentials_path: str, *, credentials=None):
    creds = credentials or load_credentials(credentials_path, SHEETS_SCOPES)
    return build("sheets", "v4", credentials=creds, cache_discovery=False)


def build_drive_service(credentials_path: str, *, credentials=None):
    creds = credentials or load_credentials(credentials_path, DRIVE_SCOPES)
    return build("drive", "v3", credentials=creds, cache_discovery=False)


def execute(request, *, action: Optional[str] = None):
    """Run a googleapiclient request, turning API/auth/network faults into ``BackingStoreError``."""
    try:
        return request.execute()
    except GOOGLE_API_ERRORS as e:
        label = action or "Google API request"
        logger.warning("%s failed: %s", label, e)
        raise BackingStoreError(f"{label} failed: {e}") from e
