from __future__ import annotations

import re
from typing import Any, Optional

from ..core.constants import DEFAULT_PHOTO_BASENAME
from ..core.exceptions import MissingInputError

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def is_blank(value: Any) -> bool:
    """None, empty or whitespace-only; such an ID cell is filler, not a record."""
    return value is None or not str(value).strip()


def require_non_empty(value: Optional[str], message: str) -> str:
    if is_blank(value):
        raise MissingInputError(message)
    return value


def sanitize_filename_part(value: Optional[str], *, fallback: str = DEFAULT_PHOTO_BASENAME) -> str:
    """Replace every character outside ``[A-Za-z0-9_-]`` with ``_``."""
    if not value:
        return fallback
    return _UNSAFE_FILENAME_CHARS.sub("_", value)
