from __future__ import annotations

import logging
from typing import Sequence

from ..core.constants import EMPLOYEE_HEADERS, HEADER_ROW
from ..sheets.table import TabularStore

logger = logging.getLogger(__name__)


def headers_match(current: Sequence, expected: Sequence[str] = EMPLOYEE_HEADERS) -> bool:
    current = list(current) + [""] * (len(expected) - len(current))
    return all(str(current[i]) == expected[i] for i in range(len(expected)))


def ensure_headers(table: TabularStore, headers: Sequence[str] = EMPLOYEE_HEADERS) -> bool:
    """Rewrite the header row when it differs from ``headers``.

    Only row 1 is touched; data rows keep their positions. Returns True when
    a rewrite happened.
    """
    rows = table.get_values(HEADER_ROW, 1, 1, len(headers))
    current = rows[0] if rows else []
    if headers_match(current, headers):
        return False

    logger.warning("header row %r does not match schema, rewriting", list(current))
    table.set_values(HEADER_ROW, 1, [list(headers)])
    table.format_header(len(headers))
    return True
