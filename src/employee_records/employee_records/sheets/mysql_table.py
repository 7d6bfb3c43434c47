from __future__ import annotations

import logging
from typing import Any, Sequence

from ..core.constants import NUM_COLUMNS
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, quote_identifier
from .table import TabularStore

logger = logging.getLogger(__name__)


def _col_names(col: int, num_cols: int) -> list[str]:
    return [f"c{i}" for i in range(col, col + num_cols)]


class MySQLTabularStore(TabularStore):
    """Spreadsheet-like table kept in MySQL.

    One SQL row per sheet row: ``row_no`` is the 1-based row position, cells
    live in ``c1..cN``. A row whose cells are all NULL does not exist.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, table: str, num_cols: int = NUM_COLUMNS):
        self._conn_factory = conn_factory
        self._table = quote_identifier(table)
        self._num_cols = int(num_cols)

    def _check_cols(self, col: int, num_cols: int) -> None:
        if col < 1 or col + num_cols - 1 > self._num_cols:
            raise ValueError(f"Column range {col}..{col + num_cols - 1} outside 1..{self._num_cols}")

    def get_values(self, row: int, col: int, num_rows: int, num_cols: int) -> list[list[Any]]:
        self._check_cols(col, num_cols)
        if num_rows <= 0:
            return []
        cols = _col_names(col, num_cols)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT row_no, {", ".join(cols)}
                FROM {self._table}
                WHERE row_no BETWEEN %s AND %s
                ORDER BY row_no
                """,
                (row, row + num_rows - 1),
            )
            rows = fetchall(cur)

        by_no = {int(r["row_no"]): r for r in rows}
        out: list[list[Any]] = []
        for row_no in range(row, row + num_rows):
            r = by_no.get(row_no)
            out.append([("" if r is None or r.get(c) is None else r[c]) for c in cols])
        return out

    def set_values(self, row: int, col: int, values: Sequence[Sequence[Any]]) -> None:
        if not values:
            return
        num_cols = max(len(v) for v in values)
        self._check_cols(col, num_cols)
        cols = _col_names(col, num_cols)
        placeholders = ", ".join(["%s"] * (num_cols + 1))
        updates = ", ".join(f"{c}=VALUES({c})" for c in cols)

        params = []
        for offset, cells in enumerate(values):
            cells = list(cells) + [""] * (num_cols - len(cells))
            params.append((row + offset, *cells))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                f"""
                INSERT INTO {self._table}(row_no, {", ".join(cols)})
                VALUES({placeholders})
                ON DUPLICATE KEY UPDATE {updates}
                """,
                params,
            )

    def clear(self, row: int, col: int, num_rows: int, num_cols: int) -> None:
        self._check_cols(col, num_cols)
        if num_rows <= 0:
            return
        cols = _col_names(col, num_cols)
        all_null = " AND ".join(f"c{i} IS NULL" for i in range(1, self._num_cols + 1))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                UPDATE {self._table}
                SET {", ".join(f"{c}=NULL" for c in cols)}
                WHERE row_no BETWEEN %s AND %s
                """,
                (row, row + num_rows - 1),
            )
            cur.execute(f"DELETE FROM {self._table} WHERE {all_null}")

    def append_row(self, values: Sequence[Any]) -> None:
        values = list(values)
        self._check_cols(1, len(values))
        cols = _col_names(1, len(values))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COALESCE(MAX(row_no), 0) AS last_row FROM {self._table}")
            row = fetchone(cur)
            next_row = int(row["last_row"]) + 1 if row else 1
            cur.execute(
                f"INSERT INTO {self._table}(row_no, {', '.join(cols)}) VALUES({', '.join(['%s'] * (len(cols) + 1))})",
                (next_row, *values),
            )

    def delete_row(self, row: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {self._table} WHERE row_no=%s", (row,))
            # ORDER BY keeps the primary key free of collisions while shifting.
            cur.execute(
                f"UPDATE {self._table} SET row_no = row_no - 1 WHERE row_no > %s ORDER BY row_no ASC",
                (row,),
            )

    def last_row(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COALESCE(MAX(row_no), 0) AS last_row FROM {self._table}")
            row = fetchone(cur)
            return int(row["last_row"]) if row else 0

    def format_header(self, num_cols: int) -> None:
        logger.debug("MySQL sheet %s has no cell formatting; header style skipped", self._table)
