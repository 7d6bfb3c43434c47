from __future__ import annotations

import logging

import mysql.connector

from ..core.constants import NUM_COLUMNS
from .connection import DBConfig
from .mysql_base import quote_identifier

logger = logging.getLogger(__name__)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def sheet_table_ddl(table: str, *, num_cols: int = NUM_COLUMNS) -> str:
    cells = ",\n".join(f"    c{i} VARCHAR(1024) NULL" for i in range(1, num_cols + 1))
    return (
        f"CREATE TABLE IF NOT EXISTS {quote_identifier(table)} (\n"
        "    row_no INT NOT NULL PRIMARY KEY,\n"
        f"{cells}\n"
        ") CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
    )


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, table: str) -> None:
    """Create the database and the sheet table (idempotent: CREATE IF NOT EXISTS)."""
    ensure_database_exists(db_config)
    target = DBConfig.from_dict(db_config)

    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute(sheet_table_ddl(table))
        conn.commit()
    finally:
        conn.close()
    logger.info("sheet table %s ready in %s", table, target.database)


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
