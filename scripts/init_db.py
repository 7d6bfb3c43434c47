from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "employee_records"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from employee_records.container import build_table
from employee_records.core.constants import DEFAULT_SHEET_TABLE
from employee_records.core.enums import TableBackend
from employee_records.database.bootstrap import apply_schema, list_tables
from employee_records.employees.repository import EmployeeSheetRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = TableBackend(getattr(settings, "TABLE_BACKEND", TableBackend.MYSQL.value))

    if backend == TableBackend.MYSQL:
        db_config = dict(settings.DB_CONFIG)
        table = str(getattr(settings, "SHEET_TABLE", DEFAULT_SHEET_TABLE))
        apply_schema(db_config, table=table)
        print(
            f"OK: sheet table `{table}` -> "
            f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
            f"(tables={len(list_tables(db_config))})"
        )

    repaired = EmployeeSheetRepository(build_table(settings)).ensure_headers()
    print(f"OK: header row {'written' if repaired else 'already up to date'} ({backend.value})")


if __name__ == "__main__":
    main()
