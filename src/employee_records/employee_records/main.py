from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import Container, build_container
from .core.constants import DEFAULT_SHEET_TABLE
from .core.enums import TableBackend
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .photos.controller import register as register_photos

logger = logging.getLogger(__name__)


def load_settings() -> Any:
    return importlib.import_module(get_settings_module())


def create_app(*, settings: Optional[Any] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    if settings is None:
        settings = load_settings()

    debug = bool(getattr(settings, "DEBUG", False))
    logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = debug
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    table_backend = TableBackend(getattr(settings, "TABLE_BACKEND", TableBackend.MYSQL.value))
    logger.info(
        "[employee-records] settings=%s table=%s photos=%s",
        getattr(settings, "__name__", type(settings).__name__),
        table_backend.value,
        getattr(settings, "PHOTO_BACKEND", "local"),
    )

    if container is None:
        if table_backend == TableBackend.MYSQL and bool(getattr(settings, "AUTO_INIT_DB", False)):
            db_config = getattr(settings, "DB_CONFIG")
            apply_schema(db_config, table=str(getattr(settings, "SHEET_TABLE", DEFAULT_SHEET_TABLE)))
            logger.info("[employee-records] schema ready (tables=%d)", len(list_tables(db_config)))
        container = build_container(settings=settings)

    app.extensions["employee_records"] = container

    register_employees(app, container)
    register_photos(app, container)

    return app
