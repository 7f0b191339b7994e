from __future__ import annotations

import importlib
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .assignments.controller import register as register_assignments
from .common.http import register_error_handlers
from .container import build_container
from .core.constants import DEFAULT_REPORT_TIMEOUT_MS
from .database.bootstrap import apply_schema, list_tables
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .projects.controller import register as register_projects
from .reports.controller import register as register_reports


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    app.logger.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(db_config, schema_path=schema_path)
        app.logger.info("schema ready (tables=%s)", len(list_tables(db_config)))

    # A bad capacity setting raises ConfigurationError here, before any request is served.
    container = build_container(
        db_config=db_config,
        capacity_settings=getattr(settings, "CAPACITY_SETTINGS"),
        report_timeout_ms=getattr(settings, "REPORT_TIMEOUT_MS", DEFAULT_REPORT_TIMEOUT_MS),
    )
    app.logger.info("capacity policy: %s", container.policy)

    register_error_handlers(app)
    register_app_routes(app, container)

    return app


def register_app_routes(app: Flask, container) -> None:
    register_departments(app, container)
    register_employees(app, container)
    register_projects(app, container)
    register_assignments(app, container)
    register_reports(app, container)
