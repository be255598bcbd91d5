from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .common import error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_PAGE_SIZE, MAX_BULK_SIZE, SIMULATED_FAILURE_RATE
from .database.bootstrap import apply_schema, ensure_demo_users
from .logging_config import configure_logging
from .analytics.controller import register as register_analytics
from .bulk.controller import register as register_bulk
from .export.controller import register as register_export
from .operations.controller import register as register_operations
from .search.controller import register as register_search
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_SETTINGS_KEYS = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "LOG_LEVEL",
    "API_BASE_PATH",
    "STORAGE_BACKEND",
    "DB_CONFIG",
    "AUTO_INIT_DB",
    "SEED_DEMO_DATA",
    "SIMULATED_FAILURE_RATE",
    "MAX_BULK_SIZE",
    "DEFAULT_PAGE_SIZE",
)


def create_app(settings_module: Optional[str] = None, *, container: Optional[Container] = None, **overrides: Any) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config.update(
        API_BASE_PATH="/api",
        STORAGE_BACKEND="memory",
        DB_CONFIG={},
        AUTO_INIT_DB=False,
        SEED_DEMO_DATA=False,
        SIMULATED_FAILURE_RATE=SIMULATED_FAILURE_RATE,
        MAX_BULK_SIZE=MAX_BULK_SIZE,
        DEFAULT_PAGE_SIZE=DEFAULT_PAGE_SIZE,
    )
    for key in _SETTINGS_KEYS:
        if hasattr(settings, key):
            app.config[key] = getattr(settings, key)
    app.config.update(overrides)
    app.secret_key = app.config.get("SECRET_KEY")
    base = str(app.config["API_BASE_PATH"] or "").strip("/")
    app.config["API_BASE_PATH"] = f"/{base}" if base else ""

    configure_logging(app.config.get("LOG_LEVEL"))
    logger.info("Starting user management service (settings=%s, storage=%s)", settings_module, app.config["STORAGE_BACKEND"])

    if app.config["STORAGE_BACKEND"] == "mysql" and app.config["AUTO_INIT_DB"]:
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        apply_schema(app.config["DB_CONFIG"], schema_path=schema_path)

    if container is None:
        container = build_container(
            storage_backend=app.config["STORAGE_BACKEND"],
            db_config=app.config["DB_CONFIG"],
            failure_rate=float(app.config["SIMULATED_FAILURE_RATE"]),
            max_bulk_size=int(app.config["MAX_BULK_SIZE"]),
        )
    app.extensions["user_management"] = container

    if app.config["SEED_DEMO_DATA"]:
        created = ensure_demo_users(container.user_service)
        if created:
            logger.info("Seeded %s demo users", created)

    error_handlers.register(app)

    register_search(app, container)
    register_analytics(app, container)
    register_export(app, container)
    register_bulk(app, container)
    register_operations(app, container)
    register_users(app, container)

    @app.route(f"{app.config['API_BASE_PATH']}/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "UP"})

    return app
