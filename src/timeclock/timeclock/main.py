from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .common.datetime_utils import zone_from_name
from .container import Container, build_container, build_memory_container
from .core.exceptions import DomainError, NotFoundError, ValidationError
from .database.bootstrap import apply_schema, list_tables
from .employees.controller import register as register_employees
from .notifications.controller import register as register_notifications
from .time_tracking.controller import register as register_time_tracking

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _container_from_settings(settings) -> Container:
    options = dict(
        pairing=getattr(settings, "PAIRING_STRATEGY", None),
        notification_limit=int(getattr(settings, "NOTIFICATION_LIMIT", 10)),
        tz=zone_from_name(getattr(settings, "TIMEZONE", None)),
    )

    backend = str(getattr(settings, "STORE_BACKEND", "mysql")).lower()
    if backend == "memory":
        return build_memory_container(capacity=int(getattr(settings, "MEMORY_LOG_CAPACITY", 10_000)), **options)

    db_config = getattr(settings, "DB_CONFIG")
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=SCHEMA_PATH)
        logger.info("Schema ready (tables=%d)", len(list_tables(db_config)))
    return build_container(db_config=db_config, **options)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(DomainError)
    def _domain_error(e: DomainError):
        return jsonify({"success": False, "message": str(e)}), 422


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    logger.info("Starting time clock with settings=%s", settings_module)

    container = container or _container_from_settings(settings)
    app.extensions["timeclock"] = container

    _register_error_handlers(app)
    register_employees(app, container)
    register_time_tracking(app, container)
    register_notifications(app, container)
    register_analytics(app, container)

    return app
