from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import internal_error_response, not_found_response
from .container import Container, build_container
from .core.constants import (
    DEFAULT_POOL_SIZE,
    DEFAULT_POOL_TIMEOUT_SECONDS,
    DEFAULT_SERVER_PORT,
    DEFAULT_TOKEN_LIFETIME_HOURS,
)
from .core.logging_config import setup_logging
from .database.bootstrap import apply_schema, list_tables
from .database.connection import DBConfig
from .health.controller import register as register_health
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

CONTAINER_EXTENSION = "attendance_tracker"


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFound)
    @app.errorhandler(MethodNotAllowed)
    def handle_unmatched(_error):
        return not_found_response()

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return {"error": error.description}, error.code
        logger.exception("Unhandled error")
        return internal_error_response()


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    settings = importlib.import_module(settings_module or get_settings_module())
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SERVER_HOST"] = getattr(settings, "SERVER_HOST", "0.0.0.0")
    app.config["SERVER_PORT"] = int(getattr(settings, "SERVER_PORT", DEFAULT_SERVER_PORT))

    CORS(app, resources={r"/api/*": {"origins": getattr(settings, "CORS_ALLOWED_ORIGINS", "*")}})

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info("settings=%s db=%s", settings.__name__, DBConfig.from_dict(db_config).describe())

        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(db_config)
            logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            jwt_secret=getattr(settings, "JWT_SECRET"),
            token_lifetime_hours=int(getattr(settings, "TOKEN_LIFETIME_HOURS", DEFAULT_TOKEN_LIFETIME_HOURS)),
            pool_size=int(getattr(settings, "DB_POOL_SIZE", DEFAULT_POOL_SIZE)),
            pool_timeout=float(getattr(settings, "DB_POOL_TIMEOUT", DEFAULT_POOL_TIMEOUT_SECONDS)),
        )

    app.extensions[CONTAINER_EXTENSION] = container

    register_users(app, container)
    register_attendance(app, container)
    register_health(app, container)
    _register_error_handlers(app)

    return app


def run() -> None:
    app = create_app()
    container: Container = app.extensions[CONTAINER_EXTENSION]
    host = app.config["SERVER_HOST"]
    port = app.config["SERVER_PORT"]
    logger.info("Employee Attendance Tracker API listening on http://%s:%s (health: /api/health)", host, port)
    try:
        app.run(host=host, port=port, debug=app.config["DEBUG"], use_reloader=False)
    finally:
        container.close()


if __name__ == "__main__":
    run()
