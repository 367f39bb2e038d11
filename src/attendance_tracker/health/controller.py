from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..container import Container
from ..database.mysql_base import db_cursor

logger = logging.getLogger(__name__)


def check_database(conn_factory) -> bool:
    """Run a trivial query through the pool; False if the store is unreachable."""
    try:
        with db_cursor(conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS db_status")
            cur.fetchall()
        return True
    except Exception:
        logger.exception("Health check: database unreachable")
        return False


def register(app: Flask, container: Container) -> None:
    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        if not check_database(container.conn):
            return jsonify({"status": "error", "database": "disconnected"}), 500
        return jsonify(
            {
                "status": "success",
                "message": "Employee Attendance Tracker API is running",
                "database": "connected",
            }
        )
