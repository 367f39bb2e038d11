from __future__ import annotations

from flask import jsonify, request

from ..core.exceptions import (
    AuthenticationError,
    ConflictError,
    ConsistencyError,
    DomainError,
    InvalidTokenError,
    NotFoundError,
    TokenRequiredError,
    ValidationError,
)

# Order matters: first match wins.
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, 400),
    (ConflictError, 400),
    (AuthenticationError, 401),
    (TokenRequiredError, 401),
    (InvalidTokenError, 403),
    (NotFoundError, 404),
    (ConsistencyError, 500),
)


def status_for(error: DomainError) -> int:
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return status
    return 400


def error_response(error: DomainError):
    return jsonify({"error": str(error)}), status_for(error)


def not_found_response():
    return jsonify({"error": "Endpoint not found."}), 404


def internal_error_response():
    return jsonify({"error": "Internal server error", "message": "Please try again later."}), 500


def json_body() -> dict:
    """Request JSON object, or {} when the body is absent or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}
