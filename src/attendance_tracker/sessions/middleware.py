from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import g, request

from ..common.http import error_response
from ..core.exceptions import InvalidTokenError, TokenRequiredError
from ..users.service import AuthService
from .tokens import SessionIdentity


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from `Authorization: Bearer <token>`, or None."""
    if not authorization:
        return None
    parts = authorization.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    token = parts[1].strip()
    return token or None


def current_identity() -> SessionIdentity:
    return g.identity


def token_required(auth_service: AuthService):
    """Decorator factory guarding a view with a bearer session token.

    Missing token -> 401 "Access token required."; present but failing
    validation -> 403 "Invalid or expired token.". On success the resolved
    identity is available as g.identity for the rest of the request.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            token = extract_bearer_token(request.headers.get("Authorization"))
            if token is None:
                return error_response(TokenRequiredError())
            try:
                g.identity = auth_service.validate(token)
            except InvalidTokenError as e:
                return error_response(e)
            return view(*args, **kwargs)

        return wrapper

    return decorator
