"""Stateless session tokens.

A session is an HS256 JWT carrying the minimal identity claims
(userId, employeeID, email) plus iat/exp. Nothing is stored server-side:
a token is valid exactly when its signature verifies and it has not expired.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt

from ..core.constants import DEFAULT_TOKEN_LIFETIME_HOURS, JWT_ALGORITHM
from ..core.exceptions import InvalidTokenError

CLAIM_USER_ID = "userId"
CLAIM_EMPLOYEE_ID = "employeeID"
CLAIM_EMAIL = "email"
CLAIM_IAT = "iat"
CLAIM_EXP = "exp"


@dataclass(frozen=True)
class SessionIdentity:
    """Authenticated caller, as resolved from a verified token."""

    user_id: int
    employee_id: str
    email: str


class TokenService:
    def __init__(
        self,
        secret: str,
        *,
        lifetime_hours: int = DEFAULT_TOKEN_LIFETIME_HOURS,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._lifetime = timedelta(hours=int(lifetime_hours))
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, *, user_id: int, employee_id: str, email: str) -> str:
        issued_at = self._clock()
        payload = {
            CLAIM_USER_ID: int(user_id),
            CLAIM_EMPLOYEE_ID: employee_id,
            CLAIM_EMAIL: email,
            CLAIM_IAT: int(issued_at.timestamp()),
            CLAIM_EXP: int((issued_at + self._lifetime).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> SessionIdentity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": [CLAIM_USER_ID, CLAIM_EMPLOYEE_ID, CLAIM_EMAIL, CLAIM_EXP]},
            )
        except jwt.InvalidTokenError as exc:
            # ExpiredSignatureError is a subclass; both map to the same error.
            raise InvalidTokenError() from exc

        try:
            user_id = int(payload[CLAIM_USER_ID])
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError() from exc

        return SessionIdentity(
            user_id=user_id,
            employee_id=str(payload[CLAIM_EMPLOYEE_ID]),
            email=str(payload[CLAIM_EMAIL]),
        )
