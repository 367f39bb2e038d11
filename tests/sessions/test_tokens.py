from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from attendance_tracker.core.exceptions import InvalidTokenError
from attendance_tracker.sessions.tokens import TokenService

SECRET = "unit-secret"


def test_issued_token_round_trips_identity():
    svc = TokenService(SECRET)
    token = svc.issue(user_id=7, employee_id="E7", email="e7@co.com")

    identity = svc.decode(token)
    assert identity.user_id == 7
    assert identity.employee_id == "E7"
    assert identity.email == "e7@co.com"


def test_token_expires_after_24_hours():
    issued = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)
    svc = TokenService(SECRET, clock=lambda: issued)
    token = svc.issue(user_id=1, employee_id="E1", email="e1@co.com")

    claims = jwt.decode(token, options={"verify_signature": False})
    assert claims["exp"] - claims["iat"] == int(timedelta(hours=24).total_seconds())


def test_expired_token_is_invalid():
    long_ago = datetime.now(timezone.utc) - timedelta(hours=25)
    issuer = TokenService(SECRET, clock=lambda: long_ago)
    token = issuer.issue(user_id=1, employee_id="E1", email="e1@co.com")

    with pytest.raises(InvalidTokenError, match="Invalid or expired token."):
        TokenService(SECRET).decode(token)


def test_token_signed_with_other_secret_is_invalid():
    token = TokenService("another-secret").issue(user_id=1, employee_id="E1", email="e1@co.com")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode(token)


def test_tampered_payload_is_invalid():
    svc = TokenService(SECRET)
    header, _, signature = svc.issue(user_id=1, employee_id="E1", email="e1@co.com").split(".")
    forged_payload = jwt.encode(
        {"userId": 2, "employeeID": "E2", "email": "e2@co.com", "exp": 4102444800},
        "attacker",
        algorithm="HS256",
    ).split(".")[1]

    with pytest.raises(InvalidTokenError):
        svc.decode(f"{header}.{forged_payload}.{signature}")


def test_token_missing_identity_claims_is_invalid():
    token = jwt.encode({"exp": 4102444800}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode(token)


def test_garbage_is_invalid():
    with pytest.raises(InvalidTokenError):
        TokenService(SECRET).decode("not-a-jwt")


def test_empty_secret_is_rejected():
    with pytest.raises(ValueError):
        TokenService("")
