from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import utc_now
from ..common.validators import require_email, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ConflictError, NotFoundError, ValidationError
from ..database.mysql_base import DuplicateKeyError
from ..sessions.tokens import SessionIdentity, TokenService
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "All required fields must be filled."
PASSWORD_LENGTH_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters long."
EMAIL_FORMAT_MESSAGE = "Please provide a valid email address."
DUPLICATE_USER_MESSAGE = "Employee ID or Email already exists."
LOGIN_REQUIRED_MESSAGE = "Employee ID and password are required."
INVALID_CREDENTIALS_MESSAGE = "Invalid Employee ID or password."

# Compared against when the employeeID is unknown, so both failure paths hash.
_DUMMY_PASSWORD_HASH = generate_password_hash("attendance-tracker-unknown-user")


@dataclass(frozen=True)
class AuthResult:
    """A user plus a freshly issued session token."""

    user: User
    token: str


class AuthService:
    """Use cases: register, login, validate session token."""

    def __init__(
        self,
        users: UserRepository,
        tokens: TokenService,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._users = users
        self._tokens = tokens
        self._clock = clock or utc_now

    def _issue(self, user: User) -> str:
        return self._tokens.issue(user_id=user.user_id, employee_id=user.employee_id, email=user.email)

    def register(
        self,
        *,
        employee_name: str,
        employee_id: str,
        email: str,
        password: str,
        department: Optional[str] = None,
        position: Optional[str] = None,
    ) -> AuthResult:
        employee_name = require_non_empty(employee_name, REQUIRED_FIELDS_MESSAGE)
        employee_id = require_non_empty(employee_id, REQUIRED_FIELDS_MESSAGE)
        email = require_non_empty(email, REQUIRED_FIELDS_MESSAGE)
        if not password:
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)
        require_min_length(password, PASSWORD_LENGTH_MESSAGE, MIN_PASSWORD_LENGTH)
        require_email(email, EMAIL_FORMAT_MESSAGE)

        if self._users.exists_with_employee_id_or_email(employee_id, email):
            logger.info("Registration rejected: duplicate employeeID/email for %s", employee_id)
            raise ConflictError(DUPLICATE_USER_MESSAGE)

        password_hash = generate_password_hash(password)
        created_at = self._clock()
        try:
            user_id = self._users.create_user(
                employee_name=employee_name,
                employee_id=employee_id,
                email=email,
                password_hash=password_hash,
                department=department or None,
                position=position or None,
                created_at=created_at,
            )
        except DuplicateKeyError as exc:
            logger.info("Registration lost a race on employeeID/email for %s", employee_id)
            raise ConflictError(DUPLICATE_USER_MESSAGE) from exc

        user = User(
            user_id=user_id,
            employee_name=employee_name,
            employee_id=employee_id,
            email=email,
            password_hash=password_hash,
            department=department or None,
            position=position or None,
            created_at=created_at,
        )
        logger.info("Registered user id=%s employeeID=%s", user_id, employee_id)
        return AuthResult(user=user, token=self._issue(user))

    def login(self, employee_id: str, password: str) -> AuthResult:
        employee_id = (employee_id or "").strip()
        if not employee_id or not password:
            raise ValidationError(LOGIN_REQUIRED_MESSAGE)

        user = self._users.get_by_employee_id(employee_id)
        if user is None:
            check_password_hash(_DUMMY_PASSWORD_HASH, password)
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. placeholder or corrupted hash values
            ok = False

        if not ok:
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        logger.info("Login succeeded for employeeID=%s", employee_id)
        return AuthResult(user=user, token=self._issue(user))

    def validate(self, token: str) -> SessionIdentity:
        return self._tokens.decode(token)


class UserService:
    """Use case: read the caller's own profile."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get_profile(self, user_id: int) -> User:
        user = self._users.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found.")
        return user
