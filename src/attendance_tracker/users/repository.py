from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, not on a concrete DB.
    create_user raises DuplicateKeyError when employeeID or email is taken.
    """

    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        raise NotImplementedError

    def exists_with_employee_id_or_email(self, employee_id: str, email: str) -> bool:
        raise NotImplementedError

    def create_user(
        self,
        *,
        employee_name: str,
        employee_id: str,
        email: str,
        password_hash: str,
        department: Optional[str],
        position: Optional[str],
        created_at: datetime,
    ) -> int:
        raise NotImplementedError
