from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import User
from .repository import UserRepository

_USER_COLUMNS = "id, employeeName, employeeID, email, password_hash, department, position, createdAt"


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["id"]),
        employee_name=row["employeeName"],
        employee_id=row["employeeID"],
        email=row["email"],
        password_hash=row["password_hash"],
        department=row.get("department"),
        position=row.get("position"),
        created_at=row.get("createdAt"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: int) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM Users WHERE id=%s", (int(user_id),))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_USER_COLUMNS} FROM Users WHERE employeeID=%s", (employee_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def exists_with_employee_id_or_email(self, employee_id: str, email: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id FROM Users WHERE employeeID=%s OR email=%s LIMIT 1",
                (employee_id, email),
            )
            return fetchone(cur) is not None

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Users(employeeName, employeeID, email, password_hash, department, position, createdAt)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (employee_name, employee_id, email, password_hash, department, position, created_at),
            )
            return int(cur.lastrowid)
