from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_SIZE, DEFAULT_POOL_TIMEOUT_SECONDS, DEFAULT_TOKEN_LIFETIME_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .sessions.tokens import TokenService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: UserRepository
    attendance_repo: AttendanceRepository

    tokens: TokenService
    auth_service: AuthService
    user_service: UserService
    attendance_service: AttendanceService

    def close(self) -> None:
        self.conn.close()


def build_services(
    *,
    conn: DatabaseConnection,
    users_repo: UserRepository,
    attendance_repo: AttendanceRepository,
    tokens: TokenService,
) -> Container:
    return Container(
        conn=conn,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        tokens=tokens,
        auth_service=AuthService(users_repo, tokens),
        user_service=UserService(users_repo),
        attendance_service=AttendanceService(attendance_repo, users_repo),
    )


def build_container(
    *,
    db_config: dict,
    jwt_secret: str,
    token_lifetime_hours: int = DEFAULT_TOKEN_LIFETIME_HOURS,
    pool_size: int = DEFAULT_POOL_SIZE,
    pool_timeout: float = DEFAULT_POOL_TIMEOUT_SECONDS,
) -> Container:
    """Open the MySQL pool and wire repositories and services on top of it."""
    conn = DatabaseConnection(DBConfig.from_dict(db_config, pool_size=pool_size, pool_timeout=pool_timeout)).open()
    return build_services(
        conn=conn,
        users_repo=MySQLUserRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        tokens=TokenService(jwt_secret, lifetime_hours=token_lifetime_hours),
    )
