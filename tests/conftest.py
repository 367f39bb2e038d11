from __future__ import annotations

import threading
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from attendance_tracker.attendance.model import AttendanceRecord
from attendance_tracker.attendance.service import AttendanceService
from attendance_tracker.container import build_services
from attendance_tracker.core.enums import AttendanceStatus
from attendance_tracker.database.mysql_base import DuplicateKeyError
from attendance_tracker.main import create_app
from attendance_tracker.sessions.tokens import TokenService
from attendance_tracker.users.model import User
from attendance_tracker.users.service import AuthService, UserService

JWT_SECRET = "test-jwt-secret"


class InMemoryUsers:
    """Models the Users table, including its two unique keys."""

    def __init__(self):
        self._lock = threading.Lock()
        self._by_id: dict[int, User] = {}
        self._next_id = 0

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._by_id.get(int(user_id))

    def get_by_employee_id(self, employee_id: str) -> Optional[User]:
        for user in self._by_id.values():
            if user.employee_id == employee_id:
                return user
        return None

    def exists_with_employee_id_or_email(self, employee_id: str, email: str) -> bool:
        return any(u.employee_id == employee_id or u.email == email for u in self._by_id.values())

    def create_user(self, *, employee_name, employee_id, email, password_hash, department, position, created_at) -> int:
        with self._lock:
            if self.exists_with_employee_id_or_email(employee_id, email):
                raise DuplicateKeyError(f"Duplicate entry for {employee_id}/{email}")
            self._next_id += 1
            self._by_id[self._next_id] = User(
                user_id=self._next_id,
                employee_name=employee_name,
                employee_id=employee_id,
                email=email,
                password_hash=password_hash,
                department=department,
                position=position,
                created_at=created_at,
            )
            return self._next_id

    def remove(self, user_id: int) -> None:
        self._by_id.pop(int(user_id), None)


class InMemoryAttendance:
    """Models the Attendance table, including UNIQUE (user_id, date).

    list_for_user returns insertion order; ordering is the service's job.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._records: dict[int, AttendanceRecord] = {}
        self._next_id = 0

    def all(self) -> list[AttendanceRecord]:
        return list(self._records.values())

    def list_for_user(self, user_id: int):
        return [r for r in self._records.values() if r.user_id == user_id]

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._records.values():
            if r.user_id == user_id and r.work_date == work_date:
                return r
        return None

    def create_record(self, *, user_id, employee_name, employee_id, work_date, status, created_at) -> int:
        with self._lock:
            if any(r.user_id == user_id and r.work_date == work_date for r in self._records.values()):
                raise DuplicateKeyError(f"Duplicate entry '{user_id}-{work_date}' for key 'uq_attendance_user_date'")
            self._next_id += 1
            self._records[self._next_id] = AttendanceRecord(
                record_id=self._next_id,
                user_id=user_id,
                employee_name=employee_name,
                employee_id=employee_id,
                work_date=work_date,
                status=AttendanceStatus(status),
                created_at=created_at,
            )
            return self._next_id

    def delete_for_user(self, *, record_id: int, user_id: int) -> bool:
        with self._lock:
            record = self._records.get(record_id)
            if record is None or record.user_id != user_id:
                return False
            del self._records[record_id]
            return True


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn

    def execute(self, sql, params=None):
        if not self._conn.factory.healthy:
            raise RuntimeError("Can't connect to MySQL server")
        self._conn.factory.executed.append(sql)

    def fetchall(self):
        return [{"db_status": 1}]

    def fetchone(self):
        return {"db_status": 1}

    def close(self):
        pass


class FakeDBConnection:
    def __init__(self, factory):
        self.factory = factory

    def cursor(self, dictionary=True):
        return FakeCursor(self)

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    """Stands in for DatabaseConnection in app-level tests."""

    def __init__(self, healthy: bool = True):
        self.healthy = healthy
        self.closed = False
        self.executed: list[str] = []

    def connect(self):
        return FakeDBConnection(self)

    def close(self):
        self.closed = True


class ScriptedCursor:
    def __init__(self, factory):
        self._factory = factory
        self._rows: list[dict] = []
        self.rowcount = -1
        self.lastrowid = None

    def execute(self, sql, params=None):
        self._factory.statements.append((" ".join(sql.split()), params))
        result = self._factory.results.pop(0) if self._factory.results else {}
        self._rows = list(result.get("rows", []))
        self.rowcount = result.get("rowcount", len(self._rows))
        self.lastrowid = result.get("lastrowid")

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return self._rows

    def close(self):
        pass


class ScriptedConnection:
    def __init__(self, factory):
        self._factory = factory

    def cursor(self, dictionary=True):
        return ScriptedCursor(self._factory)

    def commit(self):
        self._factory.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class ScriptedConnectionFactory:
    """Records each (sql, params) and answers from a queue of canned results."""

    def __init__(self):
        self.statements: list[tuple] = []
        self.results: list[dict] = []
        self.commits = 0

    def answer(self, **result) -> "ScriptedConnectionFactory":
        self.results.append(result)
        return self

    def connect(self):
        return ScriptedConnection(self)


class TickingClock:
    """Returns start, start+1s, start+2s, ... on successive calls."""

    def __init__(self, start: datetime):
        self._next = start

    def __call__(self) -> datetime:
        now = self._next
        self._next = now + timedelta(seconds=1)
        return now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 6, 1, 9, 0, 0)


@pytest.fixture
def users_repo() -> InMemoryUsers:
    return InMemoryUsers()


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(JWT_SECRET)


@pytest.fixture
def auth_service(users_repo, tokens, fixed_now) -> AuthService:
    return AuthService(users_repo, tokens, clock=lambda: fixed_now)


@pytest.fixture
def user_service(users_repo) -> UserService:
    return UserService(users_repo)


@pytest.fixture
def attendance_service(attendance_repo, users_repo, fixed_now) -> AttendanceService:
    return AttendanceService(attendance_repo, users_repo, clock=TickingClock(fixed_now))


@pytest.fixture
def ann(auth_service):
    return auth_service.register(
        employee_name="Ann Lee",
        employee_id="E100",
        email="ann@co.com",
        password="secret1",
    )


@pytest.fixture
def db_factory() -> FakeConnectionFactory:
    return FakeConnectionFactory()


@pytest.fixture
def scripted_db() -> ScriptedConnectionFactory:
    return ScriptedConnectionFactory()


@pytest.fixture
def app(db_factory, users_repo, attendance_repo, tokens):
    container = build_services(
        conn=db_factory,
        users_repo=users_repo,
        attendance_repo=attendance_repo,
        tokens=tokens,
    )
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()
