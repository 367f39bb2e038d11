from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository

_RECORD_COLUMNS = "id, user_id, employeeName, employeeID, date, status, createdAt"


def _to_record(row: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        record_id=int(row["id"]),
        user_id=int(row["user_id"]),
        employee_name=row["employeeName"],
        employee_id=row["employeeID"],
        work_date=row["date"],
        status=AttendanceStatus(row["status"]),
        created_at=row["createdAt"],
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_RECORD_COLUMNS}
                FROM Attendance
                WHERE user_id=%s
                ORDER BY date DESC, createdAt DESC
                """,
                (int(user_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_RECORD_COLUMNS} FROM Attendance WHERE user_id=%s AND date=%s",
                (int(user_id), work_date),
            )
            row = fetchone(cur)
            return _to_record(row) if row else None

    def create_record(
        self,
        *,
        user_id: int,
        employee_name: str,
        employee_id: str,
        work_date: date,
        status: AttendanceStatus,
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO Attendance(user_id, employeeName, employeeID, date, status, createdAt)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (int(user_id), employee_name, employee_id, work_date, status.value, created_at),
            )
            return int(cur.lastrowid)

    def delete_for_user(self, *, record_id: int, user_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM Attendance WHERE id=%s AND user_id=%s",
                (int(record_id), int(user_id)),
            )
            return cur.rowcount > 0
