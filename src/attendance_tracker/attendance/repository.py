from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    create_record raises DuplicateKeyError when (user_id, work_date) exists.
    """

    def list_for_user(self, user_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_user_and_date(self, user_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

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
        raise NotImplementedError

    def delete_for_user(self, *, record_id: int, user_id: int) -> bool:
        raise NotImplementedError
