from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import parse_iso_date, utc_now
from ..common.validators import parse_positive_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, ConsistencyError, NotFoundError, ValidationError
from ..database.mysql_base import DuplicateKeyError
from ..users.repository import UserRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

RECORD_NOT_FOUND_MESSAGE = "Record not found or access denied."


def _parse_status(value: object) -> AttendanceStatus:
    # Exact, case-sensitive match on the stored values.
    for status in AttendanceStatus:
        if value == status.value:
            return status
    raise ValidationError("Status must be Present or Absent.")


def _parse_date(value: object) -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError("Date must be in YYYY-MM-DD format.") from None


class AttendanceService:
    """Use cases: list, submit and delete the caller's own attendance records.

    Every call is scoped by the authenticated user id; records of other users
    are never read or mutated.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        users: UserRepository,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._attendance = attendance
        self._users = users
        self._clock = clock or utc_now

    def list_records(self, user_id: int) -> list[AttendanceRecord]:
        records: Sequence[AttendanceRecord] = self._attendance.list_for_user(user_id)
        # Newest day first; same-day ties by most recently entered.
        return sorted(records, key=lambda r: (r.work_date, r.created_at), reverse=True)

    def submit(self, user_id: int, *, work_date: object, status: object) -> AttendanceRecord:
        if work_date in (None, "") or status in (None, ""):
            raise ValidationError("Date and status are required.")
        parsed_status = _parse_status(status)
        parsed_date = _parse_date(work_date)

        user = self._users.get_by_id(user_id)
        if user is None:
            logger.error("Authenticated user id=%s no longer exists", user_id)
            raise ConsistencyError("User not found.")

        duplicate = ConflictError(f"Attendance for {parsed_date.isoformat()} already exists.")
        if self._attendance.get_for_user_and_date(user_id, parsed_date) is not None:
            raise duplicate

        created_at = self._clock()
        try:
            record_id = self._attendance.create_record(
                user_id=user_id,
                employee_name=user.employee_name,
                employee_id=user.employee_id,
                work_date=parsed_date,
                status=parsed_status,
                created_at=created_at,
            )
        except DuplicateKeyError as exc:
            # A concurrent submission for the same day won the insert.
            logger.info("Duplicate attendance insert for user id=%s on %s", user_id, parsed_date)
            raise duplicate from exc

        logger.info("Recorded %s for user id=%s on %s", parsed_status.value, user_id, parsed_date)
        return AttendanceRecord(
            record_id=record_id,
            user_id=user_id,
            employee_name=user.employee_name,
            employee_id=user.employee_id,
            work_date=parsed_date,
            status=parsed_status,
            created_at=created_at,
        )

    def delete(self, user_id: int, record_id: object) -> int:
        parsed_id = parse_positive_int(record_id, "Invalid record id.")
        if not self._attendance.delete_for_user(record_id=parsed_id, user_id=user_id):
            raise NotFoundError(RECORD_NOT_FOUND_MESSAGE)
        logger.info("Deleted attendance id=%s for user id=%s", parsed_id, user_id)
        return parsed_id
