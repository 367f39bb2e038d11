from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import to_iso
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day's attendance for one user.

    employee_name/employee_id are a snapshot of the owner taken at creation.
    """

    record_id: int
    user_id: int
    employee_name: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "userId": self.user_id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "date": self.work_date.isoformat(),
            "status": self.status.value,
            "createdAt": to_iso(self.created_at),
        }
