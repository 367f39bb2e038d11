from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database (case-sensitive)."""

    PRESENT = "Present"
    ABSENT = "Absent"
