from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class User:
    """Domain entity: registered employee.

    Note: Plain data object (no DB access code). password_hash never leaves the
    service layer; use to_public_dict() for anything client-facing.
    """

    user_id: int
    employee_name: str
    employee_id: str
    email: str
    password_hash: str
    department: Optional[str] = None
    position: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_public_dict(self) -> dict:
        return {
            "id": self.user_id,
            "employeeName": self.employee_name,
            "employeeID": self.employee_id,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "createdAt": to_iso(self.created_at),
        }
