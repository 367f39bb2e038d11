from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
DIGITS_PATTERN = re.compile(r"^[0-9]+$")


def as_text(value: Any) -> str:
    """Coerce a JSON field to a stripped string ('' for null)."""
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> Optional[str]:
    text = as_text(value)
    return text or None


def require_non_empty(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_min_length(value: str, message: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(message)
    return value


def require_email(value: str, message: str) -> str:
    if not EMAIL_PATTERN.match(value or ""):
        raise ValidationError(message)
    return value


def parse_positive_int(value: Any, message: str) -> int:
    # ASCII digits only; int() alone accepts "1_0" and "+7".
    text = str(value).strip()
    if not DIGITS_PATTERN.fullmatch(text):
        raise ValidationError(message)
    number = int(text)
    if number <= 0:
        raise ValidationError(message)
    return number
