from __future__ import annotations

import re
from datetime import date, datetime, timezone

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date.

    Raises ValueError for anything else, including "2024-6-1" and "20240601".
    """
    if not ISO_DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Not a YYYY-MM-DD date: {value!r}")
    return date.fromisoformat(value)


def utc_now() -> datetime:
    """Current UTC time (naive, as MySQL DATETIME stores it).

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_iso(value: datetime | date | None) -> str | None:
    if value is None:
        return None
    return value.isoformat()
