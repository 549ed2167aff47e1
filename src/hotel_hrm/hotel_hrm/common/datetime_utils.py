from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..core.exceptions import ValidationError

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value: Any, field_name: str = "Date") -> date:
    """Accept a ``date`` or a YYYY-MM-DD string (request payloads, DB rows)."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), ISO_DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format")


def now_local() -> datetime:
    # Payroll processed_date clock; services take it as an injectable callable.
    return datetime.now()
