from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any

from ..core.constants import MAX_AMOUNT_EXPONENT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def to_decimal(value: Any, field_name: str) -> Decimal:
    """Coerce int/str/float/Decimal input into a Decimal amount.

    Magnitudes above 10**MAX_AMOUNT_EXPONENT are rejected so payroll arithmetic
    cannot overflow the decimal context.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} is not a valid amount")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            # str() keeps floats like 0.1 from dragging binary noise along.
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValidationError(f"{field_name} is not a valid amount")
    if amount.is_finite() and amount and amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise ValidationError(f"{field_name} is too large")
    return amount


def require_non_negative(value: Decimal, field_name: str) -> Decimal:
    if not value.is_finite() or value < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return value


def require_period(start: date, end: date) -> None:
    if end < start:
        raise ValidationError("Pay period end must not be before its start")
