from __future__ import annotations

import math
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import MONTH_NAMES, parse_iso_date


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number) or number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_positive_decimal(value: Any, field_name: str) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"{field_name} must be a number")
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not amount.is_finite() or amount <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return amount


def optional_date(value: Any, field_name: str, *, default: date) -> date:
    if value in (None, ""):
        return default
    try:
        return parse_iso_date(str(value)[:10])
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")


def require_month(value: Any) -> int:
    """Accept 1-12 or an English month name ("March", "mar")."""
    if isinstance(value, str) and not value.strip().isdigit():
        key = value.strip().lower()[:3]
        for idx, name in enumerate(MONTH_NAMES, start=1):
            if key and name.lower()[:3] == key:
                return idx
        raise ValidationError("month is not valid")
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError("month is not valid")
    if not 1 <= month <= 12:
        raise ValidationError("month is not valid")
    return month


def require_year(value: Any) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("year is not valid")
    if not 1900 <= year <= 9999:
        raise ValidationError("year is not valid")
    return year


def as_bool(value: Optional[Any]) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)
