# workout_tracker/validators.py
"""
Input coercion helpers used by the services.

Every helper either returns a clean Python value or raises
``ValidationError`` naming the offending field.
"""
import math
import re
from datetime import date, datetime
from typing import Any, Optional

from email_validator import EmailNotValidError, validate_email

from .errors import ValidationError

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d(:[0-5]\d)?$")

# upper bound of the INTEGER columns
MAX_INT = 2**31 - 1


def require_text(value: Any, field: str, max_length: Optional[int] = None) -> str:
    text = (value if isinstance(value, str) else "").strip()
    if not text:
        raise ValidationError(f"{field} is required")
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field} must be at most {max_length} characters")
    return text


def optional_text(value: Any, field: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip() or None


def parse_int(
    value: Any, field: str, minimum: Optional[int] = None, maximum: Optional[int] = MAX_INT
) -> int:
    # bools are ints in Python; reject them explicitly
    if value is None or value == "" or isinstance(value, bool):
        raise ValidationError(f"{field} is required")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field} must be an integer")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field} must be at least {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field} must be at most {maximum}")
    return number


def parse_float(value: Any, field: str, minimum: Optional[float] = None) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field} must be a number")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field} must be at least {minimum:g}")
    return number


def parse_date(value: Any, field: str, required: bool = True) -> Optional[date]:
    if value is None or value == "":
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    # full timestamps are accepted; only their date part is kept
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        raise ValidationError(f"{field} must be a date (YYYY-MM-DD)")


def parse_time(value: Any, field: str) -> Optional[str]:
    if value is None or value == "":
        return None
    text = str(value).strip()
    if not _TIME_RE.match(text):
        raise ValidationError(f"{field} must be a time of day (HH:MM)")
    return text[:5]


def normalize_email(value: Any) -> str:
    email = require_text(value, "email", max_length=255)
    try:
        result = validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError("email is not a valid address")
    return result.normalized.lower()
