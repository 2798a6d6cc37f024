"""
Utility functions for the application.
"""
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional
from zoneinfo import ZoneInfo

from app.core.config import settings

BLANK = "can't be blank"
TAKEN = "has already been taken"


def is_blank(value: Optional[str]) -> bool:
    """Return True for None, empty or whitespace-only strings."""
    return value is None or not str(value).strip()


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Normalize an email address for storage and comparison."""
    if email is None:
        return None
    return email.strip().lower()


def add_error(errors: Dict[str, List[str]], field: str, message: str) -> None:
    """Append a field-level message to an errors mapping."""
    errors.setdefault(field, []).append(message)


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response


def current_time() -> datetime:
    """Naive wall-clock time in the configured TIME_ZONE, matching the DateTime columns."""
    if settings.TIME_ZONE.upper() == "UTC":
        tz = timezone.utc
    else:
        tz = ZoneInfo(settings.TIME_ZONE)
    return datetime.now(tz).replace(tzinfo=None)


def current_date() -> date:
    """Today's date in the configured TIME_ZONE."""
    return current_time().date()
