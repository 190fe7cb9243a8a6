from datetime import date, datetime, timedelta

from dateutil import parser as dateutil_parser
from dateutil.parser import ParserError

from tick.core.errors import ValidationError

from . import clock

__all__ = ["parse_date", "require_date"]

_DAY_ALIASES = {
    "monday": "mon",
    "tuesday": "tue",
    "wednesday": "wed",
    "thursday": "thu",
    "friday": "fri",
    "saturday": "sat",
    "sunday": "sun",
}
_DAY_MAP = {"mon": 0, "tue": 1, "wed": 2, "thu": 3, "fri": 4, "sat": 5, "sun": 6}


def parse_date(text: str) -> date | None:
    """Parses a user date string (e.g., 'today', 'tomorrow', 'mon', 'YYYY-MM-DD').

    Weekday names resolve to the next occurrence, today included. Returns None
    when the text is not a date.
    """
    text_lower = text.strip().lower()
    today = clock.today()

    if not text_lower:
        return None
    if text_lower == "today":
        return today
    if text_lower == "yesterday":
        return today - timedelta(days=1)
    if text_lower == "tomorrow":
        return today + timedelta(days=1)
    text_lower = _DAY_ALIASES.get(text_lower, text_lower)
    if text_lower in _DAY_MAP:
        days_ahead = (_DAY_MAP[text_lower] - today.weekday() + 7) % 7
        return today + timedelta(days=days_ahead)
    try:
        return dateutil_parser.parse(
            text, default=datetime(today.year, today.month, today.day)
        ).date()
    except (ParserError, ValueError, OverflowError):
        return None


def require_date(text: str | None) -> date:
    """Like parse_date but raises ValidationError when text is missing or unparseable."""
    if not text or not text.strip():
        raise ValidationError("date is required")
    parsed = parse_date(text)
    if parsed is None:
        raise ValidationError(f"Invalid date '{text}' (use YYYY-MM-DD, today, tomorrow or a weekday)")
    return parsed
