"""
Pure normalizers for event fields.

Each function maps free-form user input to the single canonical form that is
stored: slugs for titles, YYYY-MM-DD for dates, 24-hour HH:mm for times.
"""

import re
from datetime import datetime, timezone

from eventhub.core.errors import InvalidDateError, InvalidTimeError

_NON_ALNUM = re.compile(r"[^a-z0-9]+")

# Optional colon, optional space before the meridiem
_TIME_PATTERN = re.compile(r"^(\d{1,2}):?(\d{2})\s*(AM|PM)?$", re.IGNORECASE | re.ASCII)

# Written forms tried after ISO-8601 parsing fails
_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def generate_slug(title: str) -> str:
    """Lowercase the title and collapse every non-alphanumeric run into one dash."""
    return _NON_ALNUM.sub("-", title.strip().lower()).strip("-")


def _parse_datetime(value: str) -> datetime | None:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: str) -> str:
    """
    Return the calendar date of ``value`` as YYYY-MM-DD.

    Timezone-aware inputs are converted to UTC first, so
    ``2025-01-31T23:30:00-05:00`` normalizes to ``2025-02-01``.

    Raises:
        InvalidDateError: If the value is not text or cannot be parsed.
    """
    if not isinstance(value, str):
        raise InvalidDateError(value)

    parsed = _parse_datetime(value.strip())
    if parsed is None:
        raise InvalidDateError(value)

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """
    Return ``value`` as a 24-hour HH:mm string.

    Accepts H:mm, HH:mm, Hmm and HHmm, each optionally followed by AM/PM.
    The hour is range-checked as parsed (0-23) before any meridiem is applied,
    then 12 AM becomes 00, 12 PM stays 12 and other PM hours gain 12.

    Raises:
        InvalidTimeError: If the value does not match or is out of range.
    """
    if not isinstance(value, str):
        raise InvalidTimeError(value)

    match = _TIME_PATTERN.match(value.strip())
    if not match:
        raise InvalidTimeError(value)

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = (match.group(3) or "").lower()

    if hour > 23 or minute > 59:
        raise InvalidTimeError(value)

    if meridiem:
        if hour == 12:
            hour = 0 if meridiem == "am" else 12
        elif meridiem == "pm":
            hour += 12

    return f"{hour:02d}:{minute:02d}"
