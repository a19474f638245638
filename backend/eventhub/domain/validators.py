"""
Write-path validation for events and bookings.

Both validators return a new normalized mapping and never mutate their input.
The service layer calls them immediately before every insert or update, so a
record that fails here is never handed to the store.
"""

import re
from typing import Any, Mapping

from eventhub.core.errors import DanglingReferenceError, InvalidEmailError, MissingFieldError
from eventhub.domain.normalizers import generate_slug, normalize_date, normalize_time
from eventhub.models.event import Event
from eventhub.stores.interfaces import RecordStore

EMAIL_REGEX = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

REQUIRED_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

REQUIRED_LIST_FIELDS = ("agenda", "tags")


def normalize_event(candidate: Mapping[str, Any], previous: Event | None = None) -> dict[str, Any]:
    """
    Validate an event candidate and return its normalized fields.

    ``previous`` is the persisted record for updates. The slug is regenerated
    only for new records or when the title differs from the stored one.

    Raises:
        MissingFieldError: A required text field is empty or a list field is empty.
        InvalidDateError: The date cannot be parsed.
        InvalidTimeError: The time is malformed or out of range.
    """
    normalized: dict[str, Any] = {}

    for field in REQUIRED_TEXT_FIELDS:
        value = candidate.get(field)
        if not isinstance(value, str) or not value.strip():
            raise MissingFieldError(field)
        normalized[field] = value.strip()

    for field in REQUIRED_LIST_FIELDS:
        value = candidate.get(field)
        if not isinstance(value, list) or len(value) == 0:
            raise MissingFieldError(field)
        normalized[field] = list(value)

    if previous is None or normalized["title"] != previous.title:
        normalized["slug"] = generate_slug(normalized["title"])
    else:
        normalized["slug"] = previous.slug

    normalized["date"] = normalize_date(normalized["date"])
    normalized["time"] = normalize_time(normalized["time"])
    return normalized


async def validate_booking(candidate: Mapping[str, Any], store: RecordStore) -> dict[str, Any]:
    """
    Validate a booking candidate against the store.

    Raises:
        InvalidEmailError: The email fails the syntax check.
        DanglingReferenceError: No event exists with the referenced id.
    """
    email = candidate.get("email")
    if not isinstance(email, str):
        raise InvalidEmailError()
    email = email.strip().lower()
    if not EMAIL_REGEX.match(email):
        raise InvalidEmailError()

    event_id = candidate.get("event_id")
    if event_id is None or await store.find_by_id(Event, event_id) is None:
        raise DanglingReferenceError(event_id)

    return {"event_id": event_id, "email": email}
