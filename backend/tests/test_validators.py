"""
Tests for the event and booking write-path validators.
"""

import pytest

from eventhub.core.errors import (
    DanglingReferenceError,
    InvalidDateError,
    InvalidEmailError,
    InvalidTimeError,
    MissingFieldError,
)
from eventhub.domain.validators import normalize_event, validate_booking
from eventhub.models.event import Event


class TestNormalizeEvent:
    def test_normalizes_new_event(self, event_payload):
        fields = normalize_event(event_payload)
        assert fields["slug"] == "my-dev-talk"
        assert fields["date"] == "2025-01-31"
        assert fields["time"] == "14:30"

    def test_does_not_mutate_candidate(self, event_payload):
        original = dict(event_payload)
        normalize_event(event_payload)
        assert event_payload == original

    def test_trims_text_fields(self, event_payload):
        event_payload["venue"] = "  Main Hall  "
        assert normalize_event(event_payload)["venue"] == "Main Hall"

    @pytest.mark.parametrize("field", ["title", "description", "venue", "organizer", "image"])
    def test_blank_text_field_rejected(self, event_payload, field):
        event_payload[field] = "   "
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_event(event_payload)
        assert exc_info.value.field == field

    def test_absent_text_field_rejected(self, event_payload):
        del event_payload["overview"]
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_event(event_payload)
        assert exc_info.value.field == "overview"

    def test_empty_tags_rejected(self, event_payload):
        event_payload["tags"] = []
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_event(event_payload)
        assert exc_info.value.field == "tags"

    def test_agenda_must_be_a_list(self, event_payload):
        event_payload["agenda"] = "Keynote, Panel"
        with pytest.raises(MissingFieldError) as exc_info:
            normalize_event(event_payload)
        assert exc_info.value.field == "agenda"

    def test_invalid_date_propagates(self, event_payload):
        event_payload["date"] = "someday"
        with pytest.raises(InvalidDateError):
            normalize_event(event_payload)

    def test_invalid_time_propagates(self, event_payload):
        event_payload["time"] = "25:00"
        with pytest.raises(InvalidTimeError):
            normalize_event(event_payload)

    def test_title_change_regenerates_slug(self, event_payload):
        previous = Event(**normalize_event(event_payload))
        event_payload["title"] = "Renamed Talk"
        assert normalize_event(event_payload, previous=previous)["slug"] == "renamed-talk"

    def test_unchanged_title_keeps_stored_slug(self, event_payload):
        previous = Event(**normalize_event(event_payload))
        previous.slug = "hand-picked-slug"
        event_payload["description"] = "Updated description"
        assert normalize_event(event_payload, previous=previous)["slug"] == "hand-picked-slug"


class TestValidateBooking:
    @pytest.mark.asyncio
    async def test_valid_booking(self, store, test_event):
        fields = await validate_booking(
            {"event_id": test_event.id, "email": "  Visitor@Example.COM "}, store
        )
        assert fields == {"event_id": test_event.id, "email": "visitor@example.com"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email", ["not-an-email", "a@b", "two words@example.com", "@example.com", ""])
    async def test_invalid_email_rejected(self, store, test_event, email):
        with pytest.raises(InvalidEmailError):
            await validate_booking({"event_id": test_event.id, "email": email}, store)

    @pytest.mark.asyncio
    async def test_unknown_event_rejected(self, store):
        with pytest.raises(DanglingReferenceError) as exc_info:
            await validate_booking({"event_id": 99999, "email": "visitor@example.com"}, store)
        assert exc_info.value.event_id == 99999

    @pytest.mark.asyncio
    async def test_email_checked_before_event_lookup(self, store):
        with pytest.raises(InvalidEmailError):
            await validate_booking({"event_id": 99999, "email": "not-an-email"}, store)
