"""
Tests for the SQLAlchemy record store.
"""

import pytest

from eventhub.domain.validators import normalize_event
from eventhub.models.booking import Booking
from eventhub.models.event import Event
from eventhub.stores import UniquenessViolation


@pytest.mark.asyncio
async def test_insert_assigns_id_and_timestamps(store, event_payload):
    event = await store.insert(Event(**normalize_event(event_payload)))
    assert event.id is not None
    assert event.created_at is not None
    assert event.updated_at is not None


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(store):
    assert await store.find_by_id(Event, 12345) is None


@pytest.mark.asyncio
async def test_duplicate_slug_raises_uniqueness_violation(store, db_session, event_payload):
    await store.insert(Event(**normalize_event(event_payload)))
    await db_session.commit()

    with pytest.raises(UniquenessViolation) as exc_info:
        await store.insert(Event(**normalize_event(event_payload)))
    assert exc_info.value.field == "slug"

    # The first record survives the rejected write
    assert await store.count(Event) == 1


@pytest.mark.asyncio
async def test_find_many_filters_by_event(store, test_event):
    await store.insert(Booking(event_id=test_event.id, email="a@example.com"))
    await store.insert(Booking(event_id=test_event.id + 1, email="b@example.com"))

    bookings = await store.find_many(Booking, event_id=test_event.id)
    assert [b.email for b in bookings] == ["a@example.com"]
    assert await store.count(Booking) == 2
