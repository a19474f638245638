"""
Event service handling create, update and read operations.

Every write goes through normalize_event before reaching the store; the
store's unique constraint on slug is the final arbiter between writers.
"""

from typing import Any

from eventhub.core.errors import DomainError, DuplicateSlugError, EventNotFoundError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_validation_failure, record_write, record_write_latency
from eventhub.domain.validators import normalize_event
from eventhub.models.event import Event
from eventhub.schemas.event import EventCreate, EventUpdate
from eventhub.stores.interfaces import RecordStore, UniquenessViolation

logger = get_logger(__name__)


def _reject(error: DomainError, **context: Any) -> None:
    record_write("event", "rejected")
    record_validation_failure(error.code.value)
    logger.warning("event_rejected", code=error.code.value, reason=error.message, **context)


async def _persist(store: RecordStore, event: Event, *, is_new: bool) -> Event:
    # A failed flush rolls the session back and expires the record
    slug = event.slug
    try:
        if is_new:
            return await store.insert(event)
        return await store.save(event)
    except UniquenessViolation as e:
        if e.field != "slug":
            raise
        raise DuplicateSlugError(slug) from e


async def create_event(store: RecordStore, event_data: EventCreate) -> Event:
    """Validate, normalize and insert a new event."""
    with record_write_latency.labels(kind="event").time():
        try:
            fields = normalize_event(event_data.model_dump())
            event = await _persist(store, Event(**fields), is_new=True)
        except DomainError as e:
            _reject(e, title=event_data.title)
            raise

    record_write("event", "success")
    logger.info("event_created", event_id=event.id, slug=event.slug, date=event.date, time=event.time)
    return event


async def update_event(store: RecordStore, event_id: int, changes: EventUpdate) -> Event:
    """
    Apply a partial update and re-run full normalization.

    The slug is regenerated only when the title actually changes.
    """
    event = await get_event(store, event_id)
    candidate = {field: getattr(event, field) for field in EventCreate.model_fields}
    candidate.update(changes.model_dump(exclude_unset=True))

    with record_write_latency.labels(kind="event").time():
        try:
            fields = normalize_event(candidate, previous=event)
            for field, value in fields.items():
                setattr(event, field, value)
            event = await _persist(store, event, is_new=False)
        except DomainError as e:
            _reject(e, event_id=event_id)
            raise

    record_write("event", "success")
    logger.info("event_updated", event_id=event.id, slug=event.slug)
    return event


async def get_event(store: RecordStore, event_id: int) -> Event:
    """Get a single event by ID."""
    event = await store.find_by_id(Event, event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    return event


async def get_event_by_slug(store: RecordStore, slug: str) -> Event:
    """Get a single event by its slug."""
    event = await store.find_one_by(Event, slug=slug)
    if event is None:
        raise EventNotFoundError(slug)
    return event


async def list_events(
    store: RecordStore,
    page: int = 1,
    page_size: int = 20,
) -> tuple[list[Event], int]:
    """List events newest first, with pagination."""
    total = await store.count(Event)
    events = await store.find_many(
        Event,
        order_by=(Event.created_at.desc(), Event.id.desc()),
        offset=(page - 1) * page_size,
        limit=page_size,
    )
    return events, total
