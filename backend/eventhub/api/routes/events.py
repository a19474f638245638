"""
Event endpoints: publish, update and browse events.
"""

from fastapi import APIRouter, Depends, Query, status

from eventhub.api.deps import get_store
from eventhub.schemas.booking import BookingResponse
from eventhub.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from eventhub.services.booking_service import list_bookings_for_event
from eventhub.services.event_service import (
    create_event,
    get_event,
    get_event_by_slug,
    list_events,
    update_event,
)
from eventhub.stores import RecordStore

router = APIRouter(prefix="/events", tags=["Events"])


@router.post("/", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event_endpoint(
    event_data: EventCreate,
    store: RecordStore = Depends(get_store),
):
    """
    Publish a new event.

    The slug is derived from the title; date and time are stored in
    canonical YYYY-MM-DD and 24-hour HH:mm form.
    """
    return await create_event(store, event_data)


@router.get("/", response_model=EventListResponse)
async def list_events_endpoint(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    store: RecordStore = Depends(get_store),
):
    """List events with pagination, newest first."""
    events, total = await list_events(store, page, page_size)
    return EventListResponse(
        events=[EventResponse.model_validate(e) for e in events],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/slug/{slug}", response_model=EventResponse)
async def get_event_by_slug_endpoint(slug: str, store: RecordStore = Depends(get_store)):
    return await get_event_by_slug(store, slug)


@router.get("/{event_id}", response_model=EventResponse)
async def get_event_endpoint(event_id: int, store: RecordStore = Depends(get_store)):
    return await get_event(store, event_id)


@router.patch("/{event_id}", response_model=EventResponse)
async def update_event_endpoint(
    event_id: int,
    changes: EventUpdate,
    store: RecordStore = Depends(get_store),
):
    """Update an event. Changing the title regenerates its slug."""
    return await update_event(store, event_id, changes)


@router.get("/{event_id}/bookings", response_model=list[BookingResponse])
async def list_event_bookings_endpoint(event_id: int, store: RecordStore = Depends(get_store)):
    """All bookings made against an event."""
    return await list_bookings_for_event(store, event_id)
