from eventhub.schemas.event import EventCreate, EventUpdate, EventResponse, EventListResponse
from eventhub.schemas.booking import BookingCreate, BookingResponse

__all__ = [
    "EventCreate", "EventUpdate", "EventResponse", "EventListResponse",
    "BookingCreate", "BookingResponse",
]
