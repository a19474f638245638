"""
Booking endpoints: reserve a seat with an email address.
"""

from fastapi import APIRouter, Depends, status

from eventhub.api.deps import get_store
from eventhub.schemas.booking import BookingCreate, BookingResponse
from eventhub.services.booking_service import create_booking
from eventhub.stores import RecordStore

router = APIRouter(prefix="/bookings", tags=["Bookings"])


@router.post("/", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking_endpoint(
    booking_data: BookingCreate,
    store: RecordStore = Depends(get_store),
):
    """
    Book a seat for an event.

    The email is trimmed and lowercased before the syntax check. Booking an
    event that does not exist returns 404.
    """
    return await create_booking(store, booking_data)
