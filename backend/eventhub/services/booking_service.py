"""
Booking service: validated seat reservations.

A booking is checked once, at creation: the email must pass the syntax check
and the referenced event must exist. Neither check is retried.
"""

from eventhub.core.errors import DomainError
from eventhub.core.logging import get_logger
from eventhub.core.metrics import record_validation_failure, record_write, record_write_latency
from eventhub.domain.validators import validate_booking
from eventhub.models.booking import Booking
from eventhub.schemas.booking import BookingCreate
from eventhub.services.event_service import get_event
from eventhub.stores.interfaces import RecordStore

logger = get_logger(__name__)


async def create_booking(store: RecordStore, booking_data: BookingCreate) -> Booking:
    """Validate the booking against the store, then insert it."""
    with record_write_latency.labels(kind="booking").time():
        try:
            fields = await validate_booking(booking_data.model_dump(), store)
        except DomainError as e:
            record_write("booking", "rejected")
            record_validation_failure(e.code.value)
            logger.warning(
                "booking_rejected",
                code=e.code.value,
                reason=e.message,
                event_id=booking_data.event_id,
            )
            raise
        booking = await store.insert(Booking(**fields))

    record_write("booking", "success")
    logger.info("booking_created", booking_id=booking.id, event_id=booking.event_id)
    return booking


async def list_bookings_for_event(store: RecordStore, event_id: int) -> list[Booking]:
    """Get all bookings for an event, oldest first."""
    await get_event(store, event_id)
    return await store.find_many(
        Booking,
        order_by=(Booking.created_at.asc(), Booking.id.asc()),
        event_id=event_id,
    )
