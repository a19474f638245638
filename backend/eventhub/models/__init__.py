from eventhub.models.event import Event
from eventhub.models.booking import Booking

__all__ = ["Event", "Booking"]
