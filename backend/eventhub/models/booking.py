"""
Booking model representing a visitor's seat reservation for an event.

`event_id` is a weak reference: it is indexed for per-event lookups but is not
a foreign key. Existence is checked by the booking validator at write time.
"""

from sqlalchemy import Column, Integer, String

from eventhub.db.base import Base, TimestampMixin


class Booking(Base, TimestampMixin):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    event_id = Column(Integer, nullable=False, index=True)
    email = Column(String(320), nullable=False)

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, event={self.event_id}, email={self.email})>"
