"""
Event model: a single publishable happening.

Key design decisions:
- `slug` carries a unique constraint; the database arbitrates concurrent claims
- `date` and `time` are stored as canonical text (YYYY-MM-DD, HH:mm)
- `agenda` and `tags` are JSON lists so the same schema runs on Postgres and SQLite
"""

from sqlalchemy import Column, Integer, String, Text, JSON, UniqueConstraint

from eventhub.db.base import Base, TimestampMixin


class Event(Base, TimestampMixin):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    overview = Column(Text, nullable=False)
    image = Column(String(1000), nullable=False)
    venue = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    date = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    mode = Column(String(50), nullable=False)
    audience = Column(String(255), nullable=False)
    agenda = Column(JSON, nullable=False)
    organizer = Column(Text, nullable=False)
    tags = Column(JSON, nullable=False)

    __table_args__ = (
        UniqueConstraint("slug", name="uq_events_slug"),
    )

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, slug={self.slug}, date={self.date} {self.time})>"
