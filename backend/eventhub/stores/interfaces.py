"""Store interfaces (repository pattern).

Stores must be swappable; validators and services only see this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Sequence, TypeVar

T = TypeVar("T")


class UniquenessViolation(Exception):
    """Raised by a store when a write collides with a unique constraint."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Unique constraint violated on {field}")
        self.field = field


class RecordStore(ABC):
    """Interface for record persistence operations."""

    @abstractmethod
    async def find_by_id(self, model: type[T], record_id: Any) -> T | None:
        """Return a record by primary key, or None if not found."""
        ...

    @abstractmethod
    async def find_one_by(self, model: type[T], **criteria: Any) -> T | None:
        """Return the first record whose columns equal the given values."""
        ...

    @abstractmethod
    async def insert(self, record: T) -> T:
        """Persist a new record and return it with store-assigned fields.

        Raises:
            UniquenessViolation: If a unique column already holds the value.
        """
        ...

    @abstractmethod
    async def save(self, record: T) -> T:
        """Flush changes to an already persisted record.

        Raises:
            UniquenessViolation: If a unique column already holds the value.
        """
        ...

    @abstractmethod
    async def find_many(
        self,
        model: type[T],
        *,
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: int | None = None,
        **criteria: Any,
    ) -> list[T]:
        """Return records matching the criteria in the given order."""
        ...

    @abstractmethod
    async def count(self, model: type[T], **criteria: Any) -> int:
        """Return the number of records matching the criteria."""
        ...
