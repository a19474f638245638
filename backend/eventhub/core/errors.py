"""Domain error codes for event and booking writes."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_FIELD = "MISSING_FIELD"
    INVALID_DATE = "INVALID_DATE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_EMAIL = "INVALID_EMAIL"
    DUPLICATE_SLUG = "DUPLICATE_SLUG"
    DANGLING_REFERENCE = "DANGLING_REFERENCE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MissingFieldError(DomainError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(
            code=ErrorCode.MISSING_FIELD,
            message=f'Field "{field}" is required',
        )
        self.field = field


class InvalidDateError(DomainError):
    """Raised when an event date cannot be parsed into a calendar date."""

    def __init__(self, value: object = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DATE,
            message="Invalid event date",
        )
        self.value = value


class InvalidTimeError(DomainError):
    """Raised when an event time is malformed or out of range."""

    def __init__(self, value: object = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME,
            message="Invalid event time",
        )
        self.value = value


class InvalidEmailError(DomainError):
    """Raised when a booking email fails the syntax check."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EMAIL,
            message="Invalid email address",
        )


class DuplicateSlugError(DomainError):
    """Raised when another event already owns the slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_SLUG,
            message="An event with this title already exists",
        )
        self.slug = slug


class DanglingReferenceError(DomainError):
    """Raised when a booking points at an event that does not exist."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.DANGLING_REFERENCE,
            message="Cannot create booking: referenced event does not exist",
        )
        self.event_id = event_id


class EventNotFoundError(DomainError):
    """Raised when an event lookup finds nothing."""

    def __init__(self, event_id: object) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id
