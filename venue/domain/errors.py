"""Domain error codes for the venue module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_ALREADY_EXISTS = "EVENT_ALREADY_EXISTS"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    INVALID_SEAT = "INVALID_SEAT"
    SEAT_TAKEN = "SEAT_TAKEN"
    INVALID_EVENT_CODE = "INVALID_EVENT_CODE"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventAlreadyExistsError(DomainError):
    """Raised when an event code is already registered."""

    def __init__(self, event_code: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_EXISTS,
            message=f"An event with code {event_code} already exists",
        )
        object.__setattr__(self, "event_code", event_code)


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_code: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"No event exists with code {event_code}",
        )
        object.__setattr__(self, "event_code", event_code)


class TicketNotFoundError(DomainError):
    """Raised when no ticket is booked for a seat."""

    def __init__(self, event_code: int, seat: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message=f"No booking found for seat {seat} in event {event_code}",
        )
        object.__setattr__(self, "event_code", event_code)
        object.__setattr__(self, "seat", seat)


class InvalidSeatError(DomainError):
    """Raised when a seat fails the section/number rule."""

    def __init__(self, seat: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SEAT,
            message="Invalid seat. Section 'a'-'h' and number 1-500",
        )
        object.__setattr__(self, "seat", seat)


class SeatTakenError(DomainError):
    """Raised when a seat is already booked for an event."""

    def __init__(self, event_code: int, seat: str) -> None:
        super().__init__(
            code=ErrorCode.SEAT_TAKEN,
            message=f"Seat {seat} is already booked for this event",
        )
        object.__setattr__(self, "event_code", event_code)
        object.__setattr__(self, "seat", seat)


class InvalidEventCodeError(DomainError):
    """Raised when an event code is not a non-negative integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_CODE,
            message="Invalid code",
        )


class FieldTooLongError(DomainError):
    """Raised when a text field exceeds its maximum length."""

    def __init__(self, field: str, max_length: int) -> None:
        super().__init__(
            code=ErrorCode.FIELD_TOO_LONG,
            message=f"{field} must be at most {max_length} characters",
        )
        object.__setattr__(self, "field", field)
        object.__setattr__(self, "max_length", max_length)
