"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

from venue.domain.errors import FieldTooLongError, InvalidEventCodeError, InvalidSeatError

SEAT_SECTIONS = "abcdefgh"
SEAT_MIN_NUMBER = 1
SEAT_MAX_NUMBER = 500

TITLE_MAX_LENGTH = 99
DATE_MAX_LENGTH = 10
TIME_MAX_LENGTH = 5
TAX_ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 49

EVENT_KEY_PREFIX = "E_"
TICKET_KEY_PREFIX = "T_"


def event_key(code: int) -> str:
    """Composite store key of an event."""
    return f"{EVENT_KEY_PREFIX}{code}"


def ticket_key(event_code: int, seat: str) -> str:
    """Composite store key of a ticket. The seat is used as entered."""
    return f"{TICKET_KEY_PREFIX}{event_code}_{seat}"


def is_valid_seat(seat: str) -> bool:
    """Section letter a-h (any case) followed by a number 1-500."""
    if not 2 <= len(seat) <= 4:
        return False
    if seat[0].lower() not in SEAT_SECTIONS:
        return False
    digits = seat[1:]
    if not (digits.isascii() and digits.isdigit()):
        return False
    return SEAT_MIN_NUMBER <= int(digits) <= SEAT_MAX_NUMBER


def check_length(field: str, value: str, max_length: int) -> str:
    if len(value) > max_length:
        raise FieldTooLongError(field, max_length)
    return value


@dataclass(frozen=True)
class EventCode:
    """Unique non-negative identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0:
            raise InvalidEventCodeError()

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(value=int(value))
        except ValueError:
            raise InvalidEventCodeError() from None

    @property
    def key(self) -> str:
        return event_key(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Seat:
    """Seat label such as ``c149``, stored with the case it was entered in."""

    value: str

    def __post_init__(self) -> None:
        if not is_valid_seat(self.value):
            raise InvalidSeatError(self.value)

    @property
    def section(self) -> str:
        return self.value[0].lower()

    @property
    def number(self) -> int:
        return int(self.value[1:])

    def __str__(self) -> str:
        return self.value
