"""Domain models held by the record store.

Both record kinds live in one key namespace; ``kind`` is the tag that
tells them apart and ``key`` is their composite store key.
"""

from dataclasses import dataclass
from enum import Enum

from venue.domain.value_objects import (
    DATE_MAX_LENGTH,
    NAME_MAX_LENGTH,
    TAX_ID_MAX_LENGTH,
    TIME_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    check_length,
    event_key,
    ticket_key,
)


class RecordKind(Enum):
    """Tag of a stored record."""

    EVENT = "event"
    TICKET = "ticket"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    code: int
    title: str
    date: str
    time: str

    def __post_init__(self) -> None:
        check_length("title", self.title, TITLE_MAX_LENGTH)
        check_length("date", self.date, DATE_MAX_LENGTH)
        check_length("time", self.time, TIME_MAX_LENGTH)

    @property
    def kind(self) -> RecordKind:
        return RecordKind.EVENT

    @property
    def key(self) -> str:
        return event_key(self.code)


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket for one seat of an event."""

    event_code: int
    seat: str
    tax_id: str
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        check_length("tax_id", self.tax_id, TAX_ID_MAX_LENGTH)
        check_length("first_name", self.first_name, NAME_MAX_LENGTH)
        check_length("last_name", self.last_name, NAME_MAX_LENGTH)

    @property
    def kind(self) -> RecordKind:
        return RecordKind.TICKET

    @property
    def key(self) -> str:
        return ticket_key(self.event_code, self.seat)


Record = Event | Ticket
