"""Venue service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

from loguru import logger

from venue.domain import Event, EventCode, RecordKind, Seat, Ticket, ticket_key
from venue.domain.errors import (
    EventAlreadyExistsError,
    EventNotFoundError,
    SeatTakenError,
    TicketNotFoundError,
)
from venue.services.cascade import remove_event_cascade
from venue.stores.interfaces import RecordStore


class VenueService:
    """Service for event and ticket operations over one record store."""

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def add_event(self, code: int, title: str, date: str, time: str) -> Event:
        """Register a new event.

        Raises:
            InvalidEventCodeError: If code is negative.
            EventAlreadyExistsError: If an event with this code exists.
            FieldTooLongError: If a text field exceeds its limit.
        """
        event_code = EventCode(code)
        if self._store.search(event_code.key) is not None:
            logger.warning(f"event {code} rejected: code already registered")
            raise EventAlreadyExistsError(code)

        event = Event(code=event_code.value, title=title, date=date, time=time)
        self._store.insert(event.key, event)
        logger.info(f"event {code} added: {title!r}")
        return event

    def add_ticket(
        self,
        event_code: int,
        seat: str,
        tax_id: str,
        first_name: str,
        last_name: str,
    ) -> Ticket:
        """Issue a ticket for a seat of an existing event.

        Raises:
            InvalidEventCodeError: If event_code is negative.
            EventNotFoundError: If the event does not exist.
            InvalidSeatError: If the seat is outside a1-h500.
            SeatTakenError: If the seat is already booked for the event.
            FieldTooLongError: If a text field exceeds its limit.
        """
        code = EventCode(event_code)
        if self._store.search(code.key) is None:
            logger.warning(f"ticket rejected: event {event_code} not found")
            raise EventNotFoundError(event_code)

        valid_seat = Seat(seat)
        key = ticket_key(code.value, valid_seat.value)
        if self._store.search(key) is not None:
            logger.warning(f"ticket rejected: seat {seat} taken for event {event_code}")
            raise SeatTakenError(event_code, seat)

        ticket = Ticket(
            event_code=code.value,
            seat=valid_seat.value,
            tax_id=tax_id,
            first_name=first_name,
            last_name=last_name,
        )
        self._store.insert(key, ticket)
        logger.info(f"ticket issued: event {event_code} seat {seat}")
        return ticket

    def find_event(self, code: int) -> Event | None:
        """Return the event with this code, or None."""
        record = self._store.search(EventCode(code).key)
        return record if isinstance(record, Event) else None

    def find_ticket(self, event_code: int, seat: str) -> Ticket | None:
        """Return the ticket booked for a seat, or None."""
        code = EventCode(event_code)
        record = self._store.search(ticket_key(code.value, seat))
        return record if isinstance(record, Ticket) else None

    def remove_event(self, code: int) -> int:
        """Delete an event and every ticket booked for it.

        Returns:
            The number of tickets removed along with the event.

        Raises:
            InvalidEventCodeError: If code is negative.
            EventNotFoundError: If the event does not exist.
        """
        event_code = EventCode(code)
        try:
            removed = remove_event_cascade(self._store, event_code.value)
        except EventNotFoundError:
            logger.warning(f"remove rejected: event {code} not found")
            raise
        logger.info(f"event {code} removed with {removed} tickets")
        return removed

    def remove_ticket(self, event_code: int, seat: str) -> None:
        """Cancel a single ticket.

        Raises:
            TicketNotFoundError: If no ticket is booked for the seat.
        """
        key = ticket_key(EventCode(event_code).value, seat)
        if self._store.search(key) is None:
            raise TicketNotFoundError(event_code, seat)
        self._store.delete(key)
        logger.info(f"ticket cancelled: event {event_code} seat {seat}")

    def list_events(self) -> list[Event]:
        """Return all events in key order."""
        return [
            record
            for record in self._store.traverse_filtered(RecordKind.EVENT)
            if isinstance(record, Event)
        ]

    def list_tickets(self, event_code: int) -> list[Ticket]:
        """Return the tickets of an event in key order.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        code = EventCode(event_code)
        if self._store.search(code.key) is None:
            raise EventNotFoundError(event_code)
        return [
            record
            for record in self._store.traverse_filtered(RecordKind.TICKET, code.value)
            if isinstance(record, Ticket)
        ]

    def clear(self) -> int:
        """Delete every record. The service stays usable afterwards."""
        released = self._store.destroy()
        logger.info(f"store cleared: {released} records released")
        return released
