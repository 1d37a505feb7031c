from venue.domain.models import Event, Record, RecordKind, Ticket
from venue.domain.value_objects import EventCode, Seat, event_key, ticket_key

__all__ = [
    "Event",
    "Ticket",
    "Record",
    "RecordKind",
    "EventCode",
    "Seat",
    "event_key",
    "ticket_key",
]
