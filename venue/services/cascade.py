"""Cascading removal of an event together with its tickets.

Ticket keys are collected in one in-order pass before anything is
deleted, so the tree is never mutated while it is being walked.
"""

from venue.domain import RecordKind, event_key
from venue.domain.errors import EventNotFoundError
from venue.stores.interfaces import RecordStore


def collect_ticket_keys(store: RecordStore, event_code: int) -> list[str]:
    """Return the keys of every ticket booked for event_code, in key order."""
    return [
        record.key
        for record in store.traverse_filtered(RecordKind.TICKET, event_code)
    ]


def remove_event_cascade(store: RecordStore, event_code: int) -> int:
    """Delete an event and all of its tickets.

    Returns:
        The number of tickets removed.

    Raises:
        EventNotFoundError: If the event is not in the store. Nothing is
            deleted in that case.
    """
    key = event_key(event_code)
    if store.search(key) is None:
        raise EventNotFoundError(event_code)

    ticket_keys = collect_ticket_keys(store, event_code)
    for ticket in ticket_keys:
        store.delete(ticket)
    store.delete(key)
    return len(ticket_keys)
