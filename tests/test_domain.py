"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from venue.domain import Event, EventCode, RecordKind, Seat, Ticket, event_key, ticket_key
from venue.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    FieldTooLongError,
    InvalidEventCodeError,
    InvalidSeatError,
)
from venue.domain.value_objects import is_valid_seat


class TestKeys:
    """Tests for composite key derivation."""

    def test_event_key(self):
        assert event_key(101) == "E_101"

    def test_ticket_key(self):
        assert ticket_key(101, "c149") == "T_101_c149"

    def test_ticket_key_keeps_seat_case(self):
        """The seat goes into the key exactly as entered."""
        assert ticket_key(7, "C12") == "T_7_C12"
        assert ticket_key(7, "C12") != ticket_key(7, "c12")

    def test_event_and_ticket_keys_never_collide(self):
        assert event_key(1) != ticket_key(1, "a1")

    def test_records_expose_their_key_and_kind(self):
        event = Event(code=3, title="Play", date="02/02/2025", time="19:30")
        ticket = Ticket(event_code=3, seat="b20", tax_id="1", first_name="A", last_name="B")

        assert (event.key, event.kind) == ("E_3", RecordKind.EVENT)
        assert (ticket.key, ticket.kind) == ("T_3_b20", RecordKind.TICKET)


class TestSeat:
    """Tests for the seat rule: section a-h, number 1-500."""

    @pytest.mark.parametrize("seat", ["c1", "a1", "h500", "C149", "H7", "c001"])
    def test_accepts_valid_seats(self, seat):
        assert is_valid_seat(seat)
        assert Seat(seat).value == seat

    @pytest.mark.parametrize(
        "seat",
        [
            "i1",  # section out of range
            "c501",  # number too large
            "c0",  # number too small
            "c",  # too short
            "c1000",  # too long
            "1c1",  # section is not a letter
            "c12x",  # trailing garbage
            "c-1",
            "",
        ],
    )
    def test_rejects_invalid_seats(self, seat):
        assert not is_valid_seat(seat)
        with pytest.raises(InvalidSeatError):
            Seat(seat)

    def test_section_and_number(self):
        seat = Seat("D250")
        assert seat.section == "d"
        assert seat.number == 250


class TestEventCode:
    """Tests for EventCode value object."""

    def test_accepts_zero(self):
        assert EventCode(0).key == "E_0"

    def test_rejects_negative(self):
        with pytest.raises(InvalidEventCodeError):
            EventCode(-1)

    def test_rejects_bool(self):
        with pytest.raises(InvalidEventCodeError):
            EventCode(True)

    def test_from_string(self):
        assert EventCode.from_string("42").value == 42

    def test_from_string_unparsable(self):
        with pytest.raises(InvalidEventCodeError):
            EventCode.from_string("forty-two")


class TestFieldLimits:
    """Text fields raise instead of being truncated."""

    def test_title_at_limit_is_kept(self):
        event = Event(code=1, title="x" * 99, date="01/01/2025", time="20:00")
        assert len(event.title) == 99

    def test_title_over_limit_raises(self):
        with pytest.raises(FieldTooLongError) as exc_info:
            Event(code=1, title="x" * 100, date="01/01/2025", time="20:00")
        assert exc_info.value.code is ErrorCode.FIELD_TOO_LONG

    def test_tax_id_over_limit_raises(self):
        with pytest.raises(FieldTooLongError):
            Ticket(event_code=1, seat="a1", tax_id="1" * 11, first_name="A", last_name="B")

    def test_name_over_limit_raises(self):
        with pytest.raises(FieldTooLongError):
            Ticket(event_code=1, seat="a1", tax_id="1", first_name="A" * 50, last_name="B")


class TestDomainError:
    """Tests for the error base class."""

    def test_str_includes_code(self):
        error = EventNotFoundError(5)
        assert str(error) == "EVENT_NOT_FOUND: No event exists with code 5"

    def test_errors_are_domain_errors(self):
        assert isinstance(InvalidSeatError("z9"), DomainError)
        assert InvalidSeatError("z9").seat == "z9"
