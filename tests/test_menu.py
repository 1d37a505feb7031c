"""Tests for the venue_menu management command.

Run with: pytest tests/test_menu.py -v
"""

from io import StringIO

from django.core.management import call_command

from venue.apps import get_venue_service


def run_menu(*lines: str) -> str:
    out = StringIO()
    stdin = StringIO("".join(f"{line}\n" for line in lines))
    call_command("venue_menu", stdin=stdin, stdout=out)
    return out.getvalue()


ADD_CONCERT = ("1", "1", "101", "Concert", "01/01/2025", "20:00")
ISSUE_ANA = ("1", "101", "c149", "1234567890", "Ana", "Popescu")


class TestVenueMenu:
    """Tests for the interactive menu."""

    def test_exit_releases_all_data(self):
        output = run_menu(*ADD_CONCERT, "5", "3")
        assert "-> Event 'Concert' added successfully." in output
        assert "Program terminated successfully." in output
        assert get_venue_service().list_events() == []

    def test_end_of_input_exits(self):
        output = run_menu("1")
        assert "Program terminated successfully." in output

    def test_invalid_choice(self):
        output = run_menu("abc", "3")
        assert "(!) Invalid choice. Please try again." in output

    def test_duplicate_event_rejected_before_fields(self):
        output = run_menu(*ADD_CONCERT, "1", "101", "5", "3")
        assert "(!) Error: An event with this code already exists." in output

    def test_negative_code_rejected(self):
        output = run_menu("1", "1", "-4", "5", "3")
        assert "(!) Invalid code." in output

    def test_issue_and_list_tickets(self):
        output = run_menu(*ADD_CONCERT, "5", "2", *ISSUE_ANA, "3", "101", "5", "3")
        assert "-> Ticket for seat c149 issued successfully." in output
        assert "--- LIST OF TICKETS FOR EVENT 101 ---" in output
        assert "  Last Name: Popescu" in output

    def test_seat_rules(self):
        output = run_menu(
            *ADD_CONCERT,
            "5",
            "2",
            *ISSUE_ANA,
            "1", "101", "c149",
            "1", "101", "i1",
            "1", "999",
            "5",
            "3",
        )
        assert "(!) Error: Seat c149 is already booked for this event." in output
        assert "(!) Error: Invalid seat. Section 'a'-'h' and number 1-500." in output
        assert "(!) Error: No event exists with code 999." in output

    def test_search_ticket(self):
        output = run_menu(*ADD_CONCERT, "5", "2", *ISSUE_ANA, "2", "101", "c149", "5", "3")
        assert "-> Ticket found:" in output
        assert "  Tax ID: 1234567890" in output

    def test_delete_event_cascades(self):
        output = run_menu(
            *ADD_CONCERT,
            "5",
            "2",
            *ISSUE_ANA,
            "5",
            "1",
            "3", "101",
            "2", "101",
            "5",
            "3",
        )
        assert "-> Deleted 1 tickets associated with the event." in output
        assert "(!) No event found with code 101." in output

    def test_cancel_ticket(self):
        output = run_menu(*ADD_CONCERT, "5", "2", *ISSUE_ANA, "4", "101", "c149", "4", "101", "c149", "5", "3")
        assert "-> Ticket for seat c149 cancelled." in output
        assert "(!) No booking found for seat c149 in event 101." in output
