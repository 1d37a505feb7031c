"""Interactive text menu over the venue record store.

Usage: python manage.py venue_menu

Input is read line by line; anything that is not an integer where a
number is expected counts as -1. End of input leaves the menus, releases
every record and exits.
"""

import sys
from typing import Any, TextIO

from django.core.management.base import BaseCommand

from venue.apps import get_venue_service
from venue.domain import Event, Ticket
from venue.domain.errors import DomainError
from venue.domain.value_objects import is_valid_seat
from venue.services import VenueService

RULE = "-" * 40


class Command(BaseCommand):
    help = "Manage events and tickets through an interactive menu."
    stealth_options = ("stdin",)

    stdin: TextIO
    service: VenueService

    def handle(self, *args: Any, **options: Any) -> None:
        self.stdin = options.get("stdin") or sys.stdin
        self.service = get_venue_service()
        try:
            self.main_menu()
        except EOFError:
            self.stdout.write("")
        self.stdout.write("Deleting all data and terminating the program...")
        self.service.clear()
        self.stdout.write("Program terminated successfully.")

    # --- input helpers ---

    def read_line(self, prompt: str) -> str:
        self.stdout.write(prompt, ending="")
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def read_int(self, prompt: str) -> int:
        try:
            return int(self.read_line(prompt).strip())
        except ValueError:
            return -1

    def read_code(self, prompt: str) -> int | None:
        code = self.read_int(prompt)
        if code < 0:
            self.error("Invalid code.")
            return None
        return code

    def error(self, message: str) -> None:
        self.stdout.write(f"(!) {message}")

    def print_event(self, event: Event) -> None:
        self.stdout.write(RULE)
        self.stdout.write(f"  Event Code: {event.code}")
        self.stdout.write(f"  Title: {event.title}")
        self.stdout.write(f"  Date: {event.date}")
        self.stdout.write(f"  Time: {event.time}")
        self.stdout.write(RULE)

    def print_ticket(self, ticket: Ticket) -> None:
        self.stdout.write(RULE)
        self.stdout.write(f"  Event (Code): {ticket.event_code}")
        self.stdout.write(f"  Seat: {ticket.seat}")
        self.stdout.write(f"  First Name: {ticket.first_name}")
        self.stdout.write(f"  Last Name: {ticket.last_name}")
        self.stdout.write(f"  Tax ID: {ticket.tax_id}")
        self.stdout.write(RULE)

    # --- menus ---

    def main_menu(self) -> None:
        while True:
            self.stdout.write("\n--- VENUE MANAGEMENT MAIN MENU ---")
            self.stdout.write("1. Manage Events")
            self.stdout.write("2. Manage Tickets")
            self.stdout.write("3. Exit and Delete All Data")
            choice = self.read_int("Select [1-3]: ")
            if choice == 1:
                self.event_menu()
            elif choice == 2:
                self.ticket_menu()
            elif choice == 3:
                return
            else:
                self.error("Invalid choice. Please try again.")

    def event_menu(self) -> None:
        actions = {
            1: self.add_event,
            2: self.find_event,
            3: self.remove_event,
            4: self.print_events,
        }
        while True:
            self.stdout.write("\n--- Event Management Menu ---")
            self.stdout.write("1. Add Event")
            self.stdout.write("2. Search for Event (by Code)")
            self.stdout.write("3. Delete Event (by Code)")
            self.stdout.write("4. Print List of Events")
            self.stdout.write("5. Return to Main Menu")
            choice = self.read_int("Select [1-5]: ")
            if choice == 5:
                return
            action = actions.get(choice)
            if action is None:
                self.error("Invalid choice.")
            else:
                action()

    def ticket_menu(self) -> None:
        actions = {
            1: self.add_ticket,
            2: self.find_ticket,
            3: self.print_tickets,
            4: self.remove_ticket,
        }
        while True:
            self.stdout.write("\n--- Ticket Management Menu ---")
            self.stdout.write("1. Issue Ticket")
            self.stdout.write("2. Search for Ticket (by Seat & Event Code)")
            self.stdout.write("3. Print List of Tickets for an Event")
            self.stdout.write("4. Cancel Ticket")
            self.stdout.write("5. Return to Main Menu")
            choice = self.read_int("Select [1-5]: ")
            if choice == 5:
                return
            action = actions.get(choice)
            if action is None:
                self.error("Invalid choice.")
            else:
                action()

    # --- event actions ---

    def add_event(self) -> None:
        self.stdout.write("\n--- Add New Event ---")
        code = self.read_code("Enter event code (integer): ")
        if code is None:
            return
        if self.service.find_event(code) is not None:
            self.error("Error: An event with this code already exists.")
            return

        title = self.read_line("Enter event title: ")
        date = self.read_line("Enter date (DD/MM/YYYY): ")
        time = self.read_line("Enter time (HH:MM): ")
        try:
            event = self.service.add_event(code, title, date, time)
        except DomainError as error:
            self.error(f"Error: {error.message}.")
            return
        self.stdout.write(f"-> Event '{event.title}' added successfully.")

    def find_event(self) -> None:
        self.stdout.write("\n--- Search for Event ---")
        code = self.read_code("Enter event code to search for: ")
        if code is None:
            return
        event = self.service.find_event(code)
        if event is None:
            self.error(f"No event found with code {code}.")
            return
        self.stdout.write("-> Event found:")
        self.print_event(event)

    def remove_event(self) -> None:
        self.stdout.write("\n--- Delete Event ---")
        code = self.read_code("Enter event code to delete: ")
        if code is None:
            return
        try:
            removed = self.service.remove_event(code)
        except DomainError:
            self.error(f"No event found with code {code}.")
            return
        self.stdout.write(f"-> Deleted {removed} tickets associated with the event.")
        self.stdout.write(f"-> Event with code {code} and all its tickets have been deleted.")

    def print_events(self) -> None:
        self.stdout.write("\n--- LIST OF ALL EVENTS ---")
        for event in self.service.list_events():
            self.print_event(event)
        self.stdout.write("--- END OF LIST ---")

    # --- ticket actions ---

    def add_ticket(self) -> None:
        self.stdout.write("\n--- Issue Ticket ---")
        code = self.read_code("Enter event code: ")
        if code is None:
            return
        if self.service.find_event(code) is None:
            self.error(f"Error: No event exists with code {code}.")
            return

        seat = self.read_line("Enter seat (e.g., c149): ")
        if not is_valid_seat(seat):
            self.error("Error: Invalid seat. Section 'a'-'h' and number 1-500.")
            return
        if self.service.find_ticket(code, seat) is not None:
            self.error(f"Error: Seat {seat} is already booked for this event.")
            return

        tax_id = self.read_line("Enter spectator's Tax ID: ")
        first_name = self.read_line("Enter spectator's first name: ")
        last_name = self.read_line("Enter spectator's last name: ")
        try:
            self.service.add_ticket(code, seat, tax_id, first_name, last_name)
        except DomainError as error:
            self.error(f"Error: {error.message}.")
            return
        self.stdout.write(f"-> Ticket for seat {seat} issued successfully.")

    def find_ticket(self) -> None:
        self.stdout.write("\n--- Search for Ticket ---")
        code = self.read_code("Enter event code: ")
        if code is None:
            return
        seat = self.read_line("Enter seat number (e.g., c149): ")
        ticket = self.service.find_ticket(code, seat)
        if ticket is None:
            self.error(f"No booking found for seat {seat} in event {code}.")
            return
        self.stdout.write("-> Ticket found:")
        self.print_ticket(ticket)

    def print_tickets(self) -> None:
        self.stdout.write("\n--- Print Tickets for an Event ---")
        code = self.read_code("Enter event code: ")
        if code is None:
            return
        try:
            tickets = self.service.list_tickets(code)
        except DomainError as error:
            self.error(f"Error: {error.message}.")
            return
        self.stdout.write(f"\n--- LIST OF TICKETS FOR EVENT {code} ---")
        for ticket in tickets:
            self.print_ticket(ticket)
        self.stdout.write("--- END OF LIST ---")

    def remove_ticket(self) -> None:
        self.stdout.write("\n--- Cancel Ticket ---")
        code = self.read_code("Enter event code: ")
        if code is None:
            return
        seat = self.read_line("Enter seat number (e.g., c149): ")
        try:
            self.service.remove_ticket(code, seat)
        except DomainError as error:
            self.error(f"{error.message}.")
            return
        self.stdout.write(f"-> Ticket for seat {seat} cancelled.")
