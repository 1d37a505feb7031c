"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from venue.apps import get_venue_service
from venue.domain.errors import (
    DomainError,
    ErrorCode,
    EventNotFoundError,
    TicketNotFoundError,
)
from venue.handlers.serializers import (
    EventCreateSerializer,
    EventSerializer,
    TicketCreateSerializer,
    TicketSerializer,
)

ERROR_STATUS = {
    ErrorCode.EVENT_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_SEAT: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SEAT_TAKEN: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_EVENT_CODE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.FIELD_TOO_LONG: status.HTTP_400_BAD_REQUEST,
}


def error_response(error: DomainError) -> Response:
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=ERROR_STATUS.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_request_response(errors: dict[str, Any]) -> Response:
    return Response(
        {"error": {"code": "INVALID_REQUEST", "message": "Invalid request body", "fields": errors}},
        status=status.HTTP_400_BAD_REQUEST,
    )


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = get_venue_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)
        try:
            event = get_venue_service().add_event(**serializer.validated_data)
        except DomainError as error:
            return error_response(error)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/DELETE /api/events/{code}"""

    def get(self, request: Request, code: int) -> Response:
        event = get_venue_service().find_event(code)
        if event is None:
            return error_response(EventNotFoundError(code))
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, code: int) -> Response:
        try:
            removed = get_venue_service().remove_event(code)
        except DomainError as error:
            return error_response(error)
        return Response({"removed_tickets": removed})


class TicketListView(APIView):
    """Handler for GET/POST /api/events/{code}/tickets"""

    def get(self, request: Request, code: int) -> Response:
        try:
            tickets = get_venue_service().list_tickets(code)
        except DomainError as error:
            return error_response(error)
        return Response(TicketSerializer(tickets, many=True).data)

    def post(self, request: Request, code: int) -> Response:
        serializer = TicketCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request_response(serializer.errors)
        try:
            ticket = get_venue_service().add_ticket(code, **serializer.validated_data)
        except DomainError as error:
            return error_response(error)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketDetailView(APIView):
    """Handler for GET/DELETE /api/events/{code}/tickets/{seat}"""

    def get(self, request: Request, code: int, seat: str) -> Response:
        ticket = get_venue_service().find_ticket(code, seat)
        if ticket is None:
            return error_response(TicketNotFoundError(code, seat))
        return Response(TicketSerializer(ticket).data)

    def delete(self, request: Request, code: int, seat: str) -> Response:
        try:
            get_venue_service().remove_ticket(code, seat)
        except DomainError as error:
            return error_response(error)
        return Response(status=status.HTTP_204_NO_CONTENT)
