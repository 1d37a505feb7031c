from venue.handlers.views import (
    EventDetailView,
    EventListView,
    TicketDetailView,
    TicketListView,
)

__all__ = ["EventListView", "EventDetailView", "TicketListView", "TicketDetailView"]
