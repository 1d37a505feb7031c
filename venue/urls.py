from django.urls import path

from venue.handlers import EventDetailView, EventListView, TicketDetailView, TicketListView

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<int:code>", EventDetailView.as_view(), name="event-detail"),
    path("events/<int:code>/tickets", TicketListView.as_view(), name="ticket-list"),
    path(
        "events/<int:code>/tickets/<str:seat>",
        TicketDetailView.as_view(),
        name="ticket-detail",
    ),
]
