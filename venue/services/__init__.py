from venue.services.cascade import collect_ticket_keys, remove_event_cascade
from venue.services.venue_service import VenueService

__all__ = ["VenueService", "collect_ticket_keys", "remove_event_cascade"]
