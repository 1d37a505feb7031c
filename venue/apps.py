from django.apps import AppConfig, apps
from django.conf import settings

from venue.logger_config import configure_logging
from venue.services import VenueService
from venue.stores import BinarySearchTreeStore


class VenueConfig(AppConfig):
    """Owns the process-wide record store and the service over it."""

    name = "venue"
    verbose_name = "Venue records"
    service: VenueService

    def ready(self) -> None:
        configure_logging(settings.VENUE_LOG_LEVEL)
        self.service = VenueService(BinarySearchTreeStore())


def get_venue_service() -> VenueService:
    """Return the service created when the app was loaded."""
    config = apps.get_app_config("venue")
    assert isinstance(config, VenueConfig)
    return config.service
