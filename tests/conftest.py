"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from venue.apps import get_venue_service
from venue.services import VenueService
from venue.stores import BinarySearchTreeStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> BinarySearchTreeStore:
    return BinarySearchTreeStore()


@pytest.fixture
def service(store: BinarySearchTreeStore) -> VenueService:
    return VenueService(store)


@pytest.fixture
def concert(service: VenueService) -> VenueService:
    """A service holding event 101 with one ticket on seat c149."""
    service.add_event(101, "Concert", "01/01/2025", "20:00")
    service.add_ticket(101, "c149", "1234567890", "Ana", "Popescu")
    return service


@pytest.fixture(autouse=True)
def clear_store():
    service = get_venue_service()
    service.clear()
    yield
    service.clear()
