"""Pytest configuration and fixtures."""

from datetime import datetime

import pytest

from car_rental.models.car import CarType
from car_rental.models.reservation import Reservation, ReservationRequest
from car_rental.services.reservation_service import ReservationService
from car_rental.state.ids import SequentialIdGenerator
from car_rental.state.inventory import InMemoryInventory


@pytest.fixture
def capacity() -> dict[CarType, int]:
    """Capacity table covering every car type."""
    return {CarType.SEDAN: 2, CarType.SUV: 1, CarType.VAN: 1}


@pytest.fixture
def inventory(capacity: dict[CarType, int]) -> InMemoryInventory:
    """Create an empty inventory."""
    return InMemoryInventory(capacity)


@pytest.fixture
def service(inventory: InMemoryInventory) -> ReservationService:
    """Create a reservation service with a fresh id generator."""
    return ReservationService(inventory, SequentialIdGenerator())


@pytest.fixture
def start() -> datetime:
    """Reference start time used across scenarios."""
    return datetime(2025, 10, 20, 10, 0)


# Sample data fixtures


@pytest.fixture
def sample_request(start: datetime) -> ReservationRequest:
    """Create a three-day sedan request."""
    return ReservationRequest(car_type=CarType.SEDAN, start=start, days=3)


@pytest.fixture
def sample_reservation(start: datetime) -> Reservation:
    """Create a two-day SUV reservation."""
    return Reservation(id=42, car_type=CarType.SUV, start=start, days=2)
