"""Data models for the reservation tracker."""

from car_rental.models.car import CarType
from car_rental.models.reservation import (
    Reservation,
    ReservationRequest,
    ReservationResult,
)

__all__ = [
    # Cars
    "CarType",
    # Reservations
    "Reservation",
    "ReservationRequest",
    "ReservationResult",
]
