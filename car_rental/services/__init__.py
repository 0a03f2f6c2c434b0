"""Booking services."""

from car_rental.services.reservation_service import (
    ReservationService,
    create_reservation_service,
)

__all__ = ["ReservationService", "create_reservation_service"]
