"""Domain errors for the reservation tracker."""

from datetime import datetime

from car_rental.models.car import CarType


class RentalError(Exception):
    pass


class CapacityConfigError(RentalError, ValueError):
    """Capacity table is missing, empty or holds invalid entries."""


class OverbookingError(RentalError):
    """Booking the requested span would exceed capacity on at least one day."""

    def __init__(self, car_type: CarType, start: datetime, days: int):
        self.car_type = car_type
        self.start = start
        self.days = days
        super().__init__(f"Overbooking prevented for {car_type.name}")


class DuplicateReservationError(RentalError, ValueError):
    """A reservation with the same id is already live in the inventory."""

    def __init__(self, reservation_id: int):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation {reservation_id} already exists")
