"""Reservation request, record and result models."""

from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field, computed_field

from car_rental.models.car import CarType


class ReservationRequest(BaseModel):
    """Request to book a car type for a number of whole days."""

    model_config = ConfigDict(frozen=True)

    car_type: CarType
    start: datetime
    days: int = Field(ge=1)


class Reservation(BaseModel):
    """
    Booked car type over a span of calendar days.

    Only the date part of ``start`` counts towards occupancy. The time of day is
    kept for display.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    car_type: CarType
    start: datetime
    days: int = Field(ge=1)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def end(self) -> datetime:
        """Start plus the booked number of days."""
        return self.start + timedelta(days=self.days)


class ReservationResult(BaseModel):
    """Outcome of a reservation attempt."""

    model_config = ConfigDict(frozen=True)

    success: bool
    reservation_id: int | None = None
    message: str

    @classmethod
    def ok(cls, reservation_id: int) -> "ReservationResult":
        """Build a successful result for the given reservation id."""
        return cls(success=True, reservation_id=reservation_id, message="Reserved")

    @classmethod
    def fail(cls, message: str) -> "ReservationResult":
        """Build a failed result carrying a display message."""
        return cls(success=False, reservation_id=None, message=message)
