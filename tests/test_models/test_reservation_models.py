"""Tests for reservation models."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from car_rental.models.car import CarType
from car_rental.models.reservation import (
    Reservation,
    ReservationRequest,
    ReservationResult,
)


def test_request_accepts_valid_input(start: datetime) -> None:
    """Test that a well-formed request is built as given."""
    request = ReservationRequest(car_type=CarType.VAN, start=start, days=1)

    assert request.car_type == CarType.VAN
    assert request.start == start
    assert request.days == 1


@pytest.mark.parametrize("days", [0, -1])
def test_request_rejects_non_positive_days(start: datetime, days: int) -> None:
    """Test that a request needs at least one day."""
    with pytest.raises(ValidationError):
        ReservationRequest(car_type=CarType.SEDAN, start=start, days=days)


def test_request_requires_car_type_and_start(start: datetime) -> None:
    """Test that missing or null type and start are rejected."""
    with pytest.raises(ValidationError):
        ReservationRequest(start=start, days=1)
    with pytest.raises(ValidationError):
        ReservationRequest(car_type=CarType.SEDAN, days=1)
    with pytest.raises(ValidationError):
        ReservationRequest(car_type=None, start=start, days=1)
    with pytest.raises(ValidationError):
        ReservationRequest(car_type=CarType.SEDAN, start=None, days=1)


def test_request_rejects_unknown_car_type(start: datetime) -> None:
    """Test that car types outside the enumeration are rejected."""
    with pytest.raises(ValidationError):
        ReservationRequest(car_type="truck", start=start, days=1)


def test_validation_error_is_value_error(start: datetime) -> None:
    """Test that construction errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        ReservationRequest(car_type=CarType.SEDAN, start=start, days=0)


def test_reservation_end_is_derived(sample_reservation: Reservation) -> None:
    """Test that end is start plus the booked days."""
    assert sample_reservation.end == datetime(2025, 10, 22, 10, 0)
    assert sample_reservation.model_dump()["end"] == sample_reservation.end


def test_reservation_is_immutable(sample_reservation: Reservation) -> None:
    """Test that reservation fields cannot be reassigned."""
    with pytest.raises(ValidationError):
        sample_reservation.days = 5

    assert sample_reservation.days == 2


def test_reservation_equality_compares_all_fields(start: datetime) -> None:
    """Test that reservations are equal and hash alike only when every field matches."""
    first = Reservation(id=1, car_type=CarType.SEDAN, start=start, days=1)
    same = Reservation(id=1, car_type=CarType.SEDAN, start=start, days=1)
    longer = Reservation(id=1, car_type=CarType.SEDAN, start=start, days=2)

    assert first == same
    assert hash(first) == hash(same)
    assert first != longer


@pytest.mark.parametrize(
    "overrides",
    [{"days": 0}, {"id": 0}, {"id": -3}, {"car_type": None}, {"start": None}],
)
def test_reservation_rejects_invalid_fields(start: datetime, overrides: dict) -> None:
    """Test that invalid reservation fields fail at construction."""
    fields = {"id": 1, "car_type": CarType.SEDAN, "start": start, "days": 1}
    fields.update(overrides)

    with pytest.raises(ValidationError):
        Reservation(**fields)


def test_result_ok() -> None:
    """Test the success result shape."""
    result = ReservationResult.ok(7)

    assert result.success is True
    assert result.reservation_id == 7
    assert result.message == "Reserved"


def test_result_fail() -> None:
    """Test the failure result shape."""
    result = ReservationResult.fail("No availability for SUV in requested period.")

    assert result.success is False
    assert result.reservation_id is None
    assert "SUV" in result.message
