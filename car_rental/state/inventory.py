"""Day-level occupancy ledger for the rental fleet."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import date, datetime, timedelta

from pydantic import NonNegativeInt, TypeAdapter, ValidationError

from car_rental.errors import CapacityConfigError, DuplicateReservationError
from car_rental.models.car import CarType
from car_rental.models.reservation import Reservation
from car_rental.utils.logging import get_logger

logger = get_logger(__name__)

_capacity_adapter = TypeAdapter(dict[CarType, NonNegativeInt])


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def enumerate_days(start: date | datetime, days: int) -> list[date]:
    """
    List the calendar dates covered by a span.

    The span is half-open: ``[start, start + days)``. Time of day is dropped.

    Raises:
        ValueError: If ``days`` is not positive.
    """
    if days <= 0:
        raise ValueError("days must be > 0")
    first = _as_date(start)
    return [first + timedelta(days=offset) for offset in range(days)]


class Inventory(ABC):
    """Ledger contract: capacity per car type plus reservations and daily occupancy."""

    @abstractmethod
    def capacity(self) -> dict[CarType, int]:
        """Return a copy of the capacity table."""
        pass

    @abstractmethod
    def add(self, reservation: Reservation) -> None:
        """
        Register a reservation and count it on every day it covers.

        Raises:
            DuplicateReservationError: If a reservation with the same id is live.
        """
        pass

    @abstractmethod
    def remove_reservation_by_id(self, reservation_id: int) -> bool:
        """Drop a reservation and its occupancy. Return False if the id is unknown."""
        pass

    @abstractmethod
    def all(self) -> list[Reservation]:
        """Return a snapshot of every live reservation."""
        pass

    @abstractmethod
    def reserved_count(self, car_type: CarType, on_date: date | datetime) -> int:
        """Return how many reservations of a type cover a date."""
        pass


class InMemoryInventory(Inventory):
    """
    Thread-safe in-process inventory.

    Each car type has its own re-entrant lock guarding its occupancy calendar.
    A separate registry lock guards the id table. When both are needed the type
    lock is always taken first. No operation holds two type locks at once.

    ``add`` does not enforce capacity. Callers that need a guarantee against
    overbooking run ``has_availability`` and ``add`` inside ``hold`` for the
    car type, as ``ReservationService`` does.
    """

    def __init__(self, capacity: Mapping[CarType, int]):
        if not capacity:
            raise CapacityConfigError("capacity required")
        try:
            self._capacity = _capacity_adapter.validate_python(capacity)
        except ValidationError as e:
            raise CapacityConfigError(f"Invalid capacity table: {e}") from e

        self._by_id: dict[int, Reservation] = {}
        self._calendar: dict[CarType, dict[date, int]] = {t: {} for t in CarType}
        self._type_locks = {t: threading.RLock() for t in CarType}
        self._registry_lock = threading.Lock()

        logger.debug(
            "inventory_initialized",
            capacity={t.value: c for t, c in self._capacity.items()},
        )

    def __len__(self) -> int:
        with self._registry_lock:
            return len(self._by_id)

    @contextmanager
    def hold(self, car_type: CarType) -> Iterator[None]:
        """Hold the lock for a car type so a check and a commit happen as one step."""
        with self._type_locks[car_type]:
            yield

    def capacity(self) -> dict[CarType, int]:
        return dict(self._capacity)

    def add(self, reservation: Reservation) -> None:
        covered = enumerate_days(reservation.start, reservation.days)
        with self._type_locks[reservation.car_type]:
            with self._registry_lock:
                if reservation.id in self._by_id:
                    raise DuplicateReservationError(reservation.id)
                self._by_id[reservation.id] = reservation
            calendar = self._calendar[reservation.car_type]
            for day in covered:
                calendar[day] = calendar.get(day, 0) + 1

    def remove_reservation_by_id(self, reservation_id: int) -> bool:
        with self._registry_lock:
            reservation = self._by_id.get(reservation_id)
        if reservation is None:
            return False

        with self._type_locks[reservation.car_type]:
            with self._registry_lock:
                # Another caller may have removed it after the lookup above
                if self._by_id.pop(reservation_id, None) is None:
                    return False
            calendar = self._calendar[reservation.car_type]
            for day in enumerate_days(reservation.start, reservation.days):
                remaining = calendar.get(day, 0) - 1
                if remaining > 0:
                    calendar[day] = remaining
                else:
                    calendar.pop(day, None)

        logger.debug(
            "reservation_removed",
            reservation_id=reservation_id,
            car_type=reservation.car_type.value,
        )
        return True

    def all(self) -> list[Reservation]:
        with self._registry_lock:
            return list(self._by_id.values())

    def get(self, reservation_id: int) -> Reservation | None:
        """Look up a live reservation by id."""
        with self._registry_lock:
            return self._by_id.get(reservation_id)

    def reserved_count(self, car_type: CarType, on_date: date | datetime) -> int:
        with self._type_locks[car_type]:
            return self._calendar[car_type].get(_as_date(on_date), 0)

    def available_count(self, car_type: CarType, on_date: date | datetime) -> int:
        """Return how many more cars of a type can be booked on a date."""
        with self._type_locks[car_type]:
            remaining = self._capacity.get(car_type, 0) - self.reserved_count(
                car_type, on_date
            )
        return max(remaining, 0)

    def has_availability(
        self,
        car_type: CarType,
        start: date | datetime,
        days: int,
    ) -> bool:
        """
        Check whether every day of a span is below capacity.

        Args:
            car_type: Car type to check
            start: First day of the span; time of day is ignored
            days: Number of days in the span

        Returns:
            False as soon as one day is at or over capacity, True otherwise.
            A car type missing from the capacity table is never available.
        """
        cap = self._capacity.get(car_type, 0)
        with self._type_locks[car_type]:
            for day in enumerate_days(start, days):
                if self.reserved_count(car_type, day) >= cap:
                    return False
        return True
