"""Reservation booking on top of the inventory ledger."""

from car_rental.config import Settings, get_settings
from car_rental.errors import OverbookingError
from car_rental.models.reservation import (
    Reservation,
    ReservationRequest,
    ReservationResult,
)
from car_rental.state.ids import IdGenerator, SequentialIdGenerator
from car_rental.state.inventory import InMemoryInventory
from car_rental.utils.logging import get_logger

logger = get_logger(__name__)


class ReservationService:
    """
    Books car types against an inventory.

    The availability check, id issuance and ledger update for one request run
    while the car type's inventory lock is held, so concurrent callers cannot
    both pass the check and overbook the same day.
    """

    def __init__(self, inventory: InMemoryInventory, id_generator: IdGenerator):
        self._inventory = inventory
        self._id_generator = id_generator

    @property
    def inventory(self) -> InMemoryInventory:
        """Inventory this service books against."""
        return self._inventory

    def reserve(self, request: ReservationRequest) -> ReservationResult:
        """
        Try to book a request.

        Args:
            request: Car type, start and number of days to book

        Returns:
            A successful result with the new reservation id, or a failed result
            with a display message when some day of the span is full
        """
        reservation = self._book(request)
        if reservation is None:
            return ReservationResult.fail(
                f"No availability for {request.car_type.name} in requested period."
            )
        return ReservationResult.ok(reservation.id)

    def reserve_or_raise(self, request: ReservationRequest) -> int:
        """
        Book a request and return the new reservation id.

        Raises:
            OverbookingError: If some day of the span is already at capacity.
        """
        reservation = self._book(request)
        if reservation is None:
            raise OverbookingError(request.car_type, request.start, request.days)
        return reservation.id

    def cancel(self, reservation_id: int) -> bool:
        """Remove a reservation and free its days. Return False for unknown ids."""
        removed = self._inventory.remove_reservation_by_id(reservation_id)
        if removed:
            logger.info("reservation_cancelled", reservation_id=reservation_id)
        else:
            logger.info("reservation_cancel_missed", reservation_id=reservation_id)
        return removed

    def _book(self, request: ReservationRequest) -> Reservation | None:
        with self._inventory.hold(request.car_type):
            if not self._inventory.has_availability(
                request.car_type, request.start, request.days
            ):
                logger.info(
                    "reservation_rejected",
                    car_type=request.car_type.value,
                    start=request.start.isoformat(),
                    days=request.days,
                )
                return None

            reservation = Reservation(
                id=self._id_generator.next_id(),
                car_type=request.car_type,
                start=request.start,
                days=request.days,
            )
            self._inventory.add(reservation)

        logger.info(
            "reservation_created",
            reservation_id=reservation.id,
            car_type=reservation.car_type.value,
            start=reservation.start.isoformat(),
            days=reservation.days,
        )
        return reservation


def create_reservation_service(settings: Settings | None = None) -> ReservationService:
    """Build a service with a fresh inventory and id generator from settings."""
    settings = settings or get_settings()
    inventory = InMemoryInventory(settings.capacity_table())
    return ReservationService(inventory, SequentialIdGenerator(settings.id_start))
