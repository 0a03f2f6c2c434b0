"""Seed a sample week of reservations and print the resulting occupancy."""

from datetime import datetime, timedelta

from car_rental.config import get_settings
from car_rental.models.car import CarType
from car_rental.models.reservation import ReservationRequest
from car_rental.services.reservation_service import create_reservation_service
from car_rental.state.inventory import enumerate_days
from car_rental.utils.logging import setup_logging


def seed_reservations() -> None:
    """Book sample requests and print the per-day occupancy table."""
    settings = get_settings()
    setup_logging(settings)

    print("Seeding reservations...")

    service = create_reservation_service(settings)
    week_start = datetime.now().replace(hour=9, minute=0, second=0, microsecond=0)

    requests = [
        ReservationRequest(car_type=CarType.SEDAN, start=week_start, days=3),
        ReservationRequest(car_type=CarType.SEDAN, start=week_start + timedelta(days=1), days=2),
        ReservationRequest(car_type=CarType.SEDAN, start=week_start + timedelta(hours=5), days=7),
        ReservationRequest(car_type=CarType.SUV, start=week_start, days=5),
        ReservationRequest(car_type=CarType.SUV, start=week_start + timedelta(days=2), days=4),
        ReservationRequest(car_type=CarType.VAN, start=week_start + timedelta(days=3), days=1),
        ReservationRequest(car_type=CarType.VAN, start=week_start + timedelta(days=4), days=2),
    ]

    for request in requests:
        result = service.reserve(request)
        status = f"#{result.reservation_id}" if result.success else "rejected"
        print(
            f"  {request.car_type.name:<6} {request.start:%Y-%m-%d %H:%M} "
            f"x{request.days}: {status}"
        )

    inventory = service.inventory
    capacity = inventory.capacity()

    print("\nOccupancy (reserved / capacity):")
    print("  " + "date".ljust(12) + "".join(t.name.ljust(10) for t in CarType))
    for day in enumerate_days(week_start, 7):
        row = "".join(
            f"{inventory.reserved_count(t, day)}/{capacity.get(t, 0)}".ljust(10)
            for t in CarType
        )
        print(f"  {day.isoformat():<12}{row}")

    print(f"\n✓ Seeded {len(inventory)} reservations\n")


if __name__ == "__main__":
    seed_reservations()
