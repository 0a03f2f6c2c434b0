"""Car classification models."""

from enum import Enum


class CarType(str, Enum):
    """Rental car categories. Capacity and occupancy are tracked per type."""

    SEDAN = "sedan"
    SUV = "suv"
    VAN = "van"
