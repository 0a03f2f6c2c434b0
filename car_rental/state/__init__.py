"""Inventory state and id generation."""

from car_rental.state.ids import IdGenerator, SequentialIdGenerator
from car_rental.state.inventory import InMemoryInventory, Inventory, enumerate_days

__all__ = [
    "IdGenerator",
    "SequentialIdGenerator",
    "Inventory",
    "InMemoryInventory",
    "enumerate_days",
]
