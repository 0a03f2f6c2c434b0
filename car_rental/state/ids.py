"""Reservation id generation."""

import itertools
import threading
from abc import ABC, abstractmethod


class IdGenerator(ABC):
    """Source of unique reservation ids."""

    @abstractmethod
    def next_id(self) -> int:
        """Return an id never returned before by this generator."""
        pass


class SequentialIdGenerator(IdGenerator):
    """
    Thread-safe generator of strictly increasing ids.

    Ids handed out for reservations that were never committed are not returned
    to the pool, so the sequence may have gaps.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("start must be a positive integer")
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)
