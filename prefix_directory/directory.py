"""Allocator of phone numbers from a fixed range."""

from __future__ import annotations

import heapq
import logging

from .models import DirectorySnapshot

logger = logging.getLogger(__name__)

EXHAUSTED = -1


class PhoneDirectory:
    """Hands out numbers in ``[0, max_numbers)`` and takes them back.

    Numbers at or above the high-water mark have never been issued. Numbers
    below it are either outstanding or sit in the released set, which always
    yields its smallest member first.
    """

    def __init__(self, max_numbers: int) -> None:
        if max_numbers < 0:
            raise ValueError(f"max_numbers must be non-negative, got {max_numbers}")
        self._capacity = max_numbers
        self._high_water = 0
        self._released_heap: list[int] = []
        self._released: set[int] = set()
        logger.info("Created phone directory with %d numbers", max_numbers)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def high_water_mark(self) -> int:
        """Smallest number never handed out by a fresh allocation."""
        return self._high_water

    @property
    def available_count(self) -> int:
        return len(self._released) + self._capacity - self._high_water

    def get(self) -> int:
        """Return an available number, or ``EXHAUSTED`` when none is left."""
        if self._released_heap:
            number = heapq.heappop(self._released_heap)
            self._released.discard(number)
            return number
        if self._high_water < self._capacity:
            number = self._high_water
            self._high_water += 1
            return number
        logger.debug("Phone directory exhausted (capacity=%d)", self._capacity)
        return EXHAUSTED

    def check(self, number: int) -> bool:
        """Return True when ``number`` is available to be handed out."""
        if number < 0 or number >= self._capacity:
            return False
        return number >= self._high_water or number in self._released

    def release(self, number: int) -> None:
        """Make an outstanding ``number`` available again."""
        if number < 0 or number >= self._capacity:
            logger.debug("Ignoring release of out-of-range number %d", number)
            return
        if self.check(number):
            return
        self._released.add(number)
        heapq.heappush(self._released_heap, number)

    def snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            capacity=self._capacity,
            high_water_mark=self._high_water,
            released=sorted(self._released),
            available_count=self.available_count,
        )
