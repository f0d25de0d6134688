"""Append-only record of customer wait times."""

import logging

import numpy as np

logger = logging.getLogger(__name__)

INITIAL_LEDGER_CAPACITY = 100


class WaitTimeLedger:
    """
    Growable record of the wait time of every served customer.

    Values live in a numpy buffer that doubles when full. If the larger
    buffer cannot be allocated the value being recorded is dropped and the
    run carries on with everything recorded so far.
    """

    def __init__(self, initial_capacity: int = INITIAL_LEDGER_CAPACITY):
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        self._buffer = self._allocate(initial_capacity)
        self._count = 0
        self.dropped = 0

    @staticmethod
    def _allocate(capacity: int) -> np.ndarray:
        return np.empty(capacity, dtype=np.int64)

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    def _grow(self) -> bool:
        """Double the buffer. Returns False if the allocation failed."""
        new_capacity = self.capacity * 2
        try:
            new_buffer = self._allocate(new_capacity)
        except MemoryError:
            return False
        new_buffer[:self._count] = self._buffer[:self._count]
        self._buffer = new_buffer
        return True

    def record(self, wait_time: int) -> bool:
        """
        Append a wait time.
        Returns False if the value was dropped because the buffer could not grow.
        """
        if self._count == self.capacity and not self._grow():
            self.dropped += 1
            logger.warning(
                "Could not grow wait-time ledger beyond %d entries; "
                "dropping wait time %d (%d dropped so far)",
                self.capacity, wait_time, self.dropped
            )
            return False
        self._buffer[self._count] = wait_time
        self._count += 1
        return True

    def count(self) -> int:
        return self._count

    def values(self) -> np.ndarray:
        """Copy of the recorded wait times in insertion order."""
        return self._buffer[:self._count].copy()

    def snapshot_sorted(self) -> np.ndarray:
        """Ascending copy of the recorded wait times."""
        return np.sort(self._buffer[:self._count])

    def clear(self) -> None:
        self._count = 0
        self.dropped = 0

    def __len__(self) -> int:
        return self._count
