"""FIFO customer queue."""

from collections import deque
from typing import Iterator, Optional

from .base import Customer


class CustomerQueue:
    """First-in-first-out line of customers, ordered by arrival tick."""

    def __init__(self):
        self.queue = deque()

    def enqueue(self, tick: int) -> Customer:
        """Add a customer who arrived at tick to the rear of the line."""
        if tick < 0:
            raise ValueError(f"arrival tick must be >= 0, got {tick}")
        if self.queue and tick < self.queue[-1].arrival_tick:
            raise ValueError(
                f"arrival tick {tick} precedes the rear of the queue "
                f"({self.queue[-1].arrival_tick})"
            )
        customer = Customer(arrival_tick=tick)
        self.queue.append(customer)
        return customer

    def dequeue(self) -> Optional[Customer]:
        """Remove and return the front customer, or None if nobody is waiting."""
        if not self.queue:
            return None
        return self.queue.popleft()

    def is_empty(self) -> bool:
        return not self.queue

    def size(self) -> int:
        return len(self.queue)

    def clear(self) -> None:
        self.queue.clear()

    def __len__(self) -> int:
        return len(self.queue)

    def __iter__(self) -> Iterator[Customer]:
        return iter(self.queue)
