"""Teller pool implementation."""

from typing import Callable, List, Optional, Tuple

from .base import Teller
from .queue import CustomerQueue


class TellerPool:
    """Fixed set of identical tellers working in parallel."""

    def __init__(self,
                 num_tellers: int,
                 service_time_distribution: Callable[[], int]):
        if isinstance(num_tellers, bool) or not isinstance(num_tellers, int) or num_tellers < 1:
            raise ValueError(f"num_tellers must be an integer >= 1, got {num_tellers!r}")
        self.num_tellers = num_tellers
        self.service_time_distribution = service_time_distribution
        self.tellers = [Teller() for _ in range(num_tellers)]

        # Metrics
        self.customers_assigned = 0
        self.total_service_time = 0

    def tick_all(self) -> int:
        """
        Advance every busy teller by one minute.
        Returns the number of tellers freed during this tick.
        """
        freed = 0
        for teller in self.tellers:
            if teller.tick():
                freed += 1
        return freed

    def _find_idle_teller(self) -> Optional[int]:
        """Find the lowest-index idle teller, None if all are busy."""
        for i, teller in enumerate(self.tellers):
            if not teller.busy:
                return i
        return None

    def try_assign(self, queue: CustomerQueue, current_tick: int) -> List[Tuple[int, int]]:
        """
        Move waiting customers onto idle tellers in ascending teller order.
        Returns a list of (teller_index, wait_time) for each assignment.
        """
        assignments = []
        for i, teller in enumerate(self.tellers):
            if queue.is_empty():
                break
            if teller.busy:
                continue

            customer = queue.dequeue()
            wait_time = customer.wait_time(current_tick)
            if wait_time < 0:
                raise ValueError(
                    f"customer arriving at {customer.arrival_tick} "
                    f"cannot be served at tick {current_tick}"
                )

            service_time = int(self.service_time_distribution())
            teller.assign(service_time)
            self.customers_assigned += 1
            self.total_service_time += service_time
            assignments.append((i, wait_time))
        return assignments

    def busy_count(self) -> int:
        """Number of tellers currently serving a customer."""
        return sum(1 for teller in self.tellers if teller.busy)

    def average_service_time(self) -> float:
        """Average sampled service time across all assignments."""
        if self.customers_assigned > 0:
            return self.total_service_time / self.customers_assigned
        return 0.0

    def reset(self) -> None:
        for teller in self.tellers:
            teller.release()
        self.customers_assigned = 0
        self.total_service_time = 0

    def __len__(self) -> int:
        return self.num_tellers
