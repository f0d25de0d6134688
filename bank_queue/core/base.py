"""Base classes for the bank queue simulation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """A customer waiting for a teller."""
    arrival_tick: int

    def wait_time(self, current_tick: int) -> int:
        """Minutes spent in line if service starts at current_tick."""
        return current_tick - self.arrival_tick


@dataclass
class Teller:
    """A single teller, either idle or busy with some minutes left."""
    busy: bool = False
    remaining_time: int = 0

    def assign(self, service_time: int) -> None:
        """Start serving a customer for service_time minutes."""
        if service_time < 1:
            raise ValueError(f"service time must be >= 1, got {service_time}")
        self.busy = True
        self.remaining_time = service_time

    def tick(self) -> bool:
        """
        Advance one minute of service.
        Returns True if the teller became free during this tick.
        """
        if not self.busy:
            return False
        self.remaining_time -= 1
        if self.remaining_time == 0:
            self.busy = False
            return True
        return False

    def release(self) -> None:
        """Force the teller back to idle."""
        self.busy = False
        self.remaining_time = 0
