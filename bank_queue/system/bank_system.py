"""Minute-by-minute bank simulation engine."""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import numpy as np

from ..analysis import WaitTimeStatistics, summarize
from ..config import SimulationConfig
from ..core import CustomerQueue, TellerPool, WaitTimeLedger
from ..distributions import make_rng, poisson_distribution, service_time_distribution

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Final state of one simulated day."""
    config: SimulationConfig
    total_arrivals: int
    left_in_queue: int
    ledger: WaitTimeLedger
    arrivals: np.ndarray = field(repr=False)       # customers arriving in each minute
    queue_lengths: np.ndarray = field(repr=False)  # queue size at the end of each minute
    busy_tellers: np.ndarray = field(repr=False)   # busy tellers at the end of each minute
    average_service_time: float = 0.0

    @property
    def served(self) -> int:
        return self.ledger.count()

    @property
    def dropped_records(self) -> int:
        return self.ledger.dropped

    def wait_times(self) -> np.ndarray:
        """Recorded wait times in the order customers were served."""
        return self.ledger.values()

    def statistics(self) -> WaitTimeStatistics:
        return summarize(self.ledger.snapshot_sorted())

    def average_queue_length(self) -> float:
        if self.queue_lengths.size > 0:
            return float(np.mean(self.queue_lengths))
        return 0.0

    def max_queue_length(self) -> int:
        if self.queue_lengths.size > 0:
            return int(np.max(self.queue_lengths))
        return 0

    def teller_utilization(self) -> float:
        """Fraction of teller-minutes spent serving customers."""
        capacity = self.busy_tellers.size * self.config.num_tellers
        if capacity > 0:
            return float(np.sum(self.busy_tellers)) / capacity
        return 0.0

    def served_fraction(self) -> float:
        if self.total_arrivals > 0:
            return self.served / self.total_arrivals
        return 0.0

    def get_metrics_summary(self) -> Dict:
        """Headline metrics as a flat dict of plain numbers."""
        stats = self.statistics()
        return {
            'total_arrivals': self.total_arrivals,
            'total_served': self.served,
            'left_in_queue': self.left_in_queue,
            'mean_wait': stats.mean,
            'median_wait': stats.median,
            'mode_wait': stats.mode,
            'std_dev_wait': stats.std_dev,
            'max_wait': stats.max_wait,
            'average_queue_length': self.average_queue_length(),
            'max_queue_length': self.max_queue_length(),
            'teller_utilization': self.teller_utilization(),
            'average_service_time': self.average_service_time,
        }

    def to_dict(self) -> Dict:
        return {
            'config': self.config.to_dict(),
            'metrics': self.get_metrics_summary(),
            'dropped_records': self.dropped_records,
            'wait_times': self.wait_times().tolist(),
            'arrivals': self.arrivals.tolist(),
            'queue_lengths': self.queue_lengths.tolist(),
            'busy_tellers': self.busy_tellers.tolist(),
        }


class BankSimulation:
    """
    Drives one bank day, one tick per minute.

    Each tick runs three phases in a fixed order: tellers finish service,
    new customers join the line, idle tellers take customers from the front
    of the line. A teller freed in a tick can serve a customer who arrived
    in that same tick.
    """

    def __init__(self,
                 config: SimulationConfig,
                 rng: Optional[np.random.Generator] = None,
                 arrival_distribution: Optional[Callable[[], int]] = None,
                 service_distribution: Optional[Callable[[], int]] = None):
        self.config = config.validate()
        self.rng = rng if rng is not None else make_rng(config.seed)

        if arrival_distribution is None:
            arrival_distribution = poisson_distribution(config.arrival_rate, self.rng)
        if service_distribution is None:
            service_distribution = service_time_distribution(
                self.rng, config.min_service_time, config.max_service_time
            )
        self.arrival_distribution = arrival_distribution

        self.queue = CustomerQueue()
        self.pool = TellerPool(config.num_tellers, service_distribution)
        self.ledger = WaitTimeLedger()

        self.current_tick = 0
        self.total_arrivals = 0
        self.arrivals = np.zeros(config.minutes, dtype=np.int64)
        self.queue_lengths = np.zeros(config.minutes, dtype=np.int64)
        self.busy_tellers = np.zeros(config.minutes, dtype=np.int64)

    def step(self) -> None:
        """Advance the simulation by one minute."""
        tick = self.current_tick
        if tick >= self.config.minutes:
            raise RuntimeError(f"simulation already finished after {self.config.minutes} minutes")

        # Step 1: tellers finish service
        self.pool.tick_all()

        # Step 2: new arrivals
        new_arrivals = int(self.arrival_distribution())
        if new_arrivals < 0:
            raise ValueError(f"arrival count must be >= 0, got {new_arrivals}")
        for _ in range(new_arrivals):
            self.queue.enqueue(tick)
        self.total_arrivals += new_arrivals
        self.arrivals[tick] = new_arrivals

        # Step 3: idle tellers take waiting customers
        for _, wait_time in self.pool.try_assign(self.queue, tick):
            self.ledger.record(wait_time)

        self.queue_lengths[tick] = self.queue.size()
        self.busy_tellers[tick] = self.pool.busy_count()
        logger.debug("minute %d: %d arrived, %d waiting, %d/%d tellers busy",
                     tick, new_arrivals, self.queue.size(),
                     self.busy_tellers[tick], self.config.num_tellers)
        self.current_tick += 1

    @property
    def finished(self) -> bool:
        return self.current_tick >= self.config.minutes

    def simulate(self) -> SimulationResult:
        """Run the remaining minutes and return the final state."""
        logger.info("Starting %d minute simulation: lambda=%.2f, tellers=%d",
                    self.config.minutes, self.config.arrival_rate, self.config.num_tellers)
        while not self.finished:
            self.step()

        result = self.result()
        logger.info("Simulation complete: %d arrived, %d served, %d left in queue",
                    result.total_arrivals, result.served, result.left_in_queue)
        return result

    def result(self) -> SimulationResult:
        return SimulationResult(
            config=self.config,
            total_arrivals=self.total_arrivals,
            left_in_queue=self.queue.size(),
            ledger=self.ledger,
            arrivals=self.arrivals[:self.current_tick].copy(),
            queue_lengths=self.queue_lengths[:self.current_tick].copy(),
            busy_tellers=self.busy_tellers[:self.current_tick].copy(),
            average_service_time=self.pool.average_service_time(),
        )

    def reset(self) -> None:
        """Reset the day to minute 0, keeping the random source."""
        self.queue.clear()
        self.pool.reset()
        self.ledger.clear()
        self.current_tick = 0
        self.total_arrivals = 0
        self.arrivals[:] = 0
        self.queue_lengths[:] = 0
        self.busy_tellers[:] = 0


def run_day(config: SimulationConfig,
            rng: Optional[np.random.Generator] = None) -> SimulationResult:
    """Simulate one bank day with the configured random processes."""
    return BankSimulation(config, rng=rng).simulate()
