"""
Random variable generators for the bank queue.
All generators draw from an explicit numpy Generator so a run can be
reproduced by seeding it.
"""

import math
from typing import Callable, Iterable, Optional

import numpy as np

MIN_SERVICE_TIME = 2  # minutes
MAX_SERVICE_TIME = 3  # minutes

# exp(-lambda) stays a normal double up to here; beyond it the product
# of uniforms underflows before reaching the limit.
MAX_POISSON_LAMBDA = 700.0


def _check_lambda(lam: float) -> None:
    if not math.isfinite(lam) or lam <= 0:
        raise ValueError(f"lambda must be a finite number > 0, got {lam}")
    if lam > MAX_POISSON_LAMBDA:
        raise ValueError(f"lambda must be <= {MAX_POISSON_LAMBDA:g}, got {lam}")


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random source for a run. seed=None draws fresh OS entropy."""
    return np.random.default_rng(seed)


# Basic distributions
def sample_poisson(lam: float, rng: np.random.Generator) -> int:
    """
    Generate the number of arrivals in one minute, Poisson(lam).

    Uses Knuth's method: multiply uniform draws together until the product
    drops to exp(-lam) or below; the count is the number of draws minus one.
    """
    _check_lambda(lam)
    limit = math.exp(-lam)
    p = 1.0
    k = 0
    while True:
        k += 1
        p *= rng.random()
        if p <= limit:
            break
    return k - 1


def sample_service_time(rng: np.random.Generator,
                        min_time: int = MIN_SERVICE_TIME,
                        max_time: int = MAX_SERVICE_TIME) -> int:
    """Generate a uniform integer service time in [min_time, max_time]."""
    if min_time < 1 or max_time < min_time:
        raise ValueError(f"invalid service time range [{min_time}, {max_time}]")
    return int(rng.integers(min_time, max_time + 1))


# Distribution factory functions
def poisson_distribution(lam: float, rng: np.random.Generator) -> Callable[[], int]:
    """Create a per-minute Poisson arrival count function."""
    _check_lambda(lam)
    return lambda: sample_poisson(lam, rng)


def service_time_distribution(rng: np.random.Generator,
                              min_time: int = MIN_SERVICE_TIME,
                              max_time: int = MAX_SERVICE_TIME) -> Callable[[], int]:
    """Create a uniform integer service time function."""
    if min_time < 1 or max_time < min_time:
        raise ValueError(f"invalid service time range [{min_time}, {max_time}]")
    return lambda: sample_service_time(rng, min_time, max_time)


def deterministic_distribution(value: int) -> Callable[[], int]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value


def scripted_arrivals(counts: Iterable[int]) -> Callable[[], int]:
    """
    Replay a fixed sequence of per-minute arrival counts.
    Returns 0 once the sequence is exhausted.
    """
    iterator = iter(counts)
    return lambda: next(iterator, 0)


def arrivals_at(ticks: Iterable[int]) -> Callable[[], int]:
    """
    Arrival counts for customers arriving at the given ticks.

    arrivals_at([0, 2, 2]) yields one arrival at minute 0, none at minute 1
    and two at minute 2.
    """
    ticks = list(ticks)
    if not ticks:
        return scripted_arrivals([])
    counts = np.bincount(np.asarray(ticks, dtype=np.int64))
    return scripted_arrivals(int(c) for c in counts)
