"""
Summary statistics over recorded wait times.

Every function takes the wait times as a sorted sequence of integers and
defines its result for an empty sequence.
"""

from dataclasses import asdict, dataclass
from typing import Dict, Sequence

import numpy as np

# Largest wait time for which mode() counts with a dense frequency array.
MODE_FREQUENCY_LIMIT = 1_000_000


def _as_array(data: Sequence[int]) -> np.ndarray:
    return np.asarray(data, dtype=np.int64)


def mean(data: Sequence[int]) -> float:
    """Average wait time."""
    values = _as_array(data)
    if values.size == 0:
        return 0.0
    return float(np.sum(values, dtype=np.int64)) / values.size


def median(sorted_data: Sequence[int]) -> float:
    """Middle wait time. Assumes sorted_data is in ascending order."""
    n = len(sorted_data)
    if n == 0:
        return 0.0
    if n % 2 == 0:
        return (int(sorted_data[n // 2 - 1]) + int(sorted_data[n // 2])) / 2.0
    return float(sorted_data[n // 2])


def mode(data: Sequence[int]) -> int:
    """Most frequent wait time; ties go to the smallest value."""
    values = _as_array(data)
    if values.size == 0:
        return 0
    if values.min() < 0:
        raise ValueError("wait times must be non-negative")

    if values.max() < MODE_FREQUENCY_LIMIT:
        frequency = np.bincount(values)
        # argmax returns the first index with the highest count
        return int(np.argmax(frequency))

    unique, counts = np.unique(values, return_counts=True)
    return int(unique[np.argmax(counts)])


def std_dev(data: Sequence[int]) -> float:
    """Population standard deviation of the wait times."""
    values = _as_array(data)
    if values.size == 0:
        return 0.0
    avg = mean(values)
    return float(np.sqrt(np.sum((values - avg) ** 2) / values.size))


def max_wait(sorted_data: Sequence[int]) -> int:
    """Longest wait time. Assumes sorted_data is in ascending order."""
    if len(sorted_data) == 0:
        return 0
    return int(sorted_data[-1])


@dataclass(frozen=True)
class WaitTimeStatistics:
    """All wait-time statistics for one run, in minutes."""
    count: int
    mean: float
    median: float
    mode: int
    std_dev: float
    max_wait: int

    def to_dict(self) -> Dict:
        return asdict(self)


def summarize(sorted_data: Sequence[int]) -> WaitTimeStatistics:
    """Compute every statistic over an ascending sequence of wait times."""
    return WaitTimeStatistics(
        count=len(sorted_data),
        mean=mean(sorted_data),
        median=median(sorted_data),
        mode=mode(sorted_data),
        std_dev=std_dev(sorted_data),
        max_wait=max_wait(sorted_data),
    )
