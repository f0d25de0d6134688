"""Post-run analysis of wait times."""

from .wait_statistics import (
    MODE_FREQUENCY_LIMIT,
    WaitTimeStatistics,
    mean,
    median,
    mode,
    std_dev,
    max_wait,
    summarize,
)

__all__ = [
    'MODE_FREQUENCY_LIMIT',
    'WaitTimeStatistics',
    'mean',
    'median',
    'mode',
    'std_dev',
    'max_wait',
    'summarize',
]
