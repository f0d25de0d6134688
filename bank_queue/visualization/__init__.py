"""Visualization utilities for bank queue simulations."""

from .plotting import (
    plot_wait_time_histogram,
    plot_queue_over_time,
    plot_arrival_distribution,
    plot_simulation_dashboard,
    plot_staffing_sweep,
    use_headless_backend
)

__all__ = [
    'plot_wait_time_histogram',
    'plot_queue_over_time',
    'plot_arrival_distribution',
    'plot_simulation_dashboard',
    'plot_staffing_sweep',
    'use_headless_backend'
]
