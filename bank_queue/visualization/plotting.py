"""
Visualization utilities for bank queue simulations.
"""

from typing import Dict, List, Optional

import matplotlib
import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns
from scipy import stats


def plot_wait_time_histogram(result, ax=None):
    """Histogram of recorded wait times with the mean and median marked."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    waits = result.wait_times()
    if waits.size == 0:
        ax.text(0.5, 0.5, 'No customers served',
                ha='center', va='center', transform=ax.transAxes)
        ax.set_title('Wait Time Distribution')
        return ax

    s = result.statistics()
    bins = np.arange(0, s.max_wait + 2) - 0.5
    sns.histplot(waits, bins=bins, ax=ax, color='steelblue')
    ax.axvline(s.mean, color='red', linestyle='--', label=f'Mean {s.mean:.2f}')
    ax.axvline(s.median, color='green', linestyle=':', label=f'Median {s.median:.1f}')
    ax.set_xlabel('Wait Time (minutes)')
    ax.set_ylabel('Customers')
    ax.set_title('Wait Time Distribution')
    ax.legend()
    return ax


def plot_queue_over_time(result, ax=None):
    """Queue length and busy tellers at the end of each minute."""
    if ax is None:
        _, ax = plt.subplots(figsize=(10, 5))

    minutes = np.arange(len(result.queue_lengths))
    ax.plot(minutes, result.queue_lengths, label='Customers waiting')
    ax.step(minutes, result.busy_tellers, where='post', label='Busy tellers')
    ax.axhline(result.config.num_tellers, color='gray', linestyle='--', alpha=0.5)
    ax.set_xlabel('Minute')
    ax.set_ylabel('Count')
    ax.set_title('Queue Length Over Time')
    ax.grid(True, alpha=0.3)
    ax.legend()
    return ax


def plot_arrival_distribution(result, ax=None):
    """Compare per-minute arrival counts with the Poisson pmf for lambda."""
    if ax is None:
        _, ax = plt.subplots(figsize=(8, 5))

    arrivals = np.asarray(result.arrivals)
    lam = result.config.arrival_rate
    upper = int(max(arrivals.max() if arrivals.size else 0,
                    stats.poisson.ppf(0.999, lam)))
    k = np.arange(0, upper + 1)

    if arrivals.size:
        observed = np.bincount(arrivals, minlength=upper + 1)[:upper + 1] / arrivals.size
        ax.bar(k, observed, alpha=0.7, label='Simulated')
    ax.plot(k, stats.poisson.pmf(k, lam), 'ro-', label=f'Poisson({lam:g})')
    ax.set_xlabel('Arrivals per minute')
    ax.set_ylabel('Probability')
    ax.set_title('Arrival Process')
    ax.legend()
    return ax


def plot_simulation_dashboard(result, title: str = "Bank Queue Simulation"):
    """Create a dashboard of the main charts for one simulated day."""
    fig, ((ax1, ax2), (ax3, ax4)) = plt.subplots(2, 2, figsize=(15, 10))
    fig.suptitle(title, fontsize=16)

    ax1.bar(['Arrived', 'Served', 'Left in queue'],
            [result.total_arrivals, result.served, result.left_in_queue])
    ax1.set_ylabel('Number of Customers')
    ax1.set_title('Customer Flow')

    plot_wait_time_histogram(result, ax=ax2)
    plot_queue_over_time(result, ax=ax3)
    plot_arrival_distribution(result, ax=ax4)

    plt.tight_layout()
    return fig


def plot_staffing_sweep(rows: List[Dict], target_wait: Optional[float] = None):
    """Mean wait and utilization against the number of tellers."""
    tellers = [row['num_tellers'] for row in rows]
    mean_waits = [row['mean_wait'] for row in rows]
    utilization = [row['teller_utilization'] for row in rows]

    fig, ax1 = plt.subplots(figsize=(10, 6))
    ax1.plot(tellers, mean_waits, 'o-', color='tab:blue', label='Mean wait')
    ax1.set_xlabel('Tellers')
    ax1.set_ylabel('Mean wait (minutes)', color='tab:blue')
    if target_wait is not None:
        ax1.axhline(target_wait, color='tab:blue', linestyle='--', alpha=0.5)

    ax2 = ax1.twinx()
    ax2.plot(tellers, utilization, 's-', color='tab:orange', label='Utilization')
    ax2.set_ylabel('Teller utilization', color='tab:orange')
    ax2.set_ylim(0, 1.05)

    ax1.set_title('Staffing Sweep')
    fig.tight_layout()
    return fig


def use_headless_backend() -> None:
    """Switch matplotlib to a non-interactive backend (for saving files only)."""
    matplotlib.use('Agg')
