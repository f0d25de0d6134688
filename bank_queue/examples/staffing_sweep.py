"""How many tellers does a bank need for a given arrival rate?"""

import argparse
from typing import Dict, List, Optional

import numpy as np

from ..config import SimulationConfig, SIMULATION_MINUTES
from ..system import run_day


def run_staffing_sweep(arrival_rate: float,
                       teller_counts: List[int],
                       replications: int = 5,
                       minutes: int = SIMULATION_MINUTES,
                       base_seed: Optional[int] = 42) -> List[Dict]:
    """
    Simulate each staffing level several times and average the results.

    Returns one row per teller count with the averaged mean wait, max wait,
    served fraction and teller utilization.
    """
    rows = []
    for num_tellers in teller_counts:
        metrics = []
        for i in range(replications):
            seed = None if base_seed is None else base_seed + i
            config = SimulationConfig(arrival_rate=arrival_rate,
                                      num_tellers=num_tellers,
                                      minutes=minutes,
                                      seed=seed)
            result = run_day(config)
            summary = result.get_metrics_summary()
            summary['served_fraction'] = result.served_fraction()
            metrics.append(summary)

        rows.append({
            'num_tellers': num_tellers,
            'mean_wait': float(np.mean([m['mean_wait'] for m in metrics])),
            'max_wait': float(np.mean([m['max_wait'] for m in metrics])),
            'served_fraction': float(np.mean([m['served_fraction'] for m in metrics])),
            'left_in_queue': float(np.mean([m['left_in_queue'] for m in metrics])),
            'teller_utilization': float(np.mean([m['teller_utilization'] for m in metrics])),
        })
    return rows


def recommend_tellers(rows: List[Dict], target_wait: float) -> Optional[int]:
    """Smallest teller count whose average mean wait is within target_wait."""
    for row in sorted(rows, key=lambda r: r['num_tellers']):
        if row['mean_wait'] <= target_wait:
            return row['num_tellers']
    return None


def main(argv=None):
    parser = argparse.ArgumentParser(description='Compare bank staffing levels')
    parser.add_argument('--arrival-rate', type=float, default=1.5)
    parser.add_argument('--min-tellers', type=int, default=1)
    parser.add_argument('--max-tellers', type=int, default=6)
    parser.add_argument('-r', '--replications', type=int, default=5)
    parser.add_argument('--target-wait', type=float, default=2.0,
                        help='Acceptable mean wait in minutes (default: 2.0)')
    parser.add_argument('--plot-file', type=str)
    args = parser.parse_args(argv)

    rows = run_staffing_sweep(args.arrival_rate,
                              list(range(args.min_tellers, args.max_tellers + 1)),
                              replications=args.replications)

    print(f"\n=== Staffing Sweep (lambda = {args.arrival_rate:.2f}) ===")
    print(f"{'Tellers':>7} {'Mean wait':>10} {'Max wait':>9} {'Served':>8} {'Utilization':>12}")
    for row in rows:
        print(f"{row['num_tellers']:>7} {row['mean_wait']:>10.2f} {row['max_wait']:>9.1f} "
              f"{row['served_fraction']:>8.1%} {row['teller_utilization']:>12.1%}")

    best = recommend_tellers(rows, args.target_wait)
    if best is None:
        print(f"\nNo staffing level kept the mean wait under {args.target_wait:.1f} minutes.")
    else:
        print(f"\nRecommended tellers: {best}")

    if args.plot_file:
        from ..visualization import plot_staffing_sweep, use_headless_backend
        use_headless_backend()
        fig = plot_staffing_sweep(rows, target_wait=args.target_wait)
        fig.savefig(args.plot_file, dpi=300, bbox_inches='tight')
        print(f"Plot saved to: {args.plot_file}")


if __name__ == "__main__":
    main()
