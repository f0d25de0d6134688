#!/usr/bin/env python3
"""Command-line interface for running bank queue simulations."""

import argparse
import json
import logging
import sys
from typing import Callable, Dict, List, Optional

import numpy as np
from scipy import stats

from ..config import (
    ConfigurationError,
    SimulationConfig,
    SIMULATION_MINUTES,
    load_config,
    parse_arrival_rate,
    parse_num_tellers,
)
from ..distributions import MIN_SERVICE_TIME, MAX_SERVICE_TIME
from ..system import SimulationResult, run_day

logger = logging.getLogger(__name__)

REPORT_RULE = "=" * 51


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def stdin_is_terminal() -> bool:
    try:
        return sys.stdin.isatty()
    except (AttributeError, ValueError):
        return False


def _ask(input_fn: Callable[[str], str], prompt: str, name: str) -> str:
    try:
        return input_fn(prompt)
    except EOFError:
        raise ConfigurationError(f"no input for {name}") from None


def prompt_parameters(input_fn: Callable[[str], str] = input) -> Dict:
    """Ask the operator for lambda and the teller count."""
    print("--- Welcome to the Bank Queue Simulator ---")
    print("This program will simulate an 8-hour bank day.\n")
    arrival_rate = parse_arrival_rate(
        _ask(input_fn, "Enter the average number of customers arriving *per minute* (lambda): ",
             "arrival rate")
    )
    num_tellers = parse_num_tellers(
        _ask(input_fn, "Enter the number of tellers working: ", "number of tellers")
    )
    return {'arrival_rate': arrival_rate, 'num_tellers': num_tellers}


def build_config(args: argparse.Namespace,
                 input_fn: Callable[[str], str] = input) -> SimulationConfig:
    """Merge the config file, command-line options and operator prompts."""
    if args.config:
        params = load_config(args.config).to_dict()
    else:
        params = {}

    overrides = {
        'arrival_rate': args.arrival_rate,
        'num_tellers': args.tellers,
        'minutes': args.time,
        'min_service_time': args.min_service,
        'max_service_time': args.max_service,
        'seed': args.seed,
    }
    for key, value in overrides.items():
        if value is not None:
            params[key] = value

    missing = [key for key in ('arrival_rate', 'num_tellers') if key not in params]
    if missing:
        if not (args.interactive or stdin_is_terminal()):
            raise ConfigurationError(
                "missing required parameters: " + ", ".join(missing)
                + " (use --arrival-rate/--tellers, --config or --interactive)"
            )
        prompted = prompt_parameters(input_fn)
        for key in missing:
            params[key] = prompted[key]

    params.setdefault('minutes', SIMULATION_MINUTES)
    params.setdefault('min_service_time', MIN_SERVICE_TIME)
    params.setdefault('max_service_time', MAX_SERVICE_TIME)
    return SimulationConfig(**params).validate()


def format_banner(config: SimulationConfig) -> str:
    hours = config.minutes / 60
    return "\n".join([
        f"\n--- Starting {hours:g}-Hour ({config.minutes} Minute) Simulation ---",
        f"     Avg. Arrivals / Min (Lambda): {config.arrival_rate:.2f}",
        f"     Number of Tellers: {config.num_tellers}",
        "-" * 50,
    ])


def format_report(result: SimulationResult) -> str:
    """Render the final report for one simulated day."""
    lines = [
        "========== FINAL SIMULATION REPORT ==========",
        "",
        "--- Simulation Summary ---",
        f"Total Customers Arrived: {result.total_arrivals}",
        f"Total Customers Served:  {result.served}",
        f"Customers Left in Queue: {result.left_in_queue}",
    ]

    if result.served == 0:
        lines += ["", "No customers were served. Cannot generate wait-time statistics."]
    else:
        s = result.statistics()
        lines += [
            "",
            "--- Wait Time Analysis (in minutes) ---",
            f"Mean (Average) Wait: {s.mean:.2f} minutes",
            f"Median Wait:         {s.median:.1f} minutes",
            f"Mode Wait:           {s.mode:d} minutes",
            f"Standard Deviation:  {s.std_dev:.2f} minutes",
            f"Longest Wait Time:   {s.max_wait:d} minutes",
        ]

    if result.dropped_records:
        lines.append(f"Warning: {result.dropped_records} wait times could not be recorded.")
    lines.append(REPORT_RULE)
    return "\n".join(lines)


def run_replications(config: SimulationConfig,
                     num_replications: int,
                     base_seed: Optional[int] = None) -> Dict:
    """Simulate several independent days and summarize the headline metrics."""
    if num_replications < 1:
        raise ConfigurationError("replications must be >= 1")

    results: List[Dict] = []
    for i in range(num_replications):
        seed = None if base_seed is None else base_seed + i
        day_config = SimulationConfig(**{**config.to_dict(), 'seed': seed})
        logger.info("Replication %d/%d (seed=%s)", i + 1, num_replications, seed)
        results.append(run_day(day_config).get_metrics_summary())

    summary = {
        'replications': num_replications,
        'simulation_time': config.minutes,
        'config': config.to_dict(),
        'metrics': {},
    }

    for key in results[0]:
        values = np.array([r[key] for r in results], dtype=float)
        summary['metrics'][key] = {
            'mean': np.mean(values),
            'std': np.std(values),
            'min': np.min(values),
            'max': np.max(values),
        }

    mean_waits = np.array([r['mean_wait'] for r in results], dtype=float)
    summary['mean_wait_ci95'] = confidence_interval(mean_waits)
    return summary


def confidence_interval(values: np.ndarray, confidence: float = 0.95) -> List[float]:
    """Student-t confidence interval for the mean of values."""
    center = float(np.mean(values))
    if len(values) < 2:
        return [center, center]
    sem = stats.sem(values)
    if sem == 0:
        return [center, center]
    low, high = stats.t.interval(confidence, len(values) - 1, loc=center, scale=sem)
    return [float(low), float(high)]


def convert_numpy_types(obj):
    """Convert numpy types to Python native types for JSON serialization."""
    if isinstance(obj, np.integer):
        return int(obj)
    elif isinstance(obj, np.floating):
        return float(obj)
    elif isinstance(obj, np.ndarray):
        return obj.tolist()
    elif isinstance(obj, dict):
        return {key: convert_numpy_types(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [convert_numpy_types(item) for item in obj]
    else:
        return obj


def save_results(results: Dict, output_path: str) -> None:
    """Save results to JSON file."""
    with open(output_path, 'w') as f:
        json.dump(convert_numpy_types(results), f, indent=2)


def print_replication_summary(summary: Dict, detailed: bool = False) -> None:
    print("\n=== Replication Results ===")
    print(f"Replications: {summary['replications']}")
    print(f"Simulation Time: {summary['simulation_time']} minutes")

    for metric, values in summary['metrics'].items():
        print(f"  {metric}:")
        print(f"    Mean: {values['mean']:.4f} (±{values['std']:.4f})")
        if detailed:
            print(f"    Min: {values['min']:.4f}, Max: {values['max']:.4f}")

    low, high = summary['mean_wait_ci95']
    print(f"\nMean wait 95% CI: [{low:.4f}, {high:.4f}] minutes")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Simulate a bank day with Poisson arrivals '
                                                 'and parallel tellers')

    parser.add_argument('--arrival-rate', type=float,
                        help='Average customers arriving per minute (lambda)')
    parser.add_argument('--tellers', type=int,
                        help='Number of tellers working')
    parser.add_argument('--config', type=str,
                        help='JSON configuration file')
    parser.add_argument('-i', '--interactive', action='store_true',
                        help='Prompt for missing parameters')

    parser.add_argument('-t', '--time', type=int,
                        help=f'Simulation length in minutes (default: {SIMULATION_MINUTES})')
    parser.add_argument('--min-service', type=int,
                        help=f'Minimum service time in minutes (default: {MIN_SERVICE_TIME})')
    parser.add_argument('--max-service', type=int,
                        help=f'Maximum service time in minutes (default: {MAX_SERVICE_TIME})')
    parser.add_argument('-s', '--seed', type=int,
                        help='Random seed (default: different every run)')
    parser.add_argument('-r', '--replications', type=int, default=1,
                        help='Number of replications (default: 1)')

    # Output options
    parser.add_argument('-o', '--output', type=str,
                        help='Output file for results (JSON)')
    parser.add_argument('-p', '--plot', action='store_true',
                        help='Show plots')
    parser.add_argument('--plot-file', type=str,
                        help='Save plots to file')
    parser.add_argument('-d', '--detailed', action='store_true',
                        help='Show detailed statistics')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress console output')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log simulation progress')
    return parser


def main(argv: Optional[List[str]] = None,
         input_fn: Callable[[str], str] = input) -> None:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    try:
        config = build_config(args, input_fn)
        if args.replications < 1:
            raise ConfigurationError("replications must be >= 1")
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.replications > 1:
        summary = run_replications(config, args.replications, config.seed)
        if not args.quiet:
            print_replication_summary(summary, args.detailed)
        if args.output:
            save_results(summary, args.output)
            if not args.quiet:
                print(f"\nResults saved to: {args.output}")
        if args.plot or args.plot_file:
            if not args.quiet:
                print("\nRunning additional simulation for plotting...")
            result = run_day(config)
            _plot(result, args)
        return

    if not args.quiet:
        print(format_banner(config))
    result = run_day(config)
    if not args.quiet:
        print("... Simulation complete.\n")
        print(format_report(result))

    if args.output:
        save_results(result.to_dict(), args.output)
        if not args.quiet:
            print(f"\nResults saved to: {args.output}")

    if args.plot or args.plot_file:
        _plot(result, args)


def _plot(result: SimulationResult, args: argparse.Namespace) -> None:
    from ..visualization import plot_simulation_dashboard, use_headless_backend

    if not args.plot:
        use_headless_backend()
    fig = plot_simulation_dashboard(result)
    if args.plot_file:
        fig.savefig(args.plot_file, dpi=300, bbox_inches='tight')
        if not args.quiet:
            print(f"Plot saved to: {args.plot_file}")
    if args.plot:
        import matplotlib.pyplot as plt
        plt.show()


if __name__ == '__main__':
    main()
