"""Command-line interface for running fee policy benchmarks."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from amm_fee_bench.competition.config import (
    DEFAULT_SETTINGS,
    resolve_n_workers,
    resolve_seed,
)
from amm_fee_bench.competition.runner import PoolSummary, ScenarioReport, ScenarioRunner
from amm_fee_bench.competition.scenarios import DEFAULT_SCENARIOS, get_scenario


def format_summary(summary: PoolSummary) -> str:
    """Final holdings and drift percentages of one showcase pool."""
    return (
        f"X: {summary.total_x:f} {summary.drift_x * 100:f}%\n"
        f"Y: {summary.total_y:f} {summary.drift_y * 100:f}%"
    )


def format_report(report: ScenarioReport) -> str:
    lines = [report.scenario.title]
    for summary in report.showcase:
        lines.append(f"Do {summary.policy.label} swap simulation...")
        lines.append(format_summary(summary))
    for result in report.benchmarks:
        lines.append(f"Benchmark {result.policy.label} ({result.n_trials} trials)...")
        lines.append(f"X WIN: {result.win_x}")
        lines.append(f"Y WIN: {result.win_y}")
        lines.append(f"X Y WIN: {result.win_xy}")
        lines.append(f"X Y FAIL: {result.fail_xy}")
        lines.append(f"X Y WIN RATE: {result.win_rate_xy * 100:.2f}%")
    return "\n".join(lines)


def list_command(args: argparse.Namespace) -> int:
    """Print the scenario catalogue."""
    for scenario in DEFAULT_SCENARIOS:
        print(f"{scenario.name:<18} {scenario.title}")
    return 0


def run_command(args: argparse.Namespace) -> int:
    """Run the selected scenarios and print their summaries."""
    try:
        scenarios = [get_scenario(name) for name in args.scenarios] or list(DEFAULT_SCENARIOS)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        return 1

    try:
        settings = DEFAULT_SETTINGS.replace(
            initial_x=args.initial_x,
            initial_y=args.initial_y,
            fee_rate=args.fee_rate,
            batch_size=args.batch,
            sequence_length=args.length,
        )
        runner = ScenarioRunner(
            settings=settings,
            n_workers=args.workers if args.workers is not None else resolve_n_workers(),
            seed=args.seed if args.seed is not None else resolve_seed(),
        )
        for scenario in scenarios:
            print(format_report(runner.run(scenario)))
            print()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="AMM fee policy benchmark - compare fee accounting policies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  amm-fee-bench list
  amm-fee-bench run
  amm-fee-bench run full-random-10 --batch 200 --seed 7
        """,
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    list_parser = subparsers.add_parser("list", help="List available scenarios")
    list_parser.set_defaults(func=list_command)

    run_parser = subparsers.add_parser("run", help="Run scenarios and print benchmark counts")
    run_parser.add_argument(
        "scenarios", nargs="*", help="Scenario names (defaults to all scenarios)"
    )
    run_parser.add_argument(
        "--batch",
        type=int,
        default=None,
        help="Benchmark trials per scenario (defaults to shared config)",
    )
    run_parser.add_argument(
        "--length",
        type=int,
        default=None,
        help="Trades per sequence (defaults to shared config)",
    )
    run_parser.add_argument(
        "--initial-x",
        type=float,
        default=None,
        help="Initial X reserves (defaults to shared config)",
    )
    run_parser.add_argument(
        "--initial-y",
        type=float,
        default=None,
        help="Initial Y reserves (defaults to shared config)",
    )
    run_parser.add_argument(
        "--fee-rate",
        type=float,
        default=None,
        help="Proportional fee, e.g. 0.003 (defaults to shared config)",
    )
    run_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base random seed (defaults to AMM_FEE_BENCH_SEED or fresh entropy)",
    )
    run_parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes for benchmark trials (defaults to N_WORKERS or 1)",
    )
    run_parser.set_defaults(func=run_command)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
