"""Command-line interface for schedsim."""

import argparse
import logging
import sys

from schedsim.config import (
    DEFAULT_MAX_PRIORITY,
    DEFAULT_POLICIES,
    DEFAULT_START_PRIORITY,
    DEFAULT_TIME_QUANTUM,
    DEFAULT_WORKLOAD,
)

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger("schedsim.cli")


def parse_policies(policies_arg: str | None) -> list[str]:
    """
    Parse a comma-separated policy selection.

    Args:
        policies_arg: e.g. "fcfs,mlfq", "all" or None

    Returns:
        List of policy names in the given order

    Raises:
        ValueError: If a name is unknown or the selection is empty
    """
    from schedsim.policies import AVAILABLE_POLICIES

    if policies_arg is None or policies_arg.strip().lower() == "all":
        return list(DEFAULT_POLICIES)

    names = [p.strip().lower() for p in policies_arg.split(",") if p.strip()]
    if not names:
        raise ValueError("No policies selected")

    for name in names:
        if name not in AVAILABLE_POLICIES:
            raise ValueError(
                f"Unknown policy: '{name}'. Available policies: {', '.join(AVAILABLE_POLICIES)}"
            )
    return names


def cmd_run(args):
    """Run the selected policies over a workload and print the report."""
    from schedsim.api import run_simulation
    from schedsim.io.formatter import ReportFormatter

    if args.verbose:
        logging.getLogger("schedsim").setLevel(logging.DEBUG)
    elif args.quiet:
        logging.getLogger("schedsim").setLevel(logging.WARNING)

    policies = parse_policies(args.policies)
    logger.info(f"Workload: {args.workload}, policies: {', '.join(policies)}")

    results = run_simulation(
        workload=args.workload,
        policies=policies,
        time_quantum=args.quantum,
        max_priority=args.max_priority,
        start_priority=args.start_priority,
        check_invariants=not args.no_check,
        trace_dir=args.trace_dir,
        output_path=args.output,
        save_results=args.output is not None,
    )

    formatter = ReportFormatter()
    comparison = results["comparison"]

    if args.format == "json":
        print(formatter.format_compact(comparison))
    elif args.format == "summary":
        print(formatter.format_comparison(comparison))
    else:
        print(formatter.format_all(comparison))
        if not args.quiet and len(comparison.results) > 1:
            print(formatter.format_comparison(comparison))

    if not results["consistent"]:
        logger.warning("Invariant violations were detected; see the JSON output for details")

    if "save_error" in results:
        logger.error(results["save_error"])
        sys.exit(1)


def cmd_list_policies(args):
    """List all available policies."""
    from schedsim.policies import get_policy, list_policies

    policies = list_policies()
    print(f"\nAvailable schedsim policies ({len(policies)} total):\n")
    for i, name in enumerate(policies, 1):
        print(f"  {i:2d}. {name:<6} {get_policy(name).description}")
    print()


def cmd_list_workloads(args):
    """List built-in workloads and workload files."""
    from schedsim.config import DEFAULT_WORKLOADS_DIR
    from schedsim.environment.loader import WorkloadLoader
    from schedsim.workloads import get_workload, list_workloads

    workloads = list_workloads()
    print(f"\nBuilt-in workloads ({len(workloads)} total):\n")
    for i, name in enumerate(workloads, 1):
        marker = " (default)" if name == DEFAULT_WORKLOAD else ""
        print(f"  {i:2d}. {name:<16} {len(get_workload(name))} processes{marker}")

    if DEFAULT_WORKLOADS_DIR.exists():
        files = WorkloadLoader(DEFAULT_WORKLOADS_DIR).list_workloads()
        if files:
            print(f"\nWorkload files in {DEFAULT_WORKLOADS_DIR}:\n")
            for path in files:
                print(f"  {path.relative_to(DEFAULT_WORKLOADS_DIR)}")
    print()


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="schedsim - CPU scheduling policy simulator (FCFS, SJF, MLFQ)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # All three policies on the built-in dataset
  schedsim run

  # Selected policies on a workload file
  schedsim run --workload workloads/io_bound.json --policies sjf,mlfq

  # MLFQ with a different quantum, JSON output saved to a file
  schedsim run --policies mlfq --quantum 4 --format json --output results/mlfq.json

  # List policies and workloads
  schedsim list-policies
  schedsim list-workloads
"""
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # ========== run command ==========
    run_parser = subparsers.add_parser(
        "run",
        help="Run a scheduling simulation",
        description="Run one or more scheduling policies over a workload and print the report"
    )

    # === INPUT ===
    run_parser.add_argument(
        "--workload",
        default=DEFAULT_WORKLOAD,
        metavar="NAME|FILE",
        help=f"Built-in workload name or workload JSON file (default: {DEFAULT_WORKLOAD})"
    )
    run_parser.add_argument(
        "--policies",
        type=str,
        metavar="LIST",
        help="Comma-separated policies to run, e.g. 'fcfs,sjf' (default: all)"
    )

    # === MLFQ ===
    run_parser.add_argument(
        "--quantum",
        type=int,
        default=DEFAULT_TIME_QUANTUM,
        metavar="TICKS",
        help=f"MLFQ time quantum (default: {DEFAULT_TIME_QUANTUM})"
    )
    run_parser.add_argument(
        "--max-priority",
        type=int,
        default=DEFAULT_MAX_PRIORITY,
        metavar="N",
        help=f"MLFQ maximum priority level (default: {DEFAULT_MAX_PRIORITY})"
    )
    run_parser.add_argument(
        "--start-priority",
        type=int,
        default=DEFAULT_START_PRIORITY,
        metavar="N",
        help=f"MLFQ starting priority level (default: {DEFAULT_START_PRIORITY})"
    )

    # === OUTPUT ===
    run_parser.add_argument(
        "--format",
        choices=["text", "json", "summary"],
        default="text",
        help="Report format (default: text)"
    )
    run_parser.add_argument(
        "--output",
        type=str,
        metavar="FILE",
        help="Save results to JSON file"
    )
    run_parser.add_argument(
        "--trace-dir",
        type=str,
        metavar="DIR",
        help="Save per-tick traces to directory"
    )
    run_parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip per-tick invariant checks"
    )
    run_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    run_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Minimal output (only the report tables)"
    )
    run_parser.set_defaults(func=cmd_run)

    # ========== list-policies command ==========
    policies_parser = subparsers.add_parser(
        "list-policies",
        help="List all available policies"
    )
    policies_parser.set_defaults(func=cmd_list_policies)

    # ========== list-workloads command ==========
    workloads_parser = subparsers.add_parser(
        "list-workloads",
        help="List built-in workloads and workload files"
    )
    workloads_parser.set_defaults(func=cmd_list_workloads)

    # Parse and execute
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except Exception as e:
        logger.error(f"Error: {e}")
        if getattr(args, "verbose", False):
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
