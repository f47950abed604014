"""Simple API for running schedsim simulations."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from schedsim.config import (
    DEFAULT_MAX_PRIORITY,
    DEFAULT_POLICIES,
    DEFAULT_RESULTS_FILENAME_PATTERN,
    DEFAULT_START_PRIORITY,
    DEFAULT_TIME_QUANTUM,
    DEFAULT_WORKLOADS_DIR,
    RESULTS_DIR,
)
from schedsim.environment.loader import WorkloadConfig, WorkloadLoader
from schedsim.policies import get_policy
from schedsim.runner.comparison import ComparisonRunner
from schedsim.workloads import AVAILABLE_WORKLOADS

logger = logging.getLogger("schedsim.api")

WorkloadRef = Union[WorkloadConfig, str, Path, List[List[int]], None]


def resolve_workload(workload: WorkloadRef = None) -> WorkloadConfig:
    """
    Turn any supported workload reference into a validated config.

    Args:
        workload: One of
            - None: the default built-in dataset
            - WorkloadConfig: used as is
            - list of rows: validated as a custom workload
            - built-in workload name
            - path to a workload JSON file

    Returns:
        Validated WorkloadConfig

    Raises:
        FileNotFoundError: If a path does not exist
        ValueError: If the workload is invalid
    """
    if workload is None:
        return WorkloadConfig.from_builtin()

    if isinstance(workload, WorkloadConfig):
        return workload

    if isinstance(workload, list):
        return WorkloadConfig(processes=workload)

    if isinstance(workload, str) and workload in AVAILABLE_WORKLOADS:
        return WorkloadConfig.from_builtin(workload)

    path = Path(workload)
    workloads_dir = DEFAULT_WORKLOADS_DIR if DEFAULT_WORKLOADS_DIR.exists() else path.parent
    return WorkloadLoader(workloads_dir).load(path)


def run_simulation(
    workload: WorkloadRef = None,
    policies: Optional[List[str]] = None,
    time_quantum: int = DEFAULT_TIME_QUANTUM,
    max_priority: int = DEFAULT_MAX_PRIORITY,
    start_priority: int = DEFAULT_START_PRIORITY,
    check_invariants: bool = True,
    trace_dir: Optional[str] = None,
    verbose: bool = False,
    output_path: Optional[str] = None,
    save_results: bool = False,
) -> Dict[str, Any]:
    """
    Run a scheduling comparison over a workload.

    This is the main entry point for using schedsim from Python.

    Args:
        workload: Workload name, JSON path, row list or WorkloadConfig (default: built-in dataset)
        policies: Policy names to run in order (default: fcfs, sjf, mlfq)
        time_quantum: MLFQ ticks per priority level (default: 5)
        max_priority: MLFQ maximum priority level (default: 3)
        start_priority: MLFQ starting priority level (default: 1)
        check_invariants: Check queue/statistics invariants every tick (default: True)
        trace_dir: Directory to write per-tick traces to, or None (default: None)
        verbose: Show per-policy progress (default: False)
        output_path: Path to save results JSON, or None for auto-generated (default: None)
        save_results: Whether to save results to file (default: False)

    Returns:
        Dictionary containing:
            - workload: str
            - results: list of per-policy result dicts (see RunResult)
            - comparison: ComparisonResult object
            - best: dict of metric -> policy name
            - consistent: bool (no invariant violations in any run)
            - output_file: str (path where results were saved, if save_results=True)

    Example:
        ```python
        from schedsim import run_simulation

        results = run_simulation(workload="cop4600", policies=["fcfs", "mlfq"])
        for run in results["results"]:
            print(run["policy"], run["avg_waiting_time"])
        ```

    Raises:
        ValueError: If an unknown policy or invalid workload/settings are given
        FileNotFoundError: If a workload file does not exist
    """
    config = resolve_workload(workload)

    policy_objects = []
    for name in policies or DEFAULT_POLICIES:
        if name.strip().lower() == "mlfq":
            policy = get_policy(
                name,
                time_quantum=time_quantum,
                max_priority=max_priority,
                start_priority=start_priority,
            )
        else:
            policy = get_policy(name)
        policy_objects.append(policy)

    logger.info(
        f"Running {len(policy_objects)} policies on workload '{config.name}' "
        f"({config.process_count} processes)"
    )

    start_time = datetime.now()
    runner = ComparisonRunner(config, policy_objects)
    comparison = runner.run_all(
        verbose=verbose,
        trace_dir=trace_dir,
        check_invariants=check_invariants,
    )
    duration = (datetime.now() - start_time).total_seconds()
    logger.info(f"Simulation completed in {duration:.3f}s")

    best = {}
    if comparison.results:
        for metric in ("avg_waiting_time", "avg_turnaround_time", "avg_response_time", "cpu_utilization"):
            best[metric] = comparison.best_by(metric).policy

    results = {
        "workload": config.name,
        "results": [r.model_dump() for r in comparison.results],
        "comparison": comparison,
        "best": best,
        "consistent": all(r.consistent for r in comparison.results),
        "duration_seconds": duration,
    }

    if save_results:
        try:
            if output_path is None:
                timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                output_file = RESULTS_DIR / DEFAULT_RESULTS_FILENAME_PATTERN.format(timestamp=timestamp)
            else:
                output_file = Path(output_path)

            output_file.parent.mkdir(parents=True, exist_ok=True)

            result_data = {
                "timestamp": datetime.now().isoformat(),
                "config": {
                    "workload": config.model_dump(),
                    "policies": [p.name for p in policy_objects],
                    "time_quantum": time_quantum,
                    "max_priority": max_priority,
                    "start_priority": start_priority,
                },
                **{k: v for k, v in results.items() if k != "comparison"},
            }

            with open(output_file, 'w') as f:
                json.dump(result_data, f, indent=2)

            results["output_file"] = str(output_file)
            logger.info(f"Results saved to: {output_file}")

        except OSError as e:
            error_msg = f"Failed to save results to '{output_path or RESULTS_DIR}': {e}"
            logger.error(error_msg)
            results["save_error"] = error_msg

    return results
