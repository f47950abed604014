"""Comparison runner for executing several policies over one workload."""

import logging
from pathlib import Path

from schedsim.config import DEFAULT_POLICIES
from schedsim.data_models.result import ComparisonResult, RunResult
from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig
from schedsim.policies import Policy, get_policy
from schedsim.runner.simulation import SimulationRunner

logger = logging.getLogger("schedsim.runner.comparison")


class ComparisonRunner:
    """
    Runs every requested policy over the same workload.

    Each run starts from a fresh reset of the workload, so runs do not
    share any state.
    """

    def __init__(
        self,
        config: WorkloadConfig,
        policies: list[Policy | str] | None = None
    ):
        """
        Initialize comparison runner.

        Args:
            config: Validated workload
            policies: Policy instances or names (None = fcfs, sjf, mlfq)
        """
        self.config = config
        self.policies = [
            get_policy(p) if isinstance(p, str) else p
            for p in (policies or DEFAULT_POLICIES)
        ]

    def run_all(
        self,
        verbose: bool = False,
        trace_dir: str | Path | None = None,
        check_invariants: bool = True
    ) -> ComparisonResult:
        """
        Run all policies in order.

        Args:
            verbose: If True, print progress
            trace_dir: Optional directory for per-policy traces
            check_invariants: If True, check invariants after every tick

        Returns:
            ComparisonResult with one RunResult per policy
        """
        if verbose:
            print(f"Running {len(self.policies)} policies on workload '{self.config.name}'...")
            print()

        results = []
        for i, policy in enumerate(self.policies, 1):
            if verbose:
                print(f"[{i}/{len(self.policies)}] {policy.name}...", end=" ")

            result = self.run_policy(policy, trace_dir=trace_dir, check_invariants=check_invariants)
            results.append(result)

            if verbose:
                status = "OK" if result.consistent else f"{len(result.violations)} violations"
                print(f"{status} (total={result.total_time}, util={result.cpu_utilization:.2f}%)")

        return ComparisonResult(workload=self.config.name, results=results)

    def run_policy(
        self,
        policy: Policy,
        trace_dir: str | Path | None = None,
        check_invariants: bool = True
    ) -> RunResult:
        """
        Run a single policy over the workload.

        Args:
            policy: Policy to run
            trace_dir: Optional directory for the trace
            check_invariants: If True, check invariants after every tick

        Returns:
            RunResult for this policy
        """
        logger.debug(f"Starting {policy.name} run on '{self.config.name}'")
        env = SchedulerEnv(self.config, policy)
        runner = SimulationRunner(env)
        return runner.run(trace_dir=trace_dir, check_invariants=check_invariants)
