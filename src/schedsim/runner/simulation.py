"""Simulation runner for executing a single policy run in schedsim."""

import json
import logging
import time
from pathlib import Path

from schedsim.config import TRACE_FILENAME
from schedsim.data_models.result import RunResult
from schedsim.environment.engine import SchedulerEnv
from schedsim.metrics.accumulator import StatisticsAccumulator
from schedsim.validation.checker import InvariantChecker

logger = logging.getLogger("schedsim.runner.simulation")


class SimulationRunner:
    """
    Runs one policy over one workload until both queues drain.

    Orchestrates the interaction between:
    - SchedulerEnv (tick engine + policy)
    - InvariantChecker (checks queue and statistics invariants)
    - StatisticsAccumulator (tracks backlog, builds the final result)
    """

    def __init__(self, env: SchedulerEnv):
        """
        Initialize simulation runner.

        Args:
            env: SchedulerEnv instance (workload and policy already attached)
        """
        self.env = env
        self.checker = InvariantChecker()
        self.metrics = StatisticsAccumulator()
        self.violations = []

    def run(
        self,
        verbose: bool = False,
        trace_dir: str | Path | None = None,
        check_invariants: bool = True
    ) -> RunResult:
        """
        Run a complete simulation.

        Args:
            verbose: If True, print one line per tick
            trace_dir: Optional directory to save the per-tick trace
            check_invariants: If True, check invariants after every tick

        Returns:
            RunResult with per-process statistics and run aggregates
        """
        start_time = time.time()

        # Fresh trackers so a runner can be reused
        self.checker.reset()
        self.metrics = StatisticsAccumulator()
        self.violations = []

        obs = self.env.reset()
        trace = [obs.model_dump()] if trace_dir else None

        if check_invariants:
            self._check()

        done = self.env.done
        while not done:
            obs, done = self.env.step()

            self.metrics.record_tick(obs)

            if check_invariants:
                self._check()

            if trace is not None:
                trace.append(obs.model_dump())

            if verbose:
                print(obs)

        execution_time = time.time() - start_time

        if trace_dir and trace is not None:
            self._save_trace(Path(trace_dir), trace)

        result = self.metrics.finalize(
            self.env,
            violations=self.violations,
            execution_time=execution_time
        )

        logger.info(
            f"{result.policy} on '{result.workload}': {result.ticks} ticks, "
            f"utilization {result.cpu_utilization:.2f}%"
        )

        if verbose:
            print(f"\n{result}")

        return result

    def _check(self) -> None:
        violations = self.checker.check(self.env)
        if violations:
            for v in violations:
                logger.warning(f"{self.env.policy.name} invariant violation {v}")
            self.violations.extend(violations)

    def _save_trace(self, trace_dir: Path, trace: list[dict]) -> None:
        """Write the per-tick trace as JSON into trace_dir/<policy>/."""
        run_dir = trace_dir / self.env.policy.name.lower()
        run_dir.mkdir(parents=True, exist_ok=True)
        trace_file = run_dir / TRACE_FILENAME

        trace_data = {
            "policy": self.env.policy.name,
            "workload": self.env.config.name,
            "total_ticks": self.env.clock,
            "consistent": not self.violations,
            "ticks": trace
        }
        with open(trace_file, 'w') as f:
            json.dump(trace_data, f, indent=2)

        logger.debug(f"Trace saved to: {trace_file}")
