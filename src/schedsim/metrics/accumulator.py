"""Statistics accumulator for end-of-run reporting in schedsim."""

from typing import TYPE_CHECKING

from schedsim.data_models.observation import Observation
from schedsim.data_models.result import ProcessReport, RunResult
from schedsim.data_models.violation import Violation

if TYPE_CHECKING:
    from schedsim.environment.engine import SchedulerEnv


def truncating_mean(total: int, count: int) -> int:
    """Integer mean rounded toward zero; 0 when there is nothing to average."""
    if count <= 0:
        return 0
    quotient = abs(total) // count
    return quotient if total >= 0 else -quotient


def cpu_utilization(busy_time: int, total_time: int) -> float:
    """CPU busy percentage of total elapsed time; 0 for a zero-length run."""
    if total_time <= 0:
        return 0.0
    return busy_time / total_time * 100


class StatisticsAccumulator:
    """
    Tracks queue statistics throughout a run and builds the final result.

    Final statistics:
    1. Turnaround time per process - waiting + burst + I/O
    2. Total time - latest completion time
    3. CPU utilization - busy ticks / total time
    4. Averages of waiting, turnaround and response time (truncated)
    5. Ready/I/O queue backlog - max and mean queue lengths
    """

    def __init__(self):
        """Initialize statistic trackers."""
        self.ready_samples = []
        self.io_samples = []
        self.ticks_recorded = 0
        self.idle_ticks = 0

    def record_tick(self, observation: Observation) -> None:
        """
        Record queue lengths after a tick.

        Args:
            observation: Observation returned by the engine for the tick
        """
        self.ready_samples.append(len(observation.cpu_queue))
        self.io_samples.append(len(observation.io_queue))
        if observation.idle:
            self.idle_ticks += 1
        self.ticks_recorded += 1

    def finalize(
        self,
        env: "SchedulerEnv",
        violations: list[Violation] | None = None,
        execution_time: float | None = None,
    ) -> RunResult:
        """
        Compute final statistics at the end of a run.

        Turnaround time is written back into each process's statistics.

        Args:
            env: Environment after its last tick
            violations: Invariant violations seen during the run
            execution_time: Wall-clock duration of the run in seconds

        Returns:
            RunResult with per-process rows and run aggregates
        """
        reports = []
        total_time = 0
        total_waiting = 0
        total_turnaround = 0
        total_response = 0

        for process in env.processes:
            stats = process.stats
            stats.turnaround_time = stats.waiting_time + stats.burst_time + stats.io_time
            total_time = max(total_time, stats.completion_time)

            total_waiting += stats.waiting_time
            total_turnaround += stats.turnaround_time
            total_response += stats.response_time

            reports.append(ProcessReport(
                process=process.index + 1,
                waiting_time=stats.waiting_time,
                burst_time=stats.burst_time,
                io_time=stats.io_time,
                completion_time=stats.completion_time,
                turnaround_time=stats.turnaround_time,
                response_time=stats.response_time,
            ))

        count = len(env.processes)

        if self.ready_samples:
            max_ready = max(self.ready_samples)
            avg_ready = sum(self.ready_samples) / len(self.ready_samples)
        else:
            max_ready = 0
            avg_ready = 0.0

        max_io = max(self.io_samples) if self.io_samples else 0

        return RunResult(
            policy=env.policy.name,
            workload=env.config.name,
            processes=reports,
            avg_waiting_time=truncating_mean(total_waiting, count),
            avg_turnaround_time=truncating_mean(total_turnaround, count),
            avg_response_time=truncating_mean(total_response, count),
            total_time=total_time,
            cpu_busy_time=env.cpu_busy_time,
            cpu_utilization=cpu_utilization(env.cpu_busy_time, total_time),
            ticks=env.clock,
            idle_ticks=self.idle_ticks,
            max_ready_queue=max_ready,
            avg_ready_queue=avg_ready,
            max_io_queue=max_io,
            violations=violations or [],
            execution_time=execution_time,
        )
