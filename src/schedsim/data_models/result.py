"""Result data models for single runs and policy comparisons."""

from typing import Literal

from pydantic import BaseModel, Field

from schedsim.data_models.violation import Violation


class ProcessReport(BaseModel):
    """Final statistics for one process, as shown in the report table."""

    process: int = Field(ge=1, description="1-based process number")
    waiting_time: int = Field(ge=0)
    burst_time: int = Field(ge=0)
    io_time: int = Field(ge=0)
    completion_time: int = Field(ge=0)
    turnaround_time: int = Field(ge=0, description="waiting + burst + I/O")
    response_time: int = Field(ge=-1, description="-1 if never served")

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"P{self.process}(Tw={self.waiting_time}, "
            f"Ttr={self.turnaround_time}, Tr={self.response_time})"
        )


class RunResult(BaseModel):
    """
    Final output of one policy run over a workload.

    Averages use truncating integer division, as the report table shows them.
    """

    policy: str = Field(description="Policy display name, e.g. FCFS")
    workload: str = Field(description="Workload name")
    processes: list[ProcessReport] = Field(default_factory=list)
    avg_waiting_time: int = Field(description="Mean waiting time (truncated)")
    avg_turnaround_time: int = Field(description="Mean turnaround time (truncated)")
    avg_response_time: int = Field(description="Mean response time (truncated)")
    total_time: int = Field(ge=0, description="Latest completion time")
    cpu_busy_time: int = Field(ge=0, description="Ticks the CPU served a process")
    cpu_utilization: float = Field(ge=0, description="CPU busy percentage of total time")
    ticks: int = Field(ge=0, description="Ticks the engine stepped")
    idle_ticks: int = Field(default=0, ge=0, description="Ticks with no process on the CPU")
    max_ready_queue: int = Field(default=0, ge=0, description="Largest CPU-ready queue seen")
    avg_ready_queue: float = Field(default=0.0, ge=0, description="Mean CPU-ready queue length")
    max_io_queue: int = Field(default=0, ge=0, description="Largest I/O-wait queue seen")
    violations: list[Violation] = Field(
        default_factory=list, description="Invariant violations detected during the run"
    )
    execution_time: float | None = Field(default=None, description="Wall-clock run time in seconds")

    @property
    def consistent(self) -> bool:
        return not self.violations

    def __str__(self) -> str:
        """Human-readable string representation."""
        return (
            f"RunResult({self.policy}: Tw={self.avg_waiting_time}, "
            f"Ttr={self.avg_turnaround_time}, Tr={self.avg_response_time}, "
            f"total={self.total_time}, util={self.cpu_utilization:.1f}%)"
        )


class ComparisonResult(BaseModel):
    """Results of several policies run over the same workload."""

    workload: str = Field(description="Workload name")
    results: list[RunResult] = Field(default_factory=list)

    def get(self, policy: str) -> RunResult | None:
        """Return the result for a policy name (case-insensitive)."""
        for result in self.results:
            if result.policy.lower() == policy.lower():
                return result
        return None

    def best_by(
        self,
        metric: Literal[
            "avg_waiting_time", "avg_turnaround_time", "avg_response_time",
            "total_time", "cpu_utilization",
        ],
    ) -> RunResult | None:
        """
        Return the best run for a metric.

        Utilization is maximized; every other metric is minimized. Ties keep
        the earlier run.
        """
        if not self.results:
            return None
        if metric == "cpu_utilization":
            return max(self.results, key=lambda r: r.cpu_utilization)
        return min(self.results, key=lambda r: getattr(r, metric))

    def __str__(self) -> str:
        """Human-readable string representation."""
        policies = ", ".join(r.policy for r in self.results)
        return f"ComparisonResult({self.workload}: {policies})"
