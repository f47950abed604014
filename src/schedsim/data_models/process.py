"""Process data models for schedsim."""

from pydantic import BaseModel, Field, model_validator

from schedsim.data_models.task import Task


class ProcessStatistics(BaseModel):
    """
    Timing statistics accumulated for one process during a run.

    All processes arrive at tick 0, so arrival_time stays at zero.
    Response time uses -1 as the "not yet served" sentinel.
    """

    arrival_time: int = Field(default=0, ge=0, description="Tick the process became ready")
    waiting_time: int = Field(default=0, ge=0, description="Ticks spent ready but not served")
    burst_time: int = Field(default=0, ge=0, description="Ticks of CPU service received")
    io_time: int = Field(default=0, ge=0, description="Ticks of I/O service received")
    completion_time: int = Field(default=0, ge=0, description="Tick the last task finished")
    turnaround_time: int = Field(default=0, ge=0, description="waiting + burst + I/O")
    response_time: int = Field(default=-1, ge=-1, description="Tick of first CPU service")

    @property
    def responded(self) -> bool:
        return self.response_time >= 0


class MLFQPriorityDescriptor(BaseModel):
    """Feedback-queue state attached to a process during MLFQ runs."""

    time_quantum: int = Field(gt=0, description="Tick budget per priority level")
    max_priority: int = Field(ge=1, description="Highest reachable priority level")
    priority: int = Field(ge=0, description="Current priority level")

    @model_validator(mode="after")
    def check_priority_bound(self) -> "MLFQPriorityDescriptor":
        """Reject a starting priority above the maximum."""
        if self.priority > self.max_priority:
            raise ValueError(
                f"priority {self.priority} exceeds max_priority {self.max_priority}"
            )
        return self

    @property
    def promotion_threshold(self) -> int:
        """Cumulative burst time at which the next promotion happens."""
        return self.time_quantum * (self.priority + 1)

    @property
    def at_max(self) -> bool:
        return self.priority >= self.max_priority


class Process(BaseModel):
    """
    A simulated process: alternating CPU and I/O tasks plus its statistics.

    The first pending task is always a CPU burst when the process is created.
    Processes live in the engine's process table; queues only hold their
    indices.
    """

    index: int = Field(ge=0, description="Position in the process table (0-based)")
    tasks: list[Task] = Field(default_factory=list, description="Pending tasks, head first")
    done: list[Task] = Field(default_factory=list, description="Completed tasks in order")
    stats: ProcessStatistics = Field(default_factory=ProcessStatistics)
    mlfq: MLFQPriorityDescriptor | None = Field(
        default=None, description="Feedback-queue state (MLFQ runs only)"
    )
    parked: bool = Field(
        default=False,
        description="Waiting in the I/O queue without I/O demand (MLFQ demotion)",
    )

    @property
    def current_task(self) -> Task | None:
        """Head of the pending task list, or None when finished."""
        return self.tasks[0] if self.tasks else None

    @property
    def finished(self) -> bool:
        return not self.tasks

    @property
    def label(self) -> str:
        """1-based display name used in reports."""
        return f"P{self.index + 1}"

    def reset(self, durations: list[int]) -> None:
        """
        Reset this process in place for a new run.

        Args:
            durations: Burst lengths in workload order (CPU, I/O, CPU, ...)
        """
        self.tasks = [Task(duration=d) for d in durations]
        self.done = []
        self.stats = ProcessStatistics()
        self.mlfq = None
        self.parked = False

    def complete_current_task(self) -> Task | None:
        """Move the head task to the completed log and return it."""
        if not self.tasks:
            return None
        task = self.tasks.pop(0)
        self.done.append(task)
        return task

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"{self.label}(pending={len(self.tasks)}, done={len(self.done)})"
