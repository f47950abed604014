"""Observation data model for schedsim."""

from pydantic import BaseModel, Field


class Observation(BaseModel):
    """
    Snapshot of the engine after a tick (or after reset).

    Process references are 0-based table indices. A run's trace is the list
    of observations produced by each tick.
    """

    time: int = Field(ge=0, description="Clock value after the tick")
    served: int | None = Field(default=None, description="Process that held the CPU this tick")
    cpu_queue: list[int] = Field(default_factory=list, description="CPU-ready queue, head first")
    io_queue: list[int] = Field(default_factory=list, description="I/O-wait queue in order")
    completed: list[int] = Field(default_factory=list, description="Finished processes")

    # Events this tick
    io_returns: list[int] = Field(
        default_factory=list, description="Processes moved from I/O-wait to CPU-ready"
    )
    finished_this_tick: list[int] = Field(
        default_factory=list, description="Processes whose last task finished this tick"
    )

    @property
    def idle(self) -> bool:
        return self.served is None

    def __str__(self) -> str:
        """Human-readable string representation."""
        served = "idle" if self.served is None else f"P{self.served + 1}"
        return (
            f"Observation(t={self.time}, cpu={served}, "
            f"ready={len(self.cpu_queue)}, io={len(self.io_queue)}, "
            f"completed={len(self.completed)})"
        )
