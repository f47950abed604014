"""Multi-Level Feedback Queue policy."""

import logging
from typing import TYPE_CHECKING

from schedsim.config import DEFAULT_MAX_PRIORITY, DEFAULT_START_PRIORITY, DEFAULT_TIME_QUANTUM
from schedsim.data_models.process import MLFQPriorityDescriptor
from schedsim.data_models.transition import Transition
from schedsim.policies.base import Policy

if TYPE_CHECKING:
    from schedsim.environment.engine import SchedulerEnv

logger = logging.getLogger("schedsim.policies.mlfq")


class MLFQPolicy(Policy):
    """
    Priority feedback on top of the shared CPU/I/O queue pair.

    Every process carries a priority level starting at start_priority. When
    a process is still mid-burst and its cumulative burst time has reached
    time_quantum * (priority + 1), its priority goes up by one and it is
    sent to the back of the line through a one-tick stay in the I/O-wait
    queue. Priority never goes down and stops at max_priority.
    """

    name = "MLFQ"

    def __init__(
        self,
        time_quantum: int = DEFAULT_TIME_QUANTUM,
        max_priority: int = DEFAULT_MAX_PRIORITY,
        start_priority: int = DEFAULT_START_PRIORITY,
    ) -> None:
        """
        Initialize MLFQ settings.

        Args:
            time_quantum: Ticks per priority level (must be positive)
            max_priority: Highest reachable level
            start_priority: Level every process starts at

        Raises:
            pydantic.ValidationError: If the settings are inconsistent
        """
        # Validate once up front so a bad setting fails before any run
        MLFQPriorityDescriptor(
            time_quantum=time_quantum, max_priority=max_priority, priority=start_priority
        )
        self.time_quantum = time_quantum
        self.max_priority = max_priority
        self.start_priority = start_priority

    @property
    def description(self) -> str:
        return (
            f"Multi-Level Feedback Queue: quantum={self.time_quantum}, "
            f"priorities {self.start_priority}..{self.max_priority}"
        )

    def initialize(self, env: "SchedulerEnv") -> list[Transition]:
        for process in env.processes:
            process.mlfq = MLFQPriorityDescriptor(
                time_quantum=self.time_quantum,
                max_priority=self.max_priority,
                priority=self.start_priority,
            )
        return []

    def on_burst_continue(self, env: "SchedulerEnv", served: int) -> list[Transition]:
        process = env.processes[served]
        level = process.mlfq
        if level is None or level.at_max:
            return []

        if process.stats.burst_time >= level.promotion_threshold:
            logger.debug(
                f"{process.label} reached burst {process.stats.burst_time} "
                f"at priority {level.priority}, demoting at t={env.clock}"
            )
            return [Transition(type="demote", process=served, priority=level.priority + 1)]

        return []
