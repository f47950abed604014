"""Base scheduling policy interface for schedsim."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from schedsim.data_models.transition import Transition

if TYPE_CHECKING:
    from schedsim.environment.engine import SchedulerEnv


class Policy(ABC):
    """
    Base interface for scheduling policies.

    A policy never mutates the queues. After each tick the engine calls
    decide() with the process that held the CPU, and applies the returned
    transitions in order.

    The burst-completion transition is shared by every policy: when the
    served process's CPU burst reaches zero it leaves the CPU-ready queue,
    either for the I/O-wait queue or, if it has no tasks left, for good.
    Subclasses customise what happens around it through the on_* hooks.

    Example:
        ```python
        from schedsim.data_models import Transition
        from schedsim.policies import Policy

        class LastComeFirstServed(Policy):
            name = "LCFS"
            description = "Last-Come-First-Served"

            def on_burst_complete(self, env, served):
                rest = [pid for pid in env.cpu_queue if pid != served]
                return [Transition(type="reorder", order=rest[::-1])]
        ```
    """

    name: str = "BASE"

    def initialize(self, env: "SchedulerEnv") -> list[Transition]:
        """
        Prepare a freshly reset environment.

        Args:
            env: Environment whose process table was just reset

        Returns:
            Transitions applied before the first tick
        """
        return []

    def decide(self, env: "SchedulerEnv", served: int | None) -> list[Transition]:
        """
        Decide the queue transitions after a tick.

        Args:
            env: Environment after the tick's CPU and I/O passes
            served: Index of the process served this tick, or None if idle

        Returns:
            Transitions for the engine to apply, in order
        """
        if served is None:
            return self.on_idle(env)

        task = env.processes[served].current_task
        if task is None:
            return []

        if task.spent:
            return [Transition(type="complete_burst", process=served)] + \
                self.on_burst_complete(env, served)

        return self.on_burst_continue(env, served)

    def on_burst_complete(self, env: "SchedulerEnv", served: int) -> list[Transition]:
        """Transitions to apply after the served process leaves the CPU-ready queue."""
        return []

    def on_burst_continue(self, env: "SchedulerEnv", served: int) -> list[Transition]:
        """Transitions for a served process whose burst is still running."""
        return []

    def on_idle(self, env: "SchedulerEnv") -> list[Transition]:
        """Transitions after a tick in which no process was served."""
        return []

    @property
    @abstractmethod
    def description(self) -> str:
        """One-line description used by list-policies."""

    def __str__(self) -> str:
        return self.name
