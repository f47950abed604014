"""Shortest-Job-First policy (non-preemptive, by next CPU burst)."""

from typing import TYPE_CHECKING

from schedsim.data_models.transition import Transition
from schedsim.policies.base import Policy

if TYPE_CHECKING:
    from schedsim.environment.engine import SchedulerEnv


def next_burst_length(env: "SchedulerEnv", pid: int) -> int:
    """Remaining duration of a process's head task (0 if it has none)."""
    task = env.processes[pid].current_task
    return task.duration if task is not None else 0


def sort_by_next_burst(env: "SchedulerEnv", pids: list[int]) -> list[int]:
    """Stable ascending sort by head-task remaining duration."""
    return sorted(pids, key=lambda pid: next_burst_length(env, pid))


class SJFPolicy(Policy):
    """
    Non-preemptive SJF keyed on the head task of each ready process.

    The ready queue is sorted at start and at every dispatch point: when the
    running process leaves the CPU, and after an idle tick. A running process
    is never displaced. Ties keep their previous relative order.
    """

    name = "SJF"

    @property
    def description(self) -> str:
        return "Shortest-Job-First: non-preemptive, shortest next CPU burst first"

    def initialize(self, env: "SchedulerEnv") -> list[Transition]:
        return self._reorder(env.cpu_queue, env)

    def on_burst_complete(self, env: "SchedulerEnv", served: int) -> list[Transition]:
        rest = [pid for pid in env.cpu_queue if pid != served]
        return self._reorder(rest, env)

    def on_idle(self, env: "SchedulerEnv") -> list[Transition]:
        return self._reorder(env.cpu_queue, env)

    def _reorder(self, pids: list[int], env: "SchedulerEnv") -> list[Transition]:
        if len(pids) < 2:
            return []
        return [Transition(type="reorder", order=sort_by_next_burst(env, pids))]
