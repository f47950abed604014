"""Invariant checker for simulation state in schedsim."""

from typing import TYPE_CHECKING

from schedsim.data_models.violation import Violation

if TYPE_CHECKING:
    from schedsim.environment.engine import SchedulerEnv


class InvariantChecker:
    """
    Checks invariants that must hold after every tick.

    Invariants:
    1. Queue membership - no process in both queues, none listed twice
    2. Conservation - ready + I/O-wait + completed covers every process
    3. Response time - never changes once set
    4. MLFQ priority - never decreases, never exceeds the maximum

    Response times and priorities are compared against what the previous
    check saw, so one checker instance must follow one run from its reset.
    """

    def __init__(self) -> None:
        self._responses: dict[int, int] = {}
        self._priorities: dict[int, int] = {}

    def reset(self) -> None:
        """Forget everything seen in a previous run."""
        self._responses.clear()
        self._priorities.clear()

    def check(self, env: "SchedulerEnv") -> list[Violation]:
        """
        Check all invariants against the current environment state.

        Args:
            env: Environment after a tick

        Returns:
            List of violations (empty if all invariants hold)
        """
        violations = []

        violations.extend(self._check_queue_membership(env))
        violations.extend(self._check_conservation(env))
        violations.extend(self._check_response_times(env))
        violations.extend(self._check_priorities(env))

        return violations

    def _check_queue_membership(self, env: "SchedulerEnv") -> list[Violation]:
        """Check the two queues are disjoint and free of duplicates."""
        violations = []

        for name, queue in (("cpu", env.cpu_queue), ("io", env.io_queue)):
            if len(set(queue)) != len(queue):
                violations.append(Violation(
                    time=env.clock,
                    type="queue_duplicate",
                    details={"queue": name, "members": list(queue)}
                ))

        overlap = set(env.cpu_queue) & set(env.io_queue)
        if overlap:
            violations.append(Violation(
                time=env.clock,
                type="queue_overlap",
                details={"processes": sorted(overlap)}
            ))

        return violations

    def _check_conservation(self, env: "SchedulerEnv") -> list[Violation]:
        """Check every process is queued or completed, and completed ones are gone."""
        violations = []
        queued = set(env.cpu_queue) | set(env.io_queue)
        completed = set(env.completed)
        everyone = {p.index for p in env.processes}

        missing = everyone - queued - completed
        if missing:
            violations.append(Violation(
                time=env.clock,
                type="lost_process",
                details={"processes": sorted(missing)}
            ))

        requeued = queued & completed
        if requeued:
            violations.append(Violation(
                time=env.clock,
                type="queue_overlap",
                details={"processes": sorted(requeued), "reason": "completed process still queued"}
            ))

        return violations

    def _check_response_times(self, env: "SchedulerEnv") -> list[Violation]:
        """Check response times are set at most once."""
        violations = []

        for process in env.processes:
            current = process.stats.response_time
            previous = self._responses.get(process.index)

            if previous is not None and current != previous:
                violations.append(Violation(
                    time=env.clock,
                    type="response_changed",
                    details={"process": process.index + 1, "old": previous, "new": current}
                ))

            if process.stats.responded:
                self._responses[process.index] = current

        return violations

    def _check_priorities(self, env: "SchedulerEnv") -> list[Violation]:
        """Check MLFQ priorities only ever climb, up to their maximum."""
        violations = []

        for process in env.processes:
            level = process.mlfq
            if level is None:
                continue

            previous = self._priorities.get(process.index)
            if previous is not None and level.priority < previous:
                violations.append(Violation(
                    time=env.clock,
                    type="priority_decreased",
                    details={"process": process.index + 1, "old": previous, "new": level.priority}
                ))

            if level.priority > level.max_priority:
                violations.append(Violation(
                    time=env.clock,
                    type="priority_overflow",
                    details={
                        "process": process.index + 1,
                        "priority": level.priority,
                        "max_priority": level.max_priority
                    }
                ))

            self._priorities[process.index] = level.priority

        return violations
