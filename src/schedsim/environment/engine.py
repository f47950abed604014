"""SchedulerEnv - Tick engine for schedsim."""

import logging
from typing import TYPE_CHECKING

from schedsim.data_models.observation import Observation
from schedsim.data_models.process import Process
from schedsim.data_models.transition import Transition
from schedsim.environment.loader import WorkloadConfig, load_processes

if TYPE_CHECKING:
    from schedsim.policies.base import Policy

logger = logging.getLogger("schedsim.environment.engine")


class SchedulerEnv:
    """
    Discrete-time single-CPU scheduling environment.

    Owns the process table, the CPU-ready and I/O-wait queues (which hold
    table indices), the logical clock and the CPU-busy counter. Each call to
    step() advances the clock by exactly one tick and then lets the active
    policy decide the queue transitions for the process that was served.
    """

    def __init__(self, config: WorkloadConfig, policy: "Policy") -> None:
        """
        Initialize the environment for one workload and policy.

        Args:
            config: Validated workload
            policy: Scheduling policy consulted after every tick
        """
        self.config = config
        self.policy = policy

        # State variables
        self.clock = 0
        self.cpu_busy_time = 0
        self.processes: list[Process] = []

        # Queues hold indices into self.processes
        self.cpu_queue: list[int] = []
        self.io_queue: list[int] = []
        self.completed: list[int] = []

        # Track events for the current tick (for observation)
        self.current_served: int | None = None
        self.current_io_returns: list[int] = []
        self.current_finished: list[int] = []

    @property
    def done(self) -> bool:
        """True once both queues are empty."""
        return not self.cpu_queue and not self.io_queue

    def reset(self) -> Observation:
        """
        Reset the simulation and apply the policy's initial ordering.

        The process table is reset in place. Every process starts in the
        CPU-ready queue in table order.

        Returns:
            Initial observation
        """
        self.clock = 0
        self.cpu_busy_time = 0

        load_processes(self.config, self.processes)

        self.cpu_queue.clear()
        self.io_queue.clear()
        self.completed.clear()
        self.cpu_queue.extend(p.index for p in self.processes)

        self.current_served = None
        self.current_io_returns.clear()
        self.current_finished.clear()

        for transition in self.policy.initialize(self):
            self.apply_transition(transition)

        logger.debug(
            f"Reset {self.policy.name} run: {len(self.processes)} processes, "
            f"ready order {self.cpu_queue}"
        )
        return self.observe()

    def step(self) -> tuple[Observation, bool]:
        """
        Advance simulated time by one tick.

        Process flow:
        1. Serve the CPU-ready head for one tick
        2. Serve every process in the I/O-wait queue for one tick
        3. Advance the clock
        4. Apply the policy's transitions for the served process

        Returns:
            Tuple of (observation, done)
            - done is True when both queues are empty
        """
        self.current_io_returns.clear()
        self.current_finished.clear()

        self.current_served = self._run_cpu()
        finished_in_io = self._run_io()

        self.clock += 1

        # Completion is stamped at the tick boundary
        for pid in finished_in_io:
            self._finish(pid)

        for transition in self.policy.decide(self, self.current_served):
            self.apply_transition(transition)

        return self.observe(), self.done

    def _run_cpu(self) -> int | None:
        """
        Serve the CPU-ready head for one tick.

        Returns:
            Index of the served process, or None if the CPU was idle
        """
        if not self.cpu_queue:
            return None

        pid = self.cpu_queue[0]
        process = self.processes[pid]
        task = process.current_task
        if task is None:
            return None

        task.duration -= 1
        process.stats.burst_time += 1
        self.cpu_busy_time += 1

        if not process.stats.responded:
            process.stats.response_time = self.clock

        for other in self.cpu_queue[1:]:
            self.processes[other].stats.waiting_time += 1

        return pid

    def _run_io(self) -> list[int]:
        """
        Serve every process in the I/O-wait queue for one tick.

        Processes whose I/O burst finishes move to the CPU-ready tail in
        I/O-queue order. Parked processes go back without doing any I/O.

        Returns:
            Indices of processes whose last task finished in I/O
        """
        finished = []

        for pid in list(self.io_queue):
            process = self.processes[pid]

            if process.parked:
                process.parked = False
                process.stats.waiting_time += 1
                self._move_to_cpu(pid)
                continue

            task = process.current_task
            if task is None:
                self.io_queue.remove(pid)
                finished.append(pid)
                continue

            task.duration -= 1
            process.stats.io_time += 1

            if task.spent:
                process.complete_current_task()
                if process.finished:
                    self.io_queue.remove(pid)
                    finished.append(pid)
                else:
                    self._move_to_cpu(pid)

        return finished

    def _move_to_cpu(self, pid: int) -> None:
        self.io_queue.remove(pid)
        self.cpu_queue.append(pid)
        self.current_io_returns.append(pid)

    def _finish(self, pid: int) -> None:
        """Record completion and retire a process from all queues."""
        process = self.processes[pid]
        process.stats.completion_time = self.clock
        if pid not in self.completed:
            self.completed.append(pid)
        self.current_finished.append(pid)
        logger.debug(f"{process.label} finished at t={self.clock}")

    def apply_transition(self, transition: Transition) -> None:
        """
        Apply a single policy transition to the queues.

        Transitions that do not match the current queue state are ignored.

        Args:
            transition: The transition to apply
        """
        if transition.type == "reorder":
            order = transition.order or []
            if sorted(order) != sorted(self.cpu_queue):
                logger.warning(f"Ignoring reorder that is not a permutation of {self.cpu_queue}: {order}")
                return
            self.cpu_queue[:] = order
            return

        pid = transition.process
        if pid is None or not self.cpu_queue or self.cpu_queue[0] != pid:
            logger.warning(f"Ignoring {transition}: process is not at the CPU-ready head")
            return

        process = self.processes[pid]

        if transition.type == "complete_burst":
            task = process.current_task
            if task is None or not task.spent:
                logger.warning(f"Ignoring {transition}: current burst is not finished")
                return

            process.complete_current_task()
            self.cpu_queue.pop(0)
            if process.finished:
                self._finish(pid)
            else:
                self.io_queue.append(pid)

        elif transition.type == "demote":
            if process.mlfq is not None and transition.priority is not None:
                process.mlfq.priority = transition.priority
            process.parked = True
            self.cpu_queue.pop(0)
            self.io_queue.append(pid)

    def observe(self) -> Observation:
        """
        Build the current observation snapshot.

        Returns:
            Observation containing queue state and this tick's events
        """
        return Observation(
            time=self.clock,
            served=self.current_served,
            cpu_queue=self.cpu_queue.copy(),
            io_queue=self.io_queue.copy(),
            completed=self.completed.copy(),
            io_returns=self.current_io_returns.copy(),
            finished_this_tick=self.current_finished.copy(),
        )

    def get_state_summary(self) -> dict[str, int]:
        """
        Get a summary of current state counts.

        Returns:
            Dictionary with clock, busy time and queue sizes
        """
        return {
            "time": self.clock,
            "cpu_busy_time": self.cpu_busy_time,
            "ready": len(self.cpu_queue),
            "io_wait": len(self.io_queue),
            "completed": len(self.completed),
            "total_processes": len(self.processes),
        }
