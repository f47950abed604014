"""First-Come-First-Served policy."""

from schedsim.policies.base import Policy


class FCFSPolicy(Policy):
    """
    Run-to-block in arrival order.

    No reordering at all: the CPU-ready queue keeps table order at start and
    I/O-return order afterwards.
    """

    name = "FCFS"

    @property
    def description(self) -> str:
        return "First-Come-First-Served: run to block in arrival order"
