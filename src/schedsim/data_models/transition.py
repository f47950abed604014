"""Transition data model: queue mutations requested by a scheduling policy."""

from typing import Literal

from pydantic import BaseModel, Field


class Transition(BaseModel):
    """
    Represents one queue mutation a policy asks the engine to perform.

    Policies never touch the queues themselves; they return transitions and
    the engine applies them in order.
    """

    type: Literal["complete_burst", "demote", "reorder"] = Field(
        description="Kind of queue mutation"
    )
    process: int | None = Field(
        default=None, ge=0, description="Index of the process at the CPU-ready head"
    )
    order: list[int] | None = Field(
        default=None, description="New CPU-ready order (reorder only)"
    )
    priority: int | None = Field(
        default=None, ge=0, description="New MLFQ priority level (demote only)"
    )

    def __str__(self) -> str:
        """Human-readable string representation."""
        if self.type == "reorder":
            return f"Transition(reorder → {self.order})"
        if self.type == "demote":
            return f"Transition(demote P{(self.process or 0) + 1} → priority {self.priority})"
        return f"Transition({self.type} P{(self.process or 0) + 1})"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return (
            f"Transition(type={self.type!r}, process={self.process}, "
            f"order={self.order}, priority={self.priority})"
        )
