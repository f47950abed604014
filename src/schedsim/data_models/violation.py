"""Violation data model for simulation invariant breaches."""

from pydantic import BaseModel, Field


class Violation(BaseModel):
    """
    Represents a broken simulation invariant.

    Violations are recorded on the run result; the run itself continues to
    completion.
    """

    time: int = Field(ge=0, description="Clock value when the violation was detected")
    type: str = Field(
        description="Type of violation: queue_overlap, queue_duplicate, lost_process, "
        "response_changed, priority_decreased, priority_overflow"
    )
    details: dict = Field(
        default_factory=dict,
        description="Additional context: process, queues, old/new values, etc."
    )

    def __str__(self) -> str:
        """Human-readable string representation."""
        details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
        return f"[t={self.time}] {self.type}: {details_str}"
